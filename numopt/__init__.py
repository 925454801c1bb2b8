"""Numerical optimizers for differentiable, separable and black-box objective functions."""

from numopt.exceptions import ConfigurationError
from numopt.optimizers import (
    Adam,
    GBestPSO,
    LBestPSO,
    Optimizer,
    Padam,
    ParticleSwarmOptimizer,
    StochasticGradientDescent,
)
