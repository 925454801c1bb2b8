"""Library implementation of various optimizers."""

from .base import Optimizer
from .sgd import StochasticGradientDescent
from .adam import Adam
from .padam import Padam
from .pso import GBestPSO, LBestPSO, ParticleSwarmOptimizer
from .swarm import DefaultInit, Particle, Swarm
from .topology import GBestUpdate, LBestUpdate, VelocityUpdate
