"""Objective function interfaces and benchmark objectives."""

from .base import (
    DifferentiableFunction,
    ObjectiveFunction,
    SeparableFunction,
    SingleTermFunction,
    as_separable,
)
from .benchmarks import AckleyFunction, BealeFunction, HimmelblauFunction, ThreeHumpCamelFunction
from .linear_regression import LinearRegressionFunction
from .rosenbrock import GeneralizedRosenbrockFunction, RosenbrockFunction
from .sphere import SphereFunction
