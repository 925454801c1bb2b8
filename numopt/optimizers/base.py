"""Interface for implementing optimizers."""

import abc
from typing import Any

import numpy as np

from numopt.constants import Coordinates
from numopt.exceptions import ConfigurationError
from numopt.functions.base import ObjectiveFunction


class Optimizer(abc.ABC):
    """Abstract base class for a function optimizer.

    `optimize()` mutates the caller's iterate in place and returns the final objective. Configuration lives
    in plain attributes that may be changed between calls.
    """

    @abc.abstractmethod
    def optimize(self, function: ObjectiveFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function` starting from `iterate`, which is overwritten with the final point."""
        raise NotImplementedError


def check_iterate(iterate: Coordinates) -> None:
    """Raise ConfigurationError unless `iterate` can be optimized in place."""
    if not isinstance(iterate, np.ndarray) or not np.issubdtype(iterate.dtype, np.floating):
        raise ConfigurationError("The iterate must be a floating-point numpy array")
    if iterate.size == 0:
        raise ConfigurationError("The iterate must have at least one coordinate")


class Forwarded:
    """Exposes an attribute of a composed object as a read/write attribute of the owner.

    `beta_1 = Forwarded("optimizer", "update_policy", "beta_1")` makes `owner.beta_1` read and write
    `owner.optimizer.update_policy.beta_1`.
    """

    def __init__(self, *path: str) -> None:
        """Initialize the descriptor with the attribute path, relative to the owning instance."""
        assert len(path) >= 1
        self.path = path

    def _target(self, instance: Any) -> Any:
        target = instance
        for name in self.path[:-1]:
            target = getattr(target, name)
        return target

    def __get__(self, instance: Any, owner: Any = None) -> Any:
        if instance is None:
            return self
        return getattr(self._target(instance), self.path[-1])

    def __set__(self, instance: Any, value: Any) -> None:
        setattr(self._target(instance), self.path[-1], value)
