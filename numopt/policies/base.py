"""Interfaces for update and decay policies.

An update policy turns a gradient and a step size into a change of the iterate. A decay policy adjusts the
step size between batches. Both may carry state (moment estimates, counters) across steps; the optimizer
decides whether that state survives from one `optimize()` call to the next.
"""

import abc
from typing import Optional, Tuple

import numpy as np

from numopt.constants import Coordinates, DType


class UpdatePolicy(abc.ABC):
    """Abstract base class for a per-step parameter update rule.

    State is allocated lazily to the shape of the first iterate it sees, or explicitly via `initialize()`.
    """

    def __init__(self) -> None:
        """Initialize the policy without any per-coordinate state."""
        self.shape: Optional[Tuple[int, ...]] = None

    @property
    def is_initialized(self) -> bool:
        """Whether per-coordinate state has been allocated."""
        return self.shape is not None

    def initialize(self, shape: Tuple[int, ...], dtype: DType) -> None:
        """Allocate zero-filled state for an iterate of the given shape and dtype."""
        self.shape = tuple(shape)

    def reset(self) -> None:
        """Forget all state; the next update allocates it afresh."""
        self.shape = None

    def update(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Update `iterate` in place based on the current value of the gradient."""
        assert gradient.shape == iterate.shape
        if self.shape != iterate.shape:
            self.initialize(iterate.shape, iterate.dtype)
        self.apply(iterate, step_size, gradient)

    @abc.abstractmethod
    def apply(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Apply the update rule to an iterate whose shape matches the allocated state."""
        raise NotImplementedError


class DecayPolicy(abc.ABC):
    """Abstract base class for a step size schedule."""

    def reset(self) -> None:
        """Forget all state."""

    @abc.abstractmethod
    def update(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> float:
        """Return the step size to use for the next batch."""
        raise NotImplementedError
