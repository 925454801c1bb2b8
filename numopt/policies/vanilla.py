"""Implements plain and momentum gradient descent update rules."""

from typing import Optional, Tuple

import numpy as np

from numopt.constants import Coordinates, DType
from numopt.policies.base import UpdatePolicy


class VanillaUpdate(UpdatePolicy):
    """Step against the gradient: w <- w - lr * dw."""

    def apply(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Apply the update rule."""
        iterate -= step_size * gradient


class MomentumUpdate(UpdatePolicy):
    """Heavy-ball momentum: a velocity accumulates past gradients and moves the iterate."""

    def __init__(self, momentum: float = 0.5) -> None:
        """Initialize the policy."""
        super().__init__()
        self.momentum = momentum
        self.velocity: Optional[np.ndarray] = None

    def initialize(self, shape: Tuple[int, ...], dtype: DType) -> None:
        """Allocate a zero velocity."""
        super().initialize(shape, dtype)
        self.velocity = np.zeros(shape, dtype=dtype)

    def reset(self) -> None:
        """Forget the velocity."""
        super().reset()
        self.velocity = None

    def apply(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Apply the update rule."""
        assert self.velocity is not None
        self.velocity = self.momentum * self.velocity - step_size * gradient
        iterate += self.velocity
