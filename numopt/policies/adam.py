"""Implements the Adam update rule."""

from typing import Optional, Tuple

import numpy as np

from numopt.constants import Coordinates, DType
from numopt.policies.base import UpdatePolicy


class AdamUpdate(UpdatePolicy):
    """Adam: step along the bias-corrected first moment, scaled per coordinate by the second moment."""

    def __init__(
        self,
        epsilon: float = 1e-8,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
    ) -> None:
        """Initialize the policy."""
        super().__init__()
        self.epsilon = epsilon
        self.beta_1 = beta_1
        self.beta_2 = beta_2

        self.t = 0
        self.m: Optional[np.ndarray] = None
        self.v: Optional[np.ndarray] = None

    def initialize(self, shape: Tuple[int, ...], dtype: DType) -> None:
        """Allocate zero moment estimates."""
        super().initialize(shape, dtype)
        self.t = 0
        self.m = np.zeros(shape, dtype=dtype)
        self.v = np.zeros(shape, dtype=dtype)

    def reset(self) -> None:
        """Forget the moment estimates."""
        super().reset()
        self.t = 0
        self.m = None
        self.v = None

    def apply(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Apply the update rule."""
        assert self.m is not None and self.v is not None

        self.t = self.t + 1
        self.m = (self.beta_1) * self.m + (1 - self.beta_1) * gradient
        self.v = (self.beta_2) * self.v + (1 - self.beta_2) * np.square(gradient)
        m_hat = self.m / (1 - np.power(self.beta_1, self.t))
        v_hat = self.v / (1 - np.power(self.beta_2, self.t))

        iterate -= step_size * m_hat / (np.sqrt(v_hat) + self.epsilon)
