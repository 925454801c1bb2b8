"""Implements the Padam (partially adaptive momentum estimation) update rule."""

from typing import Optional, Tuple

import numpy as np

from numopt.constants import Coordinates, DType
from numopt.policies.base import UpdatePolicy


class PadamUpdate(UpdatePolicy):
    """Padam: an AMSGrad-style update whose denominator is a partial power of the second moment.

    With `partial = 0.5` the rule is AMSGrad; as `partial` goes to 0 it approaches SGD with momentum.
    See Chen & Gu, "Closing the Generalization Gap of Adaptive Gradient Methods in Training Deep Neural
    Networks" (https://arxiv.org/abs/1806.06763).
    """

    def __init__(
        self,
        epsilon: float = 1e-8,
        beta_1: float = 0.9,
        beta_2: float = 0.999,
        partial: float = 0.25,
    ) -> None:
        """Initialize the policy."""
        super().__init__()
        self.epsilon = epsilon
        self.beta_1 = beta_1
        self.beta_2 = beta_2
        self.partial = partial

        self.t = 0
        self.m: Optional[np.ndarray] = None
        self.v: Optional[np.ndarray] = None
        self.v_max: Optional[np.ndarray] = None

    def initialize(self, shape: Tuple[int, ...], dtype: DType) -> None:
        """Allocate zero moment estimates."""
        super().initialize(shape, dtype)
        self.t = 0
        self.m = np.zeros(shape, dtype=dtype)
        self.v = np.zeros(shape, dtype=dtype)
        self.v_max = np.zeros(shape, dtype=dtype)

    def reset(self) -> None:
        """Forget the moment estimates."""
        super().reset()
        self.t = 0
        self.m = None
        self.v = None
        self.v_max = None

    def apply(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> None:
        """Apply the update rule."""
        assert self.m is not None and self.v is not None and self.v_max is not None

        self.t = self.t + 1
        self.m = (self.beta_1) * self.m + (1 - self.beta_1) * gradient
        self.v = (self.beta_2) * self.v + (1 - self.beta_2) * np.square(gradient)
        bias_correction_1 = 1 - np.power(self.beta_1, self.t)
        bias_correction_2 = 1 - np.power(self.beta_2, self.t)

        # element-wise maximum of past and present second moments
        self.v_max = np.maximum(self.v_max, self.v)

        scale = step_size * np.sqrt(bias_correction_2) / bias_correction_1
        iterate -= scale * self.m / np.power(self.v_max + self.epsilon, self.partial)
