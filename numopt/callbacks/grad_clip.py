"""Implementations of callbacks that clip the gradient before it reaches the update policy."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from numopt.callbacks.base import Callback
from numopt.constants import Coordinates

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


class GradClipByNorm(Callback):
    """Rescales the gradient so that its L2 norm is at most `max_norm`."""

    def __init__(self, max_norm: float) -> None:
        """Initialize the callback."""
        self.max_norm = max_norm

    def gradient(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        gradient: np.ndarray,
    ) -> bool:
        """Clip the gradient in place."""
        norm = np.linalg.norm(gradient)
        if norm > self.max_norm:
            gradient *= self.max_norm / norm
        return False


class GradClipByValue(Callback):
    """Clamps every element of the gradient to `[min_value, max_value]`."""

    def __init__(self, min_value: float, max_value: float) -> None:
        """Initialize the callback."""
        if min_value > max_value:
            raise ValueError("`min_value` must not exceed `max_value`")
        self.min_value = min_value
        self.max_value = max_value

    def gradient(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        gradient: np.ndarray,
    ) -> bool:
        """Clip the gradient in place."""
        np.clip(gradient, self.min_value, self.max_value, out=gradient)
        return False
