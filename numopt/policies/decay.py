"""Implements step size schedules."""

import numpy as np

from numopt.constants import Coordinates
from numopt.policies.base import DecayPolicy


class NoDecay(DecayPolicy):
    """Keep the step size constant."""

    def update(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> float:
        """Return the step size unchanged."""
        return step_size


class ExponentialDecay(DecayPolicy):
    """Multiply the step size by `rate` once every `decay_steps` batches."""

    def __init__(self, rate: float = 0.99, decay_steps: int = 1) -> None:
        """Initialize the schedule."""
        if decay_steps < 1:
            raise ValueError("`decay_steps` must be positive")
        self.rate = rate
        self.decay_steps = decay_steps
        self.steps = 0

    def reset(self) -> None:
        """Restart the batch counter."""
        self.steps = 0

    def update(self, iterate: Coordinates, step_size: float, gradient: np.ndarray) -> float:
        """Return the step size to use for the next batch."""
        self.steps += 1
        if self.steps % self.decay_steps == 0:
            return step_size * self.rate
        return step_size
