"""Swarm state and initialization for particle swarm optimization."""

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from numopt.constants import DType


class Particle(NamedTuple):
    """A view of a single particle. The arrays alias the swarm's storage."""

    position: np.ndarray
    velocity: np.ndarray
    best_position: np.ndarray
    best_objective: float


@dataclass
class Swarm:
    """State of every particle, stacked along the first axis.

    For an iterate of shape S and P particles, the position-like arrays have shape (P, *S) and the
    objective arrays have shape (P,).
    """

    positions: np.ndarray
    velocities: np.ndarray
    objectives: np.ndarray
    best_positions: np.ndarray
    best_objectives: np.ndarray

    def __len__(self) -> int:
        return self.positions.shape[0]

    def __getitem__(self, index: int) -> Particle:
        return Particle(
            position=self.positions[index],
            velocity=self.velocities[index],
            best_position=self.best_positions[index],
            best_objective=float(self.best_objectives[index]),
        )

    @property
    def best_index(self) -> int:
        """Index of the particle with the lowest personal best."""
        return int(np.argmin(self.best_objectives))

    @property
    def best_position(self) -> np.ndarray:
        """The best position found by any particle."""
        return self.best_positions[self.best_index]

    @property
    def best_objective(self) -> float:
        """The best objective found by any particle."""
        return float(self.best_objectives[self.best_index])

    def record_objectives(self) -> None:
        """Promote current positions to personal bests wherever they improved on them."""
        improved = self.objectives < self.best_objectives
        self.best_positions[improved] = self.positions[improved]
        self.best_objectives[improved] = self.objectives[improved]


class DefaultInit:
    """Scatter particles uniformly within the bounds, with uniform random velocities in [0, velocity_scale)."""

    def __init__(self, velocity_scale: float = 1.0) -> None:
        """Initialize the policy. A `velocity_scale` of 0 starts every particle at rest."""
        self.velocity_scale = velocity_scale

    def initialize(
        self,
        shape: Tuple[int, ...],
        num_particles: int,
        lower_bound: np.ndarray,
        upper_bound: np.ndarray,
        rng: np.random.Generator,
        dtype: DType,
    ) -> Swarm:
        """Create a swarm of `num_particles` for an iterate of the given shape.

        Objectives start at +inf; the optimizer evaluates the initial positions.
        """
        swarm_shape = (num_particles, *shape)
        positions = lower_bound + rng.random(swarm_shape) * (upper_bound - lower_bound)
        velocities = self.velocity_scale * rng.random(swarm_shape)
        return Swarm(
            positions=positions.astype(dtype),
            velocities=velocities.astype(dtype),
            objectives=np.full(num_particles, np.inf),
            best_positions=positions.astype(dtype),
            best_objectives=np.full(num_particles, np.inf),
        )
