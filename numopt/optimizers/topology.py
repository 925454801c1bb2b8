"""Velocity update policies for particle swarm optimization.

Each policy defines whose personal best a particle is socially attracted to: its ring neighbors (local
best) or the whole swarm (global best). The velocity update itself is shared:

    v <- chi * (v + c1 * r1 * (personal_best - x) + c2 * r2 * (neighborhood_best - x))

where c1 is the exploitation factor, c2 the exploration factor, r1 and r2 are drawn uniformly from [0, 1)
independently per coordinate and per particle, and chi is Clerc's constriction coefficient. If `inertia`
is set, the classic inertia-weight form `v <- w * v + ...` is used instead and chi is not applied.
"""

import abc
from typing import Optional

import numpy as np

from numopt.exceptions import ConfigurationError
from numopt.optimizers.swarm import Swarm


class VelocityUpdate(abc.ABC):
    """Abstract base class for a swarm velocity update policy."""

    def __init__(
        self,
        exploitation_factor: float = 2.05,
        exploration_factor: float = 2.05,
        inertia: Optional[float] = None,
    ) -> None:
        """Initialize the policy."""
        self.exploitation_factor = exploitation_factor
        self.exploration_factor = exploration_factor
        self.inertia = inertia

    @property
    def constriction(self) -> float:
        """Clerc's constriction coefficient chi = 2 / |2 - phi - sqrt(phi^2 - 4 phi)|."""
        phi = self.exploitation_factor + self.exploration_factor
        return 2.0 / abs(2.0 - phi - np.sqrt(phi * phi - 4.0 * phi))

    def validate(self, num_particles: int) -> None:
        """Raise ConfigurationError if the policy cannot drive a swarm of this size."""
        if self.inertia is None and self.exploitation_factor + self.exploration_factor <= 4.0:
            raise ConfigurationError(
                "The constriction coefficient needs exploitation_factor + exploration_factor > 4; "
                "set `inertia` to use the inertia-weight update instead"
            )

    @abc.abstractmethod
    def neighborhood_best(self, swarm: Swarm) -> np.ndarray:
        """The best personal-best position visible to each particle, shape (P, *S)."""
        raise NotImplementedError

    def update(self, swarm: Swarm, rng: np.random.Generator) -> None:
        """Update every particle's velocity, then move it."""
        social_target = self.neighborhood_best(swarm)

        r_1 = rng.random(swarm.positions.shape)
        r_2 = rng.random(swarm.positions.shape)
        cognitive = self.exploitation_factor * r_1 * (swarm.best_positions - swarm.positions)
        social = self.exploration_factor * r_2 * (social_target - swarm.positions)

        if self.inertia is None:
            velocities = self.constriction * (swarm.velocities + cognitive + social)
        else:
            velocities = self.inertia * swarm.velocities + cognitive + social

        swarm.velocities[...] = velocities
        swarm.positions += swarm.velocities


class LBestUpdate(VelocityUpdate):
    """Local-best topology: each particle sees the `neighborhood_size` particles on either side of it in a ring."""

    def __init__(
        self,
        neighborhood_size: int = 1,
        exploitation_factor: float = 2.05,
        exploration_factor: float = 2.05,
        inertia: Optional[float] = None,
    ) -> None:
        """Initialize the policy."""
        super().__init__(
            exploitation_factor=exploitation_factor,
            exploration_factor=exploration_factor,
            inertia=inertia,
        )
        self.neighborhood_size = neighborhood_size

    def validate(self, num_particles: int) -> None:
        """Raise ConfigurationError if the policy cannot drive a swarm of this size."""
        super().validate(num_particles)
        if self.neighborhood_size < 0:
            raise ConfigurationError("`neighborhood_size` must be non-negative")

    def neighbor_indices(self, num_particles: int) -> np.ndarray:
        """Ring neighbors of every particle, including itself, shape (P, 2k + 1)."""
        offsets = np.arange(-self.neighborhood_size, self.neighborhood_size + 1)
        return (np.arange(num_particles)[:, None] + offsets[None, :]) % num_particles

    def neighborhood_best(self, swarm: Swarm) -> np.ndarray:
        """The best personal-best position among each particle's ring neighbors."""
        neighbors = self.neighbor_indices(len(swarm))
        winners = neighbors[np.arange(len(swarm)), np.argmin(swarm.best_objectives[neighbors], axis=1)]
        return swarm.best_positions[winners]


class GBestUpdate(VelocityUpdate):
    """Global-best topology: every particle sees the best personal best of the whole swarm."""

    def neighborhood_best(self, swarm: Swarm) -> np.ndarray:
        """The swarm's best position, repeated for every particle."""
        return np.broadcast_to(swarm.best_position, swarm.positions.shape)
