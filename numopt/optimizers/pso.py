"""Implements particle swarm optimization (PSO)."""

import collections
import itertools
import logging
from typing import Any, Optional

import numpy as np

from numopt.callbacks.base import dispatch
from numopt.constants import Coordinates
from numopt.exceptions import ConfigurationError
from numopt.functions.base import ObjectiveFunction
from numopt.optimizers.base import Forwarded, Optimizer, check_iterate
from numopt.optimizers.swarm import DefaultInit, Swarm
from numopt.optimizers.topology import GBestUpdate, LBestUpdate, VelocityUpdate
from numopt.utils.arrays import Bound, broadcast_bound
from numopt.utils.timer import Stopwatch


logger = logging.getLogger(__name__)


class ParticleSwarmOptimizer(Optimizer):
    """Population-based, gradient-free minimization.

    A swarm of `num_particles` is scattered within `[lower_bound, upper_bound]` by the init policy. Every
    iteration the velocity policy moves each particle towards its own best position and the best position
    of its neighborhood, then every particle is re-evaluated and personal bests are updated.

    Bounds may be scalars or have one element per coordinate. They only constrain the initial swarm unless
    `clamp` is set, in which case positions are clipped to them after every move.

    The run ends after `max_iterations` iterations (0 means no limit), when the swarm's best objective has
    improved by less than `improvement_tolerance` over the last `horizon_size` iterations, or when a
    callback asks to stop. The iterate is kept equal to the best position found so far, and the best
    objective is returned.

    All random draws are uniform on [0, 1) from `numpy.random.default_rng(seed)`, created afresh on every
    call.
    """

    def __init__(
        self,
        num_particles: int = 64,
        lower_bound: Bound = -1.0,
        upper_bound: Bound = 1.0,
        max_iterations: int = 3000,
        horizon_size: int = 350,
        improvement_tolerance: float = 1e-10,
        velocity_update: Optional[VelocityUpdate] = None,
        init_policy: Optional[DefaultInit] = None,
        clamp: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the optimizer."""
        self.num_particles = num_particles
        self.lower_bound = lower_bound
        self.upper_bound = upper_bound
        self.max_iterations = max_iterations
        self.horizon_size = horizon_size
        self.improvement_tolerance = improvement_tolerance
        self.velocity_update = velocity_update if velocity_update is not None else LBestUpdate()
        self.init_policy = init_policy if init_policy is not None else DefaultInit()
        self.clamp = clamp
        self.seed = seed

        # Only set for the duration of a call to optimize().
        self.swarm: Optional[Swarm] = None

    def _evaluate_swarm(self, function: ObjectiveFunction, swarm: Swarm, callbacks: Any) -> bool:
        terminate = False
        for p in range(len(swarm)):
            swarm.objectives[p] = function.evaluate(swarm.positions[p])
            terminate |= dispatch(callbacks, "evaluate", self, function, swarm.positions[p], swarm.objectives[p])
        swarm.record_objectives()
        return terminate

    def optimize(self, function: ObjectiveFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function`; `iterate` gives the shape of a position and receives the best one found.

        Raises:
            ConfigurationError: before touching `iterate`, if the run is impossible as configured.
        """
        check_iterate(iterate)
        if self.num_particles < 1:
            raise ConfigurationError("The swarm must have at least one particle")
        if self.horizon_size < 1:
            raise ConfigurationError("`horizon_size` must be at least 1")
        lower_bound = broadcast_bound(self.lower_bound, iterate.shape, iterate.dtype, name="lower_bound")
        upper_bound = broadcast_bound(self.upper_bound, iterate.shape, iterate.dtype, name="upper_bound")
        if np.any(lower_bound > upper_bound):
            raise ConfigurationError("`lower_bound` must not exceed `upper_bound`")
        self.velocity_update.validate(self.num_particles)

        rng = np.random.default_rng(self.seed)

        with Stopwatch() as stopwatch:
            try:
                self.swarm = self.init_policy.initialize(
                    iterate.shape, self.num_particles, lower_bound, upper_bound, rng, iterate.dtype
                )
                objective = self._run(function, iterate, self.swarm, lower_bound, upper_bound, rng, callbacks)
                dispatch(callbacks, "end_optimization", self, function, iterate)
            finally:
                self.swarm = None

        logger.debug("PSO: finished in %s", stopwatch.milliseconds_formatted)
        return objective

    def _run(
        self,
        function: ObjectiveFunction,
        iterate: Coordinates,
        swarm: Swarm,
        lower_bound: np.ndarray,
        upper_bound: np.ndarray,
        rng: np.random.Generator,
        callbacks: Any,
    ) -> float:
        if dispatch(callbacks, "begin_optimization", self, function, iterate):
            logger.info("PSO: stop requested by a callback before the swarm was evaluated")
            return function.evaluate(iterate)

        terminate = self._evaluate_swarm(function, swarm, callbacks)
        iterate[...] = swarm.best_position
        if terminate:
            logger.info("PSO: stop requested by a callback during initialization")
            return swarm.best_objective

        history: collections.deque = collections.deque(maxlen=self.horizon_size)
        iterations = range(self.max_iterations) if self.max_iterations > 0 else itertools.count()
        for iteration in iterations:
            if iteration > 0 and dispatch(
                callbacks, "begin_epoch", self, function, iterate, iteration, swarm.best_objective
            ):
                break
            if dispatch(callbacks, "begin_step", self, function, iterate):
                break

            self.velocity_update.update(swarm, rng)
            if self.clamp:
                np.clip(swarm.positions, lower_bound, upper_bound, out=swarm.positions)

            terminate = self._evaluate_swarm(function, swarm, callbacks)
            iterate[...] = swarm.best_position
            best_objective = swarm.best_objective

            terminate |= dispatch(callbacks, "end_step", self, function, iterate)
            terminate |= dispatch(callbacks, "end_epoch", self, function, iterate, iteration, best_objective)
            if terminate:
                logger.info("PSO: stop requested by a callback after %d iterations", iteration + 1)
                break

            logger.debug("PSO: iteration %d, best objective %.10g", iteration, best_objective)

            history.append(best_objective)
            if len(history) == self.horizon_size and history[0] - history[-1] < self.improvement_tolerance:
                logger.info(
                    "PSO: improvement below %g over %d iterations; terminating optimization",
                    self.improvement_tolerance,
                    self.horizon_size,
                )
                break
        else:
            logger.info("PSO: maximum iterations (%d) reached; terminating optimization", self.max_iterations)

        return swarm.best_objective


class LBestPSO(Optimizer):
    """Particle swarm optimization with a local-best (ring) topology."""

    num_particles = Forwarded("optimizer", "num_particles")
    lower_bound = Forwarded("optimizer", "lower_bound")
    upper_bound = Forwarded("optimizer", "upper_bound")
    max_iterations = Forwarded("optimizer", "max_iterations")
    horizon_size = Forwarded("optimizer", "horizon_size")
    improvement_tolerance = Forwarded("optimizer", "improvement_tolerance")
    clamp = Forwarded("optimizer", "clamp")
    seed = Forwarded("optimizer", "seed")

    exploitation_factor = Forwarded("optimizer", "velocity_update", "exploitation_factor")
    exploration_factor = Forwarded("optimizer", "velocity_update", "exploration_factor")
    inertia = Forwarded("optimizer", "velocity_update", "inertia")
    neighborhood_size = Forwarded("optimizer", "velocity_update", "neighborhood_size")

    def __init__(
        self,
        num_particles: int = 64,
        lower_bound: Bound = -1.0,
        upper_bound: Bound = 1.0,
        max_iterations: int = 3000,
        horizon_size: int = 350,
        improvement_tolerance: float = 1e-10,
        exploitation_factor: float = 2.05,
        exploration_factor: float = 2.05,
        inertia: Optional[float] = None,
        neighborhood_size: int = 1,
        clamp: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the optimizer."""
        self.optimizer = ParticleSwarmOptimizer(
            num_particles=num_particles,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            max_iterations=max_iterations,
            horizon_size=horizon_size,
            improvement_tolerance=improvement_tolerance,
            velocity_update=LBestUpdate(
                neighborhood_size=neighborhood_size,
                exploitation_factor=exploitation_factor,
                exploration_factor=exploration_factor,
                inertia=inertia,
            ),
            clamp=clamp,
            seed=seed,
        )

    def optimize(self, function: ObjectiveFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function`; `iterate` gives the shape of a position and receives the best one found."""
        return self.optimizer.optimize(function, iterate, *callbacks)


class GBestPSO(Optimizer):
    """Particle swarm optimization with a global-best topology."""

    num_particles = Forwarded("optimizer", "num_particles")
    lower_bound = Forwarded("optimizer", "lower_bound")
    upper_bound = Forwarded("optimizer", "upper_bound")
    max_iterations = Forwarded("optimizer", "max_iterations")
    horizon_size = Forwarded("optimizer", "horizon_size")
    improvement_tolerance = Forwarded("optimizer", "improvement_tolerance")
    clamp = Forwarded("optimizer", "clamp")
    seed = Forwarded("optimizer", "seed")

    exploitation_factor = Forwarded("optimizer", "velocity_update", "exploitation_factor")
    exploration_factor = Forwarded("optimizer", "velocity_update", "exploration_factor")
    inertia = Forwarded("optimizer", "velocity_update", "inertia")

    def __init__(
        self,
        num_particles: int = 64,
        lower_bound: Bound = -1.0,
        upper_bound: Bound = 1.0,
        max_iterations: int = 3000,
        horizon_size: int = 350,
        improvement_tolerance: float = 1e-10,
        exploitation_factor: float = 2.05,
        exploration_factor: float = 2.05,
        inertia: Optional[float] = None,
        clamp: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the optimizer."""
        self.optimizer = ParticleSwarmOptimizer(
            num_particles=num_particles,
            lower_bound=lower_bound,
            upper_bound=upper_bound,
            max_iterations=max_iterations,
            horizon_size=horizon_size,
            improvement_tolerance=improvement_tolerance,
            velocity_update=GBestUpdate(
                exploitation_factor=exploitation_factor,
                exploration_factor=exploration_factor,
                inertia=inertia,
            ),
            clamp=clamp,
            seed=seed,
        )

    def optimize(self, function: ObjectiveFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function`; `iterate` gives the shape of a position and receives the best one found."""
        return self.optimizer.optimize(function, iterate, *callbacks)
