"""Implements the stochastic gradient descent driver shared by the gradient-based optimizers."""

import logging
import sys
from typing import Any, Optional

import numpy as np

from numopt.callbacks.base import dispatch
from numopt.constants import Coordinates
from numopt.exceptions import ConfigurationError
from numopt.functions.base import DifferentiableFunction, SeparableFunction, as_separable
from numopt.optimizers.base import Optimizer, check_iterate
from numopt.policies import DecayPolicy, NoDecay, UpdatePolicy, VanillaUpdate
from numopt.utils.timer import Stopwatch


logger = logging.getLogger(__name__)


class StochasticGradientDescent(Optimizer):
    """Mini-batch stochastic gradient descent with pluggable update and decay policies.

    The objective is treated as a sum of `num_functions()` terms (a non-separable function is a single
    term). Terms are visited in consecutive batches of `batch_size`; one pass over all terms is an epoch.
    The update policy turns each batch gradient into a parameter change, and the decay policy adjusts the
    step size after every batch.

    `max_iterations` counts visited terms, not batches or epochs; 0 means no limit. The run also ends when
    the epoch objective changes by less than `tolerance`, when it becomes non-finite, or when a callback
    asks to stop.

    With `reset_policy=True` the update and decay policies start from scratch on every call. Otherwise their
    state (e.g. moment estimates) carries over, so a second call resumes where the first left off.

    With `exact_objective=False`, the epoch objective is the sum of the batch objectives, each measured
    just before its step. With `exact_objective=True` it is recomputed with a full pass at the end of every
    epoch and at the end of the run.
    """

    def __init__(
        self,
        step_size: float = 0.01,
        batch_size: int = 32,
        max_iterations: int = 100000,
        tolerance: float = 1e-5,
        shuffle: bool = True,
        update_policy: Optional[UpdatePolicy] = None,
        decay_policy: Optional[DecayPolicy] = None,
        reset_policy: bool = True,
        exact_objective: bool = False,
        seed: Optional[int] = None,
    ) -> None:
        """Initialize the optimizer."""
        self.step_size = step_size
        self.batch_size = batch_size
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.shuffle = shuffle
        self.update_policy = update_policy if update_policy is not None else VanillaUpdate()
        self.decay_policy = decay_policy if decay_policy is not None else NoDecay()
        self.reset_policy = reset_policy
        self.exact_objective = exact_objective
        self.seed = seed

    def set_learning_rate(self, lr: float) -> None:
        """Update the step size."""
        self.step_size = lr

    def _prepare_policies(self, iterate: Coordinates) -> None:
        if self.reset_policy or self.update_policy.shape != iterate.shape:
            if not self.reset_policy and self.update_policy.is_initialized:
                logger.warning(
                    "Update policy state has shape %s but the iterate has shape %s; resetting it",
                    self.update_policy.shape,
                    iterate.shape,
                )
            self.update_policy.reset()
            self.update_policy.initialize(iterate.shape, iterate.dtype)
            self.decay_policy.reset()

    def _full_objective(self, function: SeparableFunction, iterate: Coordinates) -> float:
        num_functions = function.num_functions()
        objective = 0.0
        for begin in range(0, num_functions, self.batch_size):
            objective += function.evaluate_batch(iterate, begin, min(self.batch_size, num_functions - begin))
        return objective

    def optimize(self, function: DifferentiableFunction, iterate: Coordinates, *callbacks: Any) -> float:
        """Minimize `function` starting from `iterate`, which is overwritten with the final point.

        Raises:
            ConfigurationError: before touching `iterate`, if the run is impossible as configured.
        """
        check_iterate(iterate)
        if self.batch_size < 1:
            raise ConfigurationError("`batch_size` must be at least 1")
        separable = as_separable(function)
        if separable.num_functions() < 1:
            raise ConfigurationError("A separable function must have at least one term")

        self._prepare_policies(iterate)

        with Stopwatch() as stopwatch:
            try:
                objective = self._run(function, separable, iterate, callbacks)
            finally:
                separable.reset_order()
            dispatch(callbacks, "end_optimization", self, function, iterate)

        logger.debug("SGD: finished in %s", stopwatch.milliseconds_formatted)
        return objective

    def _run(
        self,
        function: DifferentiableFunction,
        separable: SeparableFunction,
        iterate: Coordinates,
        callbacks: Any,
    ) -> float:
        num_functions = separable.num_functions()
        max_iterations = self.max_iterations if self.max_iterations > 0 else sys.maxsize
        rng = np.random.default_rng(self.seed)

        gradient = np.zeros_like(iterate)
        step_size = self.step_size

        epoch = 0
        current_function = 0
        overall_objective = 0.0
        last_objective = float("inf")

        if self.shuffle:
            separable.shuffle(rng.permutation(num_functions))

        terminate = dispatch(callbacks, "begin_optimization", self, function, iterate)

        i = 0
        while i < max_iterations and not terminate:
            # The batch can't run past the iteration limit or past the end of the epoch.
            effective_batch_size = min(self.batch_size, max_iterations - i, num_functions - current_function)

            if dispatch(callbacks, "begin_step", self, function, iterate):
                break

            # The objective is measured before the step; it is the cheap estimate used below.
            objective = separable.evaluate_with_gradient_batch(
                iterate, current_function, effective_batch_size, gradient
            )
            overall_objective += objective
            if dispatch(callbacks, "evaluate_with_gradient", self, function, iterate, objective, gradient):
                break

            self.update_policy.update(iterate, step_size, gradient)
            if dispatch(callbacks, "end_step", self, function, iterate):
                break

            step_size = self.decay_policy.update(iterate, step_size, gradient)

            i += effective_batch_size
            current_function += effective_batch_size

            if current_function < num_functions:
                continue

            # End of an epoch.
            if self.exact_objective:
                overall_objective = self._full_objective(separable, iterate)
            terminate = dispatch(
                callbacks, "end_epoch", self, function, iterate, epoch, overall_objective / num_functions
            )
            logger.debug("SGD: iteration %d, objective %.10g", i, overall_objective)

            if not np.isfinite(overall_objective):
                logger.warning(
                    "SGD: converged to %s; terminating with failure. Try a smaller step size?", overall_objective
                )
                return overall_objective

            if abs(last_objective - overall_objective) < self.tolerance:
                logger.info("SGD: minimized within tolerance %g; terminating optimization", self.tolerance)
                return overall_objective

            last_objective = overall_objective
            overall_objective = 0.0
            current_function = 0
            epoch += 1

            if self.shuffle:
                separable.shuffle(rng.permutation(num_functions))

            if not terminate:
                terminate = dispatch(callbacks, "begin_epoch", self, function, iterate, epoch, last_objective)

        if i >= max_iterations:
            logger.info("SGD: maximum iterations (%d) reached; terminating optimization", self.max_iterations)
        else:
            logger.info("SGD: stop requested by a callback after %d iterations", i)

        if self.exact_objective or (current_function == 0 and epoch == 0):
            return self._full_objective(separable, iterate)
        if current_function == 0:
            # Stopped on an epoch boundary; the last complete epoch is the best estimate available.
            return last_objective
        return overall_objective
