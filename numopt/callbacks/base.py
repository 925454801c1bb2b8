"""The callback hook set fired by the optimizers.

Callbacks are observers invoked synchronously, in registration order, at fixed points of a run. A hook
returns True to ask the optimizer to stop; the optimizer finishes the current dispatch, then returns its
current objective and leaves the iterate at its last-updated value.

Hooks are looked up by name, so any object that defines a subset of them can be registered; subclassing
`Callback` is a convenience that supplies no-op defaults.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

import numpy as np

from numopt.constants import Coordinates

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


class Callback:
    """Base class for callbacks. Every hook is a no-op that does not request a stop."""

    def begin_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Called once before the first step."""
        return False

    def end_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> None:
        """Called once after the last step, however the run terminated."""

    def begin_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Called at the start of every epoch after the first."""
        return False

    def end_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Called at the end of every epoch with the epoch's objective."""
        return False

    def begin_step(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Called before every step."""
        return False

    def end_step(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Called after every step has been applied to the coordinates."""
        return False

    def evaluate(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        objective: float,
    ) -> bool:
        """Called after every objective evaluation."""
        return False

    def gradient(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        gradient: np.ndarray,
    ) -> bool:
        """Called after every gradient computation. The gradient may be modified in place."""
        return False

    def evaluate_with_gradient(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        objective: float,
        gradient: np.ndarray,
    ) -> bool:
        """Called after a combined objective and gradient computation.

        By default this forwards to both `evaluate()` and `gradient()`.
        """
        stop_on_evaluate = self.evaluate(optimizer, function, coordinates, objective)
        stop_on_gradient = self.gradient(optimizer, function, coordinates, gradient)
        return bool(stop_on_evaluate) or bool(stop_on_gradient)


def _evaluate_with_gradient(callback: Any, *args: Any) -> bool:
    # A callback without the combined hook still sees the objective and the gradient separately.
    optimizer, function, coordinates, objective, gradient = args
    stop = False
    evaluate = getattr(callback, "evaluate", None)
    if evaluate is not None and evaluate(optimizer, function, coordinates, objective):
        stop = True
    on_gradient = getattr(callback, "gradient", None)
    if on_gradient is not None and on_gradient(optimizer, function, coordinates, gradient):
        stop = True
    return stop


def dispatch(callbacks: Sequence[Any], hook: str, *args: Any) -> bool:
    """Fire `hook` on every callback that defines it and report whether any of them requested a stop.

    Every callback is invoked, even after one has requested a stop. A callback that does not define
    `evaluate_with_gradient` receives that event through its `evaluate` and `gradient` hooks.
    """
    stop = False
    for callback in callbacks:
        method = getattr(callback, hook, None)
        if method is None:
            if hook == "evaluate_with_gradient" and _evaluate_with_gradient(callback, *args):
                stop = True
            continue
        if method(*args):
            stop = True
    return stop
