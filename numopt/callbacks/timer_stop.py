"""Implementation of a callback that enforces a wall-clock budget."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from numopt.callbacks.base import Callback
from numopt.constants import Coordinates
from numopt.utils.timer import Stopwatch

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


logger = logging.getLogger(__name__)


class TimerStop(Callback):
    """Stops the run once `seconds` of wall-clock time have elapsed since it began."""

    def __init__(self, seconds: float) -> None:
        """Initialize the callback."""
        self.seconds = seconds
        self.stopwatch = Stopwatch()

    def begin_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Start the clock."""
        self.stopwatch.start()
        return False

    def end_step(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Request a stop once the budget is spent."""
        if self.stopwatch.seconds >= self.seconds:
            logger.info("Time budget of %.3fs exhausted after %s", self.seconds, self.stopwatch.milliseconds_formatted)
            return True
        return False

    def end_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> None:
        """Stop the clock."""
        self.stopwatch.stop()
