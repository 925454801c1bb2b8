"""Implementation of a callback that reports progress through the logging module."""

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


class ProgressLogger(Callback):
    """Logs the objective every `log_every` epochs, and a summary when the run ends."""

    def __init__(self, log_every: int = 1, level: int = logging.INFO) -> None:
        """Initialize the callback."""
        self.log_every = log_every
        self.level = level
        self.steps = 0
        self.epochs = 0
        self.stopwatch = Stopwatch()

    def begin_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Reset the counters."""
        self.steps = 0
        self.epochs = 0
        self.stopwatch.start()
        return False

    def end_step(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Count the step."""
        self.steps += 1
        return False

    def end_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Log the epoch objective."""
        self.epochs += 1
        if self.epochs % self.log_every == 0:
            logger.log(
                self.level,
                "%s: epoch %d, steps %d, objective %.6g",
                type(optimizer).__name__,
                epoch,
                self.steps,
                objective,
            )
        return False

    def end_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> None:
        """Log a summary of the run."""
        self.stopwatch.stop()
        logger.log(
            self.level,
            "%s: finished after %d steps over %d epochs in %s",
            type(optimizer).__name__,
            self.steps,
            self.epochs,
            self.stopwatch.milliseconds_formatted,
        )
