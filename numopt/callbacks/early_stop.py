"""Implementation of a callback that stops once the objective stops improving."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from numopt.callbacks.base import Callback
from numopt.constants import Coordinates

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


logger = logging.getLogger(__name__)


class EarlyStopAtMinLoss(Callback):
    """Stops the run when the epoch objective has not improved for `patience` consecutive epochs."""

    def __init__(self, patience: int = 10) -> None:
        """Initialize the callback."""
        self.patience = patience
        self.best_objective = float("inf")
        self.epochs_without_improvement = 0

    def begin_optimization(self, optimizer: Optimizer, function: ObjectiveFunction, coordinates: Coordinates) -> bool:
        """Reset the bookkeeping for a new run."""
        self.best_objective = float("inf")
        self.epochs_without_improvement = 0
        return False

    def end_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Request a stop once patience has run out."""
        if objective < self.best_objective:
            self.best_objective = objective
            self.epochs_without_improvement = 0
            return False

        self.epochs_without_improvement += 1
        if self.epochs_without_improvement >= self.patience:
            logger.info("No improvement over %d epochs; stopping at epoch %d", self.patience, epoch)
            return True
        return False
