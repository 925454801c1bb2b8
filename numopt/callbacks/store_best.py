"""Implementation of a callback that remembers the best coordinates seen during a run."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np

from numopt.callbacks.base import Callback
from numopt.constants import Coordinates

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


class StoreBestCoordinates(Callback):
    """Keeps a copy of the coordinates with the lowest epoch objective."""

    def __init__(self) -> None:
        """Initialize the callback."""
        self.best_objective = float("inf")
        self.best_coordinates: Optional[np.ndarray] = None

    def end_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Record the coordinates if they are the best so far."""
        if objective < self.best_objective:
            self.best_objective = objective
            self.best_coordinates = np.copy(coordinates)
        return False
