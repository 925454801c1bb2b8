"""Implementation of a callback that prints the objective after every epoch."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from numopt.callbacks.base import Callback
from numopt.constants import Coordinates

if TYPE_CHECKING:
    from numopt.functions.base import ObjectiveFunction
    from numopt.optimizers.base import Optimizer


class PrintLoss(Callback):
    """Prints the objective at the end of every epoch."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """Initialize the callback. Output goes to `stream`, or to standard output if it is None."""
        self.stream = stream

    def end_epoch(
        self,
        optimizer: Optimizer,
        function: ObjectiveFunction,
        coordinates: Coordinates,
        epoch: int,
        objective: float,
    ) -> bool:
        """Print the epoch objective."""
        print(objective, file=self.stream if self.stream is not None else sys.stdout)
        return False
