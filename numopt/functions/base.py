"""Interfaces for the objective functions that optimizers consume.

There are three levels of capability:

- ObjectiveFunction: can be evaluated at a point. Enough for gradient-free optimizers such as PSO.
- DifferentiableFunction: additionally supplies its gradient.
- SeparableFunction: a sum of `num_functions()` terms that can be evaluated (and differentiated) a batch
  of terms at a time, in a visitation order that the optimizer may shuffle between epochs.
"""

import abc
from typing import Optional

import numpy as np

from numopt.constants import Coordinates


class ObjectiveFunction(abc.ABC):
    """Abstract base class for a function to be minimized."""

    @abc.abstractmethod
    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        raise NotImplementedError

    def get_initial_point(self) -> Coordinates:
        """Return a reasonable starting point for an optimizer."""
        raise NotImplementedError


class DifferentiableFunction(ObjectiveFunction):
    """Abstract base class for a function that also supplies its gradient."""

    @abc.abstractmethod
    def gradient(self, coordinates: Coordinates, out: np.ndarray) -> None:
        """Write the gradient at `coordinates` into `out`, which has the same shape as `coordinates`."""
        raise NotImplementedError

    def evaluate_with_gradient(self, coordinates: Coordinates, out: np.ndarray) -> float:
        """Compute the objective and write the gradient into `out`."""
        self.gradient(coordinates, out)
        return self.evaluate(coordinates)


class SeparableFunction(DifferentiableFunction):
    """Abstract base class for a function that is a sum of individually evaluable terms.

    Subclasses implement the math for an arbitrary set of term indices. This class maps a contiguous
    batch `[begin, begin + batch_size)` of the visitation order onto term indices.
    """

    def __init__(self) -> None:
        """Initialize the function with the identity visitation order."""
        self.order: Optional[np.ndarray] = None

    @abc.abstractmethod
    def num_functions(self) -> int:
        """The number of separable terms."""
        raise NotImplementedError

    @abc.abstractmethod
    def evaluate_terms(self, coordinates: Coordinates, indices: np.ndarray) -> float:
        """Compute the sum of the terms in `indices` at `coordinates`."""
        raise NotImplementedError

    @abc.abstractmethod
    def gradient_terms(self, coordinates: Coordinates, indices: np.ndarray, out: np.ndarray) -> None:
        """Write the gradient of the sum of the terms in `indices` into `out`."""
        raise NotImplementedError

    def batch_indices(self, begin: int, batch_size: int) -> np.ndarray:
        """Term indices visited by the batch `[begin, begin + batch_size)`, truncated at the last term."""
        if self.order is None:
            return np.arange(begin, min(begin + batch_size, self.num_functions()))
        return self.order[begin : begin + batch_size]

    def shuffle(self, order: np.ndarray) -> None:
        """Install a permutation of the terms as the visitation order."""
        order = np.asarray(order)
        if order.shape != (self.num_functions(),):
            raise ValueError("Visitation order must contain every term exactly once")
        self.order = order

    def reset_order(self) -> None:
        """Restore the identity visitation order."""
        self.order = None

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the full objective (the sum over every term)."""
        return self.evaluate_terms(coordinates, np.arange(self.num_functions()))

    def gradient(self, coordinates: Coordinates, out: np.ndarray) -> None:
        """Write the gradient of the full objective into `out`."""
        self.gradient_terms(coordinates, np.arange(self.num_functions()), out)

    def evaluate_batch(self, coordinates: Coordinates, begin: int, batch_size: int) -> float:
        """Compute the objective of one batch of terms."""
        return self.evaluate_terms(coordinates, self.batch_indices(begin, batch_size))

    def gradient_batch(self, coordinates: Coordinates, begin: int, batch_size: int, out: np.ndarray) -> None:
        """Write the gradient of one batch of terms into `out`."""
        self.gradient_terms(coordinates, self.batch_indices(begin, batch_size), out)

    def evaluate_with_gradient_batch(
        self,
        coordinates: Coordinates,
        begin: int,
        batch_size: int,
        out: np.ndarray,
    ) -> float:
        """Compute the objective of one batch of terms and write its gradient into `out`."""
        indices = self.batch_indices(begin, batch_size)
        self.gradient_terms(coordinates, indices, out)
        return self.evaluate_terms(coordinates, indices)


class SingleTermFunction(SeparableFunction):
    """Presents a differentiable, non-separable function as a separable function with a single term."""

    def __init__(self, function: DifferentiableFunction) -> None:
        """Wrap `function`."""
        super().__init__()
        self.function = function

    def num_functions(self) -> int:
        """The number of separable terms."""
        return 1

    def evaluate_terms(self, coordinates: Coordinates, indices: np.ndarray) -> float:
        """Compute the wrapped objective; an empty batch contributes nothing."""
        if len(indices) == 0:
            return 0.0
        return self.function.evaluate(coordinates)

    def gradient_terms(self, coordinates: Coordinates, indices: np.ndarray, out: np.ndarray) -> None:
        """Write the wrapped gradient into `out`."""
        if len(indices) == 0:
            out.fill(0)
            return
        self.function.gradient(coordinates, out)

    def get_initial_point(self) -> Coordinates:
        """Return the wrapped function's starting point."""
        return self.function.get_initial_point()


def as_separable(function: DifferentiableFunction) -> SeparableFunction:
    """Return `function` itself if it is separable, otherwise a single-term view of it."""
    if isinstance(function, SeparableFunction):
        return function
    return SingleTermFunction(function)
