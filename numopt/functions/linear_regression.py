"""Implementation of a least-squares linear regression objective."""

import numpy as np

from numopt.constants import Coordinates
from numopt.functions.base import SeparableFunction


class LinearRegressionFunction(SeparableFunction):
    """Sum of squared residuals of a linear model, one separable term per data sample.

    f(w) = sum_i (x_i . w - y_i)^2, where the coordinates `w` have one entry per feature.
    """

    def __init__(self, x: np.ndarray, y: np.ndarray) -> None:
        """Initialize the function with a design matrix `x` of shape (N, D) and targets `y` of shape (N,)."""
        if x.ndim != 2 or y.shape != (x.shape[0],):
            raise ValueError("Expected x of shape (N, D) and y of shape (N,)")
        super().__init__()
        self.x = x
        self.y = y

    def num_functions(self) -> int:
        """The number of separable terms."""
        return self.x.shape[0]

    def get_initial_point(self) -> Coordinates:
        """Return the zero weight vector as a column vector."""
        return np.zeros((self.x.shape[1], 1))

    def _residuals(self, coordinates: Coordinates, indices: np.ndarray) -> np.ndarray:
        w = coordinates.reshape(-1)
        return np.matmul(self.x[indices], w) - self.y[indices]  # shape = (len(indices),)

    def evaluate_terms(self, coordinates: Coordinates, indices: np.ndarray) -> float:
        """Compute the sum of the terms in `indices` at `coordinates`."""
        return float(np.sum(np.square(self._residuals(coordinates, indices))))

    def gradient_terms(self, coordinates: Coordinates, indices: np.ndarray, out: np.ndarray) -> None:
        """Write the gradient of the sum of the terms in `indices` into `out`."""
        residuals = self._residuals(coordinates, indices)
        g = 2 * np.matmul(residuals, self.x[indices])  # shape = (D,)
        out[...] = g.reshape(out.shape)
