"""Implementation of the sphere function."""

import numpy as np

from numopt.constants import Coordinates
from numopt.functions.base import SeparableFunction


class SphereFunction(SeparableFunction):
    """The n-dimensional sphere function, f(x) = sum_i x_i^2.

    Each coordinate contributes one separable term. The minimum is f(0) = 0.
    """

    def __init__(self, n: int) -> None:
        """Initialize the function."""
        super().__init__()
        self.n = n

    def num_functions(self) -> int:
        """The number of separable terms."""
        return self.n

    def get_initial_point(self) -> Coordinates:
        """Return the point (5, -5, 5, -5, ...) as a column vector."""
        signs = np.where(np.arange(self.n) % 2 == 0, 1.0, -1.0)
        return (5.0 * signs).reshape(self.n, 1)

    def evaluate_terms(self, coordinates: Coordinates, indices: np.ndarray) -> float:
        """Compute the sum of the terms in `indices` at `coordinates`."""
        x = coordinates.reshape(-1)
        return float(np.sum(np.square(x[indices])))

    def gradient_terms(self, coordinates: Coordinates, indices: np.ndarray, out: np.ndarray) -> None:
        """Write the gradient of the sum of the terms in `indices` into `out`."""
        x = coordinates.reshape(-1)
        g = np.zeros_like(x)
        g[indices] = 2 * x[indices]
        out[...] = g.reshape(out.shape)
