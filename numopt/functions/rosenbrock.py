"""Implementations of the Rosenbrock function."""

import numpy as np

from numopt.constants import Coordinates
from numopt.functions.base import DifferentiableFunction, SeparableFunction


class RosenbrockFunction(DifferentiableFunction):
    """The two-dimensional Rosenbrock function, f(x, y) = 100 (y - x^2)^2 + (1 - x)^2.

    The minimum is f(1, 1) = 0, at the bottom of a long, flat, curved valley.
    """

    def get_initial_point(self) -> Coordinates:
        """Return the classic starting point (-1.2, 1)."""
        return np.array([[-1.2], [1.0]])

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        x, y = coordinates.reshape(-1)
        return float(100 * (y - x**2) ** 2 + (1 - x) ** 2)

    def gradient(self, coordinates: Coordinates, out: np.ndarray) -> None:
        """Write the gradient at `coordinates` into `out`."""
        x, y = coordinates.reshape(-1)
        dx = -400 * x * (y - x**2) - 2 * (1 - x)
        dy = 200 * (y - x**2)
        out[...] = np.array([dx, dy]).reshape(out.shape)


class GeneralizedRosenbrockFunction(SeparableFunction):
    """The n-dimensional Rosenbrock function, a sum of n - 1 coupled terms.

    f(x) = sum_{i=0}^{n-2} 100 (x_{i+1} - x_i^2)^2 + (1 - x_i)^2, with minimum f(1, ..., 1) = 0.
    """

    def __init__(self, n: int) -> None:
        """Initialize the function."""
        if n < 2:
            raise ValueError("The generalized Rosenbrock function needs at least two dimensions")
        super().__init__()
        self.n = n

    def num_functions(self) -> int:
        """The number of separable terms."""
        return self.n - 1

    def get_initial_point(self) -> Coordinates:
        """Return the point (-1.2, 1, -1.2, 1, ...) as a column vector."""
        return np.where(np.arange(self.n) % 2 == 0, -1.2, 1.0).reshape(self.n, 1)

    def evaluate_terms(self, coordinates: Coordinates, indices: np.ndarray) -> float:
        """Compute the sum of the terms in `indices` at `coordinates`."""
        x = coordinates.reshape(-1)
        x_i = x[indices]
        x_next = x[indices + 1]
        return float(np.sum(100 * np.square(x_next - np.square(x_i)) + np.square(1 - x_i)))

    def gradient_terms(self, coordinates: Coordinates, indices: np.ndarray, out: np.ndarray) -> None:
        """Write the gradient of the sum of the terms in `indices` into `out`."""
        x = coordinates.reshape(-1)
        x_i = x[indices]
        x_next = x[indices + 1]
        residual = x_next - np.square(x_i)

        g = np.zeros_like(x)
        # neighboring terms share a coordinate, so accumulate rather than assign
        np.add.at(g, indices, -400 * x_i * residual - 2 * (1 - x_i))
        np.add.at(g, indices + 1, 200 * residual)
        out[...] = g.reshape(out.shape)
