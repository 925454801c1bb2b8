"""Two-dimensional benchmark functions for gradient-free optimizers."""

import numpy as np

from numopt.constants import Coordinates
from numopt.functions.base import ObjectiveFunction


class AckleyFunction(ObjectiveFunction):
    """The Ackley function; many local minima around a global minimum f(0, 0) = 0."""

    def __init__(self, a: float = 20.0, b: float = 0.2, c: float = 2 * np.pi) -> None:
        """Initialize the function."""
        self.a = a
        self.b = b
        self.c = c

    def get_initial_point(self) -> Coordinates:
        """Return a starting point away from the minimum."""
        return np.array([[0.02], [0.02]])

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        x, y = coordinates.reshape(-1)
        term_1 = -self.a * np.exp(-self.b * np.sqrt(0.5 * (x**2 + y**2)))
        term_2 = -np.exp(0.5 * (np.cos(self.c * x) + np.cos(self.c * y)))
        return float(term_1 + term_2 + np.e + self.a)


class BealeFunction(ObjectiveFunction):
    """The Beale function; global minimum f(3, 0.5) = 0."""

    def get_initial_point(self) -> Coordinates:
        """Return a starting point away from the minimum."""
        return np.array([[-4.5], [4.5]])

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        x, y = coordinates.reshape(-1)
        return float(
            (1.5 - x + x * y) ** 2
            + (2.25 - x + x * y**2) ** 2
            + (2.625 - x + x * y**3) ** 2
        )


class HimmelblauFunction(ObjectiveFunction):
    """Himmelblau's function; four global minima with f = 0, one of them at (3, 2)."""

    def get_initial_point(self) -> Coordinates:
        """Return a starting point away from the minima."""
        return np.array([[5.0], [-5.0]])

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        x, y = coordinates.reshape(-1)
        return float((x**2 + y - 11) ** 2 + (x + y**2 - 7) ** 2)


class ThreeHumpCamelFunction(ObjectiveFunction):
    """The three-hump camel function; global minimum f(0, 0) = 0."""

    def get_initial_point(self) -> Coordinates:
        """Return a starting point away from the minimum."""
        return np.array([[-5.0], [5.0]])

    def evaluate(self, coordinates: Coordinates) -> float:
        """Compute the objective at `coordinates`."""
        x, y = coordinates.reshape(-1)
        return float(2 * x**2 - 1.05 * x**4 + x**6 / 6 + x * y + y**2)
