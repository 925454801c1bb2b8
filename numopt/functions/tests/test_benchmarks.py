"""Unit tests for the benchmark objective functions."""

import unittest

import numpy as np

from numopt.functions import (
    AckleyFunction,
    BealeFunction,
    DifferentiableFunction,
    GeneralizedRosenbrockFunction,
    HimmelblauFunction,
    LinearRegressionFunction,
    RosenbrockFunction,
    SphereFunction,
    ThreeHumpCamelFunction,
)


def numerical_gradient(function: DifferentiableFunction, coordinates: np.ndarray, h: float = 1e-6) -> np.ndarray:
    """Central finite-difference gradient of the full objective."""
    gradient = np.zeros_like(coordinates)
    for idx in np.ndindex(*coordinates.shape):
        plus = coordinates.copy()
        minus = coordinates.copy()
        plus[idx] += h
        minus[idx] -= h
        gradient[idx] = (function.evaluate(plus) - function.evaluate(minus)) / (2 * h)
    return gradient


class GradientCheckMixin:
    """Compares an analytic gradient with a finite-difference estimate."""

    def assert_gradient_matches(self, function: DifferentiableFunction, coordinates: np.ndarray) -> None:
        out = np.zeros_like(coordinates)
        function.gradient(coordinates, out)
        np.testing.assert_allclose(out, numerical_gradient(function, coordinates), rtol=1e-5, atol=1e-5)


class TestSphereFunction(GradientCheckMixin, unittest.TestCase):
    """Unit tests for SphereFunction."""

    def test_initial_point(self) -> None:
        """Test the shape and value of the initial point."""
        x = SphereFunction(4).get_initial_point()
        self.assertEqual(x.shape, (4, 1))
        np.testing.assert_array_equal(x.flatten(), [5.0, -5.0, 5.0, -5.0])

    def test_minimum(self) -> None:
        """Test the value at the minimum."""
        self.assertEqual(SphereFunction(3).evaluate(np.zeros((3, 1))), 0.0)

    def test_gradient(self) -> None:
        """Test the gradient against finite differences."""
        self.assert_gradient_matches(SphereFunction(5), np.random.standard_normal(size=(5, 1)))


class TestRosenbrockFunction(GradientCheckMixin, unittest.TestCase):
    """Unit tests for RosenbrockFunction and GeneralizedRosenbrockFunction."""

    def test_minimum(self) -> None:
        """Test the value at the minimum."""
        self.assertEqual(RosenbrockFunction().evaluate(np.ones((2, 1))), 0.0)
        self.assertEqual(GeneralizedRosenbrockFunction(6).evaluate(np.ones((6, 1))), 0.0)

    def test_initial_point(self) -> None:
        """Test the classic starting point."""
        self.assertAlmostEqual(RosenbrockFunction().evaluate(RosenbrockFunction().get_initial_point()), 24.2)

    def test_gradient(self) -> None:
        """Test the gradient against finite differences."""
        self.assert_gradient_matches(RosenbrockFunction(), np.array([[-0.3], [0.8]]))

    def test_generalized_gradient(self) -> None:
        """Test the gradient of the n-dimensional variant, whose terms share coordinates."""
        self.assert_gradient_matches(GeneralizedRosenbrockFunction(5), np.random.uniform(-1, 1, size=(5, 1)))

    def test_generalized_matches_two_dimensional(self) -> None:
        """Test that the n-dimensional variant with n = 2 is the classic function."""
        x = np.array([[0.7], [-0.4]])
        self.assertAlmostEqual(GeneralizedRosenbrockFunction(2).evaluate(x), RosenbrockFunction().evaluate(x))

    def test_generalized_requires_two_dimensions(self) -> None:
        """Test that a one-dimensional variant is rejected."""
        with self.assertRaises(ValueError):
            GeneralizedRosenbrockFunction(1)


class TestLinearRegressionFunction(GradientCheckMixin, unittest.TestCase):
    """Unit tests for LinearRegressionFunction."""

    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.x = rng.standard_normal(size=(20, 3))
        self.w = np.array([1.5, -2.0, 0.5])
        self.y = self.x @ self.w

    def test_zero_at_true_weights(self) -> None:
        """Test that noise-free data is fit exactly by the true weights."""
        function = LinearRegressionFunction(self.x, self.y)
        self.assertAlmostEqual(function.evaluate(self.w.reshape(3, 1)), 0.0)
        self.assertEqual(function.num_functions(), 20)

    def test_gradient(self) -> None:
        """Test the gradient against finite differences."""
        function = LinearRegressionFunction(self.x, self.y)
        self.assert_gradient_matches(function, np.random.standard_normal(size=(3, 1)))

    def test_rejects_mismatched_shapes(self) -> None:
        """Test that the targets must match the design matrix."""
        with self.assertRaises(ValueError):
            LinearRegressionFunction(self.x, self.y[:5])


class TestTwoDimensionalBenchmarks(unittest.TestCase):
    """Unit tests for the gradient-free benchmark functions."""

    def test_global_minima(self) -> None:
        """Test the value at each known global minimum."""
        self.assertAlmostEqual(AckleyFunction().evaluate(np.zeros((2, 1))), 0.0, places=10)
        self.assertAlmostEqual(BealeFunction().evaluate(np.array([[3.0], [0.5]])), 0.0, places=10)
        self.assertAlmostEqual(HimmelblauFunction().evaluate(np.array([[3.0], [2.0]])), 0.0, places=10)
        self.assertAlmostEqual(ThreeHumpCamelFunction().evaluate(np.zeros((2, 1))), 0.0, places=10)

    def test_positive_elsewhere(self) -> None:
        """Test that the initial points are worse than the minima."""
        for function in (AckleyFunction(), BealeFunction(), HimmelblauFunction(), ThreeHumpCamelFunction()):
            self.assertGreater(function.evaluate(function.get_initial_point()), 0.0)
