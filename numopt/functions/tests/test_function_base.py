"""Unit tests for base.py."""

import unittest

import numpy as np

from numopt.functions.base import SingleTermFunction, as_separable
from numopt.functions.rosenbrock import RosenbrockFunction
from numopt.functions.sphere import SphereFunction


class TestSeparableFunction(unittest.TestCase):
    """Unit tests for SeparableFunction, exercised through SphereFunction."""

    def setUp(self) -> None:
        self.function = SphereFunction(4)
        self.coordinates = np.array([[1.0], [2.0], [3.0], [4.0]])

    def test_batch_indices_identity_order(self) -> None:
        """Test that batches map onto consecutive terms by default."""
        np.testing.assert_array_equal(self.function.batch_indices(1, 2), [1, 2])
        np.testing.assert_array_equal(self.function.batch_indices(3, 5), [3])

    def test_batch_past_the_end(self) -> None:
        """Test that a batch running past the last term only covers the remaining terms."""
        f = SphereFunction(4)
        x = np.ones((4, 1))
        out = np.zeros((4, 1))

        self.assertEqual(f.evaluate_batch(x, 3, 5), 1.0)
        f.gradient_batch(x, 3, 5, out)
        np.testing.assert_array_equal(out, [[0.0], [0.0], [0.0], [2.0]])

    def test_batch_indices_shuffled_order(self) -> None:
        """Test that batches follow an installed visitation order."""
        self.function.shuffle(np.array([3, 1, 0, 2]))
        np.testing.assert_array_equal(self.function.batch_indices(0, 2), [3, 1])
        np.testing.assert_array_equal(self.function.batch_indices(2, 2), [0, 2])

        self.function.reset_order()
        np.testing.assert_array_equal(self.function.batch_indices(0, 2), [0, 1])

    def test_shuffle_rejects_wrong_length(self) -> None:
        """Test that a visitation order must cover every term."""
        with self.assertRaises(ValueError):
            self.function.shuffle(np.array([0, 1, 2]))

    def test_batches_sum_to_full_objective(self) -> None:
        """Test that evaluating every batch adds up to the full objective, whatever the order."""
        self.function.shuffle(np.array([2, 0, 3, 1]))
        total = self.function.evaluate_batch(self.coordinates, 0, 3) + self.function.evaluate_batch(
            self.coordinates, 3, 1
        )
        self.assertAlmostEqual(total, self.function.evaluate(self.coordinates))
        self.assertAlmostEqual(total, 30.0)

    def test_evaluate_with_gradient_batch(self) -> None:
        """Test the combined objective and gradient of a batch."""
        out = np.zeros_like(self.coordinates)
        objective = self.function.evaluate_with_gradient_batch(self.coordinates, 1, 2, out)
        self.assertAlmostEqual(objective, 2.0**2 + 3.0**2)
        np.testing.assert_array_equal(out, [[0.0], [4.0], [6.0], [0.0]])

    def test_evaluate_with_gradient(self) -> None:
        """Test the combined objective and gradient of the full function."""
        out = np.zeros_like(self.coordinates)
        objective = self.function.evaluate_with_gradient(self.coordinates, out)
        self.assertAlmostEqual(objective, 30.0)
        np.testing.assert_array_equal(out, 2 * self.coordinates)


class TestSingleTermFunction(unittest.TestCase):
    """Unit tests for SingleTermFunction and as_separable()."""

    def test_as_separable_passes_separable_functions_through(self) -> None:
        """Test that a separable function is not wrapped."""
        function = SphereFunction(3)
        self.assertIs(as_separable(function), function)

    def test_wraps_non_separable_function(self) -> None:
        """Test that a differentiable function is presented as a single term."""
        function = RosenbrockFunction()
        wrapped = as_separable(function)
        self.assertIsInstance(wrapped, SingleTermFunction)
        self.assertEqual(wrapped.num_functions(), 1)

        coordinates = np.array([[0.5], [0.5]])
        self.assertAlmostEqual(wrapped.evaluate_batch(coordinates, 0, 1), function.evaluate(coordinates))

        expected = np.zeros_like(coordinates)
        function.gradient(coordinates, expected)
        out = np.zeros_like(coordinates)
        wrapped.gradient_batch(coordinates, 0, 1, out)
        np.testing.assert_array_equal(out, expected)

        np.testing.assert_array_equal(wrapped.get_initial_point(), function.get_initial_point())

    def test_empty_batch(self) -> None:
        """Test that an empty batch contributes neither objective nor gradient."""
        wrapped = SingleTermFunction(RosenbrockFunction())
        coordinates = np.array([[0.5], [0.5]])
        out = np.ones_like(coordinates)
        self.assertEqual(wrapped.evaluate_terms(coordinates, np.array([], dtype=int)), 0.0)
        wrapped.gradient_terms(coordinates, np.array([], dtype=int), out)
        np.testing.assert_array_equal(out, np.zeros_like(coordinates))
