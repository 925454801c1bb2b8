"""Unit tests for vanilla.py."""

import unittest

import numpy as np

from numopt.policies.vanilla import MomentumUpdate, VanillaUpdate


class TestVanillaUpdate(unittest.TestCase):
    """Unit tests for VanillaUpdate."""

    def test_step(self) -> None:
        """Test a single step against the gradient."""
        policy = VanillaUpdate()
        w = np.array([[1.0], [2.0]])
        policy.update(w, 0.1, np.array([[1.0], [-1.0]]))
        np.testing.assert_almost_equal(w, [[0.9], [2.1]])

    def test_lazy_initialization(self) -> None:
        """Test that the first update records the iterate shape."""
        policy = VanillaUpdate()
        self.assertFalse(policy.is_initialized)
        policy.update(np.zeros((3, 2)), 0.1, np.ones((3, 2)))
        self.assertTrue(policy.is_initialized)
        self.assertEqual(policy.shape, (3, 2))

        policy.reset()
        self.assertFalse(policy.is_initialized)


class TestMomentumUpdate(unittest.TestCase):
    """Unit tests for MomentumUpdate."""

    def test_two_steps(self) -> None:
        """Test that the velocity accumulates past gradients."""
        policy = MomentumUpdate(momentum=0.5)
        w = np.array([1.0])
        g = np.array([1.0])

        policy.update(w, 0.1, g)  # v = -0.1
        np.testing.assert_almost_equal(w, [0.9])
        policy.update(w, 0.1, g)  # v = 0.5 * -0.1 - 0.1 = -0.15
        np.testing.assert_almost_equal(w, [0.75])

    def test_reset(self) -> None:
        """Test that reset discards the velocity."""
        policy = MomentumUpdate()
        policy.update(np.array([1.0]), 0.1, np.array([1.0]))
        self.assertIsNotNone(policy.velocity)
        policy.reset()
        self.assertIsNone(policy.velocity)
