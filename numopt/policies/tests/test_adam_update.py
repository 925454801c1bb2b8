"""Unit tests for adam.py."""

import unittest

import numpy as np

from numopt.policies.adam import AdamUpdate


class TestAdamUpdate(unittest.TestCase):
    """Unit tests for AdamUpdate."""

    def test_first_step_is_step_size(self) -> None:
        """Test that bias correction makes the first step move each coordinate by the step size."""
        policy = AdamUpdate(epsilon=0.0)
        w = np.array([[1.0], [1.0], [1.0]])
        policy.update(w, 0.01, np.array([[3.0], [-0.2], [50.0]]))
        np.testing.assert_almost_equal(w, [[0.99], [1.01], [0.99]])

    def test_moments_match_shape_and_dtype(self) -> None:
        """Test that the moment estimates follow the iterate."""
        policy = AdamUpdate()
        w = np.ones((2, 3), dtype=np.float32)
        policy.update(w, 0.01, np.ones((2, 3), dtype=np.float32))
        assert policy.m is not None and policy.v is not None
        self.assertEqual(policy.m.shape, (2, 3))
        self.assertEqual(policy.m.dtype, np.float32)
        self.assertEqual(policy.t, 1)
        self.assertEqual(w.dtype, np.float32)

    def test_reset(self) -> None:
        """Test that reset discards the moments and the step counter."""
        policy = AdamUpdate()
        policy.update(np.ones(2), 0.01, np.ones(2))
        policy.reset()
        self.assertEqual(policy.t, 0)
        self.assertIsNone(policy.m)
        self.assertIsNone(policy.v)
