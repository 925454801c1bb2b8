"""Unit tests for swarm.py."""

import unittest

import numpy as np

from numopt.optimizers.swarm import DefaultInit, Swarm


def make_swarm() -> Swarm:
    return Swarm(
        positions=np.array([[[0.0], [0.0]], [[1.0], [1.0]], [[2.0], [2.0]]]),
        velocities=np.zeros((3, 2, 1)),
        objectives=np.array([3.0, 1.0, 2.0]),
        best_positions=np.array([[[0.0], [0.5]], [[1.0], [1.5]], [[2.0], [2.5]]]),
        best_objectives=np.array([4.0, 0.5, 2.5]),
    )


class TestSwarm(unittest.TestCase):
    """Unit tests for Swarm."""

    def test_len(self) -> None:
        """Test that the length is the number of particles."""
        self.assertEqual(len(make_swarm()), 3)

    def test_best(self) -> None:
        """Test the swarm-wide best position and objective."""
        swarm = make_swarm()
        self.assertEqual(swarm.best_index, 1)
        self.assertEqual(swarm.best_objective, 0.5)
        np.testing.assert_array_equal(swarm.best_position, [[1.0], [1.5]])

    def test_record_objectives(self) -> None:
        """Test that only improved particles update their personal bests."""
        swarm = make_swarm()
        swarm.record_objectives()

        np.testing.assert_array_equal(swarm.best_objectives, [3.0, 0.5, 2.0])
        np.testing.assert_array_equal(swarm.best_positions[0], [[0.0], [0.0]])
        np.testing.assert_array_equal(swarm.best_positions[1], [[1.0], [1.5]])
        np.testing.assert_array_equal(swarm.best_positions[2], [[2.0], [2.0]])

    def test_personal_best_is_a_copy(self) -> None:
        """Test that moving a particle does not move its recorded personal best."""
        swarm = make_swarm()
        swarm.record_objectives()
        swarm.positions += 10.0
        np.testing.assert_array_equal(swarm.best_positions[0], [[0.0], [0.0]])

    def test_particle_view(self) -> None:
        """Test that a particle view aliases the swarm's storage."""
        swarm = make_swarm()
        particle = swarm[2]

        self.assertEqual(particle.best_objective, 2.5)
        particle.velocity[...] = 7.0
        np.testing.assert_array_equal(swarm.velocities[2], [[7.0], [7.0]])


class TestDefaultInit(unittest.TestCase):
    """Unit tests for DefaultInit."""

    def test_within_bounds(self) -> None:
        """Test that positions lie within the bounds and velocities within [0, velocity_scale)."""
        rng = np.random.default_rng(0)
        lower = np.array([[-1.0], [10.0], [0.0]])
        upper = np.array([[1.0], [20.0], [0.0]])

        swarm = DefaultInit(velocity_scale=0.5).initialize((3, 1), 100, lower, upper, rng, np.float64)

        self.assertEqual(swarm.positions.shape, (100, 3, 1))
        self.assertEqual(swarm.velocities.shape, (100, 3, 1))
        self.assertTrue(np.all(swarm.positions >= lower))
        self.assertTrue(np.all(swarm.positions <= upper))
        np.testing.assert_array_equal(swarm.positions[:, 2], 0.0)
        self.assertTrue(np.all(swarm.velocities >= 0.0))
        self.assertTrue(np.all(swarm.velocities < 0.5))

    def test_unevaluated(self) -> None:
        """Test that a fresh swarm has no recorded objectives."""
        rng = np.random.default_rng(0)
        swarm = DefaultInit().initialize((2,), 4, np.zeros(2), np.ones(2), rng, np.float64)

        self.assertTrue(np.all(np.isinf(swarm.objectives)))
        self.assertTrue(np.all(np.isinf(swarm.best_objectives)))
        np.testing.assert_array_equal(swarm.best_positions, swarm.positions)
        self.assertIsNot(swarm.best_positions, swarm.positions)

    def test_at_rest(self) -> None:
        """Test that a zero velocity scale starts every particle at rest."""
        rng = np.random.default_rng(0)
        swarm = DefaultInit(velocity_scale=0.0).initialize((2,), 4, np.zeros(2), np.ones(2), rng, np.float64)
        np.testing.assert_array_equal(swarm.velocities, 0.0)

    def test_dtype(self) -> None:
        """Test that the swarm takes the iterate's dtype."""
        rng = np.random.default_rng(0)
        lower = np.zeros(2, dtype=np.float32)
        upper = np.ones(2, dtype=np.float32)
        swarm = DefaultInit().initialize((2,), 4, lower, upper, rng, np.float32)

        self.assertEqual(swarm.positions.dtype, np.float32)
        self.assertEqual(swarm.velocities.dtype, np.float32)
        self.assertEqual(swarm.best_positions.dtype, np.float32)

    def test_seeded(self) -> None:
        """Test that the same generator seed gives the same swarm."""
        a = DefaultInit().initialize((2,), 4, np.zeros(2), np.ones(2), np.random.default_rng(5), np.float64)
        b = DefaultInit().initialize((2,), 4, np.zeros(2), np.ones(2), np.random.default_rng(5), np.float64)
        np.testing.assert_array_equal(a.positions, b.positions)
        np.testing.assert_array_equal(a.velocities, b.velocities)
