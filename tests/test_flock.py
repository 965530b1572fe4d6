"""
Unit tests for random flock initialization.
"""

import random

from flocking.core.boid import Boid
from flocking.core.flock import random_boid, random_flock, random_point
from flocking.core.vector import Vector2, magnitude


class TestRandomPoint:

    def test_within_bounds(self, rng):
        bounds = Vector2(800.0, 600.0)
        for _ in range(500):
            p = random_point(bounds, rng)
            assert 0.0 <= p.x < 800.0
            assert 0.0 <= p.y < 600.0

    def test_uses_given_generator(self):
        a = random_point(Vector2(10.0, 10.0), random.Random(5))
        b = random_point(Vector2(10.0, 10.0), random.Random(5))
        assert a == b


class TestRandomBoid:

    def test_velocity_capped(self, rng, bounds):
        for _ in range(500):
            boid = random_boid(bounds, 5.0, rng)
            assert magnitude(boid.velocity) <= 5.0 + 1e-12

    def test_velocity_components_non_negative(self, rng, bounds):
        # Drawn per axis from [0, max_vel)
        for _ in range(200):
            boid = random_boid(bounds, 5.0, rng)
            assert boid.velocity.x >= 0.0
            assert boid.velocity.y >= 0.0


class TestRandomFlock:

    def test_size(self, rng, bounds):
        flock = random_flock(bounds, 5.0, 40, rng)
        assert len(flock) == 40
        assert all(isinstance(b, Boid) for b in flock)

    def test_all_boids_valid(self, rng, bounds):
        flock = random_flock(bounds, 5.0, 200, rng)
        for boid in flock:
            assert 0.0 <= boid.location.x < bounds.x
            assert 0.0 <= boid.location.y < bounds.y
            assert magnitude(boid.velocity) <= 5.0 + 1e-12

    def test_same_seed_same_flock(self, bounds):
        a = random_flock(bounds, 5.0, 10, random.Random(99))
        b = random_flock(bounds, 5.0, 10, random.Random(99))
        assert a == b

    def test_default_generator(self, bounds):
        flock = random_flock(bounds, 5.0, 3)
        assert len(flock) == 3

    def test_is_tuple(self, rng, bounds):
        assert isinstance(random_flock(bounds, 5.0, 4, rng), tuple)
