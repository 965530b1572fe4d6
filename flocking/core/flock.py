"""
Flock type and random flock initialization.
"""

import random
from typing import Optional, Tuple

from .boid import Boid
from .vector import Vector2, cap_magnitude


# Fixed-length, ordered; index i is the same boid across every tick
Flock = Tuple[Boid, ...]


def random_point(bounds: Vector2, rng: random.Random) -> Vector2:
    """
    Draw a point uniformly from [0, bounds.x) x [0, bounds.y).

    Args:
        bounds: Upper limits for x and y
        rng: Random generator to draw from

    Returns:
        Random point inside the bounds
    """
    x = rng.random() * bounds.x
    y = rng.random() * bounds.y
    return Vector2(x, y)


def random_boid(bounds: Vector2, max_vel: float, rng: random.Random) -> Boid:
    """
    Create a boid at a random location with a random velocity.

    The velocity is drawn per axis from [0, max_vel) and then capped,
    so speeds never exceed max_vel.
    """
    location = random_point(bounds, rng)
    velocity = random_point(Vector2(max_vel, max_vel), rng)
    return Boid(location=location, velocity=cap_magnitude(max_vel, velocity))


def random_flock(bounds: Vector2, max_vel: float, num_boids: int,
                 rng: Optional[random.Random] = None) -> Flock:
    """
    Create a flock of independently initialized boids.

    Args:
        bounds: Arena width and height
        max_vel: Speed cap for the initial velocities
        num_boids: Number of boids in the flock
        rng: Random generator, seeded once by the caller (fresh one if None)

    Returns:
        Tuple of num_boids boids
    """
    if rng is None:
        rng = random.Random()
    return tuple(random_boid(bounds, max_vel, rng) for _ in range(num_boids))
