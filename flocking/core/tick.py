"""
One full simulation step.
"""

from .config import SimulationConfig
from .flock import Flock
from .rules import (
    bounce, cap_velocity, match_flock_velocity, move, move_flock_to_centre,
    repel_from_each_other, sum_rules,
)
from .vector import Vector2, is_finite


def tick(bounds: Vector2, min_dist: float, max_vel: float,
         centre_factor: float, vel_factor: float, flock: Flock) -> Flock:
    """
    Produce the next flock from the current one.

    All three rule fields are computed from the incoming flock before any
    of them is applied. They are then summed into the velocities
    (cohesion, separation, alignment), velocities are capped, boids past
    an edge are reflected and finally every boid moves.

    Args:
        bounds: Arena width and height
        min_dist: Separation distance
        max_vel: Speed cap
        centre_factor: Cohesion divisor
        vel_factor: Alignment divisor
        flock: Current flock (not modified)

    Returns:
        New flock of the same length and order
    """
    cohesion = move_flock_to_centre(centre_factor, flock)
    separation = repel_from_each_other(min_dist, flock)
    alignment = match_flock_velocity(vel_factor, flock)

    summed = sum_rules(flock, [cohesion, separation, alignment])
    capped = tuple(cap_velocity(max_vel, boid) for boid in summed)
    bounced = tuple(bounce(bounds, boid) for boid in capped)
    next_flock = tuple(move(boid) for boid in bounced)

    # Stripped under -O
    assert all(
        is_finite(b.location) and is_finite(b.velocity) for b in next_flock
    ), "non-finite boid state after tick"

    return next_flock


def step(config: SimulationConfig, flock: Flock) -> Flock:
    """Run tick() with the parameters held by a config."""
    return tick(
        config.bounds,
        config.minDistance,
        config.maxVelocity,
        config.centreFactor,
        config.velocityFactor,
        flock,
    )
