"""
Flocking rules and the per-boid update steps.

Each rule returns one adjustment vector per boid, in flock order:
- Cohesion: steer toward the perceived centre of the other boids
- Separation: move away from boids that are too close
- Alignment: match the perceived velocity of the other boids
"""

from typing import List, Sequence

from .boid import Boid
from .flock import Flock
from .vector import Vector2, ZERO, add, cap_magnitude, dist, div, sub


def _check_flock_size(flock: Flock) -> None:
    if len(flock) < 2:
        raise ValueError(
            f"Perceived averages need at least 2 boids, got {len(flock)}"
        )


def perceived_centres(flock: Flock) -> List[Vector2]:
    """
    Average location of all other boids, for each boid.

    Raises:
        ValueError: If the flock has fewer than 2 boids
    """
    _check_flock_size(flock)
    total = ZERO
    for boid in reversed(flock):
        total = add(total, boid.location)
    others = float(len(flock)) - 1.0
    return [div(others, sub(total, boid.location)) for boid in flock]


def perceived_velocities(flock: Flock) -> List[Vector2]:
    """
    Average velocity of all other boids, for each boid.

    Raises:
        ValueError: If the flock has fewer than 2 boids
    """
    _check_flock_size(flock)
    total = ZERO
    for boid in reversed(flock):
        total = add(total, boid.velocity)
    others = float(len(flock)) - 1.0
    return [div(others, sub(total, boid.velocity)) for boid in flock]


def move_flock_to_centre(centre_factor: float, flock: Flock) -> List[Vector2]:
    """
    Cohesion rule.

    Args:
        centre_factor: Divisor applied to the offset toward the centre
        flock: Current flock

    Returns:
        (perceived_centre - location) / centre_factor for every boid
    """
    centres = perceived_centres(flock)
    return [
        div(centre_factor, sub(centres[i], boid.location))
        for i, boid in enumerate(flock)
    ]


def repel_from_each_other(min_dist: float, flock: Flock) -> List[Vector2]:
    """
    Separation rule.

    For every boid, sums the negated displacement to each other boid
    closer than min_dist. Boids with no close neighbours get zero.

    Args:
        min_dist: Distance below which two boids repel
        flock: Current flock

    Returns:
        Repulsion vector for every boid
    """
    adjustments = []
    for i, boid in enumerate(flock):
        repulsion = ZERO
        for j, other in enumerate(flock):
            if j == i:
                continue
            if dist(other.location, boid.location) < min_dist:
                repulsion = sub(repulsion, sub(other.location, boid.location))
        adjustments.append(repulsion)
    return adjustments


def match_flock_velocity(vel_factor: float, flock: Flock) -> List[Vector2]:
    """
    Alignment rule.

    Args:
        vel_factor: Divisor applied to the velocity difference
        flock: Current flock

    Returns:
        (perceived_velocity - velocity) / vel_factor for every boid
    """
    velocities = perceived_velocities(flock)
    return [
        div(vel_factor, sub(velocities[i], boid.velocity))
        for i, boid in enumerate(flock)
    ]


def sum_rules(flock: Flock, rules: Sequence[Sequence[Vector2]]) -> Flock:
    """
    Fold rule adjustments into the flock's velocities, in order.

    Locations are left untouched.

    Args:
        flock: Flock the adjustments were computed from
        rules: Adjustment fields, each with one vector per boid

    Returns:
        New flock with every adjustment added to the velocities
    """
    for adjustments in rules:
        flock = tuple(
            boid.with_velocity(add(boid.velocity, adjustments[i]))
            for i, boid in enumerate(flock)
        )
    return flock


def cap_velocity(max_vel: float, boid: Boid) -> Boid:
    return boid.with_velocity(cap_magnitude(max_vel, boid.velocity))


def bounce(bounds: Vector2, boid: Boid) -> Boid:
    """
    Reflect a boid that is outside the arena and still heading outward.

    A velocity component is negated only when the boid is past that edge
    and moving further out. Location is not changed.
    """
    loc, vel = boid.location, boid.velocity

    vx = vel.x
    if (loc.x < 0 and vel.x < 0) or (loc.x > bounds.x and vel.x > 0):
        vx = -vel.x

    vy = vel.y
    if (loc.y < 0 and vel.y < 0) or (loc.y > bounds.y and vel.y > 0):
        vy = -vel.y

    return boid.with_velocity(Vector2(vx, vy))


def move(boid: Boid) -> Boid:
    """Advance a boid's location by its velocity."""
    return boid.with_location(add(boid.location, boid.velocity))
