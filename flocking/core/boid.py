"""
Boid agent record.
"""

from dataclasses import dataclass, replace

from .vector import Vector2


@dataclass(frozen=True)
class Boid:
    """
    A single boid (bird-oid object).

    Boids are values: a tick builds a new Boid instead of changing
    the fields of an existing one.

    Attributes:
        location: Position in the arena
        velocity: Displacement applied per tick
    """
    location: Vector2
    velocity: Vector2

    def with_velocity(self, velocity: Vector2) -> "Boid":
        """Return a copy of this boid with a different velocity."""
        return replace(self, velocity=velocity)

    def with_location(self, location: Vector2) -> "Boid":
        """Return a copy of this boid at a different location."""
        return replace(self, location=location)
