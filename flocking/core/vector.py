"""
Immutable 2D vector type and the arithmetic used by the flocking rules.
"""

import math
from dataclasses import dataclass
from typing import Iterator, Tuple


@dataclass(frozen=True)
class Vector2:
    """
    A 2D point or vector.

    Every operation returns a new instance; a Vector2 is never modified.
    Also used for arena bounds, with x as width and y as height.
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return add(self, other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return sub(self, other)

    def __mul__(self, k: float) -> "Vector2":
        return scale(k, self)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector2":
        return div(k, self)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def magnitude(self) -> float:
        return magnitude(self)

    def distance_to(self, other: "Vector2") -> float:
        return dist(self, other)

    def as_tuple(self) -> Tuple[float, float]:
        """Return (x, y), e.g. for pygame or numpy."""
        return (self.x, self.y)


ZERO = Vector2(0.0, 0.0)


def magnitude(v: Vector2) -> float:
    return math.sqrt(v.x ** 2 + v.y ** 2)


def add(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x + b.x, a.y + b.y)


def sub(a: Vector2, b: Vector2) -> Vector2:
    return Vector2(a.x - b.x, a.y - b.y)


def scale(k: float, v: Vector2) -> Vector2:
    return Vector2(v.x * k, v.y * k)


def div(k: float, v: Vector2) -> Vector2:
    """Divide both components by k. k must be non-zero."""
    return Vector2(v.x / k, v.y / k)


def dist(a: Vector2, b: Vector2) -> float:
    return magnitude(sub(a, b))


def cap_magnitude(cap: float, v: Vector2) -> Vector2:
    """
    Reduce the magnitude of a vector that exceeds a cap.

    Vectors at or below the cap are returned as-is. Longer vectors are
    scaled by ``1 - (|v| - cap) / |v|`` on both components.

    Args:
        cap: Magnitude limit
        v: Vector to limit

    Returns:
        The original vector, or a shorter one with the same direction
    """
    mag = magnitude(v)
    if mag <= cap:
        return v
    diff = mag - cap
    scaler = 1.0 - (diff / mag)
    return Vector2(scaler * v.x, scaler * v.y)


def is_finite(v: Vector2) -> bool:
    return math.isfinite(v.x) and math.isfinite(v.y)
