"""
Core module containing configuration, vector math, boids, rules and the tick driver.
"""

from .config import SimulationConfig, DEFAULT_CONFIG
from .vector import Vector2
from .boid import Boid
from .flock import Flock, random_flock
from .tick import tick, step

__all__ = [
    'SimulationConfig', 'DEFAULT_CONFIG', 'Vector2', 'Boid',
    'Flock', 'random_flock', 'tick', 'step',
]
