"""Pytest configuration - headless pygame and shared fixtures."""

import os
import random

import pytest

# No window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from flocking.core.boid import Boid
from flocking.core.config import SimulationConfig
from flocking.core.vector import Vector2


@pytest.fixture
def rng():
    """Seeded random generator."""
    return random.Random(1234)


@pytest.fixture
def bounds():
    return Vector2(800.0, 800.0)


@pytest.fixture
def small_config():
    """Small, fast configuration."""
    return SimulationConfig(boidCount=8, tickDelay=0.0, statsInterval=5, seed=7)


def make_boid(x, y, vx=0.0, vy=0.0):
    return Boid(location=Vector2(x, y), velocity=Vector2(vx, vy))


@pytest.fixture
def boid_factory():
    return make_boid
