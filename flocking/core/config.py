"""
Configuration classes and defaults for the flocking simulation.
"""

from dataclasses import dataclass, field, fields
from typing import List, Optional

from .vector import Vector2


@dataclass
class SimulationConfig:
    """Configuration for the flocking simulation."""

    # Screen settings (also the arena bounds)
    screenWidth: int = 800
    screenHeight: int = 800

    # Flock size (fixed for the whole run)
    boidCount: int = 40

    # Rule parameters
    maxVelocity: float = 5.0
    minDistance: float = 30.0
    centreFactor: float = 1000.0
    velocityFactor: float = 16.0

    # Frame pacing
    tickDelay: float = 0.05  # seconds

    # Visualization
    drawRadius: int = 5
    backgroundColor: List[int] = field(default_factory=lambda: [255, 255, 255])
    boidColor: List[int] = field(default_factory=lambda: [0, 0, 0])
    showStats: bool = False
    statsInterval: int = 10  # ticks between statistics samples

    # Random seed for flock initialization (None = seed from entropy)
    seed: Optional[int] = None

    def __post_init__(self):
        if self.screenWidth <= 0 or self.screenHeight <= 0:
            raise ValueError(
                f"Arena must have positive size, got {self.screenWidth}x{self.screenHeight}"
            )
        # Cohesion and alignment average over the other n - 1 boids
        if self.boidCount < 2:
            raise ValueError(f"boidCount must be at least 2, got {self.boidCount}")
        if self.maxVelocity < 0:
            raise ValueError(f"maxVelocity must be non-negative, got {self.maxVelocity}")
        if self.minDistance < 0:
            raise ValueError(f"minDistance must be non-negative, got {self.minDistance}")
        if self.centreFactor == 0 or self.velocityFactor == 0:
            raise ValueError("centreFactor and velocityFactor must be non-zero")
        if self.tickDelay < 0:
            raise ValueError(f"tickDelay must be non-negative, got {self.tickDelay}")
        if self.drawRadius <= 0:
            raise ValueError(f"drawRadius must be positive, got {self.drawRadius}")
        if self.statsInterval <= 0:
            raise ValueError(f"statsInterval must be positive, got {self.statsInterval}")

    @property
    def bounds(self) -> Vector2:
        """Arena width and height as a vector."""
        return Vector2(float(self.screenWidth), float(self.screenHeight))

    def to_dict(self) -> dict:
        """Convert config to dictionary."""
        return {
            "screenWidth": self.screenWidth,
            "screenHeight": self.screenHeight,
            "boidCount": self.boidCount,
            "maxVelocity": self.maxVelocity,
            "minDistance": self.minDistance,
            "centreFactor": self.centreFactor,
            "velocityFactor": self.velocityFactor,
            "tickDelay": self.tickDelay,
            "drawRadius": self.drawRadius,
            "backgroundColor": list(self.backgroundColor),
            "boidColor": list(self.boidColor),
            "showStats": self.showStats,
            "statsInterval": self.statsInterval,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "SimulationConfig":
        """Create config from dictionary, ignoring unknown keys."""
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in names})


# Default configuration: the fixed run
DEFAULT_CONFIG = SimulationConfig()
