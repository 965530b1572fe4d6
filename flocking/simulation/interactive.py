"""
Interactive simulation with pygame window.
"""

import random
from typing import Optional

import pygame

from ..analysis.metrics import flock_statistics
from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import random_flock
from ..core.tick import step
from .renderer import PygameRenderer
from .timing import delay


class Simulation:
    """
    Windowed flocking simulation.

    Each frame draws the current flock, advances it one tick, waits for
    the tick delay and prints a heartbeat line.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the simulation.

        Args:
            config: Simulation configuration (uses defaults if None)
            rng: Random generator for the initial flock (seeded from
                config.seed if None)
        """
        pygame.init()

        self.config = config if config else DEFAULT_CONFIG
        self.rng = rng if rng else random.Random(self.config.seed)

        width = self.config.screenWidth
        height = self.config.screenHeight

        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption("Boids")
        self.renderer = PygameRenderer(self.screen, self.config)

        self.flock = random_flock(
            self.config.bounds, self.config.maxVelocity,
            self.config.boidCount, self.rng,
        )

        self.tick_count = 0
        self.running = True
        self.stats = flock_statistics(self.flock, self.config.bounds)

    def update(self) -> None:
        """Advance the flock by one tick."""
        self.flock = step(self.config, self.flock)
        self.tick_count += 1
        if self.config.showStats and self.tick_count % self.config.statsInterval == 0:
            self.stats = flock_statistics(self.flock, self.config.bounds)

    def draw(self) -> None:
        """Render the current frame."""
        self.renderer.draw_flock(self.flock, self.config.drawRadius)
        if self.config.showStats:
            self.renderer.draw_stats([
                f"Tick: {self.tick_count}",
                f"Boids: {len(self.flock)}",
                f"Avg Speed: {self.stats['avg_speed']:.2f}",
                f"Cohesion: {self.stats['flock_cohesion']:.1f}",
                f"Out of bounds: {self.stats['out_of_bounds']}",
            ])
        self.renderer.present()

    def run(self) -> None:
        """Run the simulation main loop until the window is closed."""
        try:
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                        self.running = False
                if not self.running:
                    break

                self.draw()
                self.update()
                delay(self.config.tickDelay)
                print("tick")
        finally:
            pygame.quit()
