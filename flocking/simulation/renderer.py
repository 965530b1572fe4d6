"""
Pygame drawing for the flock.
"""

from typing import Iterable

import pygame

from ..core.config import SimulationConfig
from ..core.flock import Flock


class PygameRenderer:
    """
    Draws a flock onto a pygame surface.

    Every boid is a filled circle in the single boid colour on a plain
    background.
    """

    def __init__(self, surface, config: SimulationConfig):
        """
        Initialize the renderer.

        Args:
            surface: Pygame surface to draw on
            config: Simulation configuration (colours)
        """
        self.surface = surface
        self.background = tuple(config.backgroundColor)
        self.color = tuple(config.boidColor)
        self._font = None

    def clear_frame(self) -> None:
        """Erase the previous frame."""
        self.surface.fill(self.background)

    def draw_filled_circle(self, x: int, y: int, radius: int) -> None:
        pygame.draw.circle(self.surface, self.color, (x, y), radius)

    def draw_flock(self, flock: Flock, radius: int) -> None:
        """
        Clear the surface and draw one circle per boid.

        Args:
            flock: Flock to draw
            radius: Circle radius in pixels
        """
        self.clear_frame()
        for boid in flock:
            loc = boid.location
            self.draw_filled_circle(round(loc.x), round(loc.y), radius)

    def draw_stats(self, lines: Iterable[str]) -> None:
        """Draw statistics overlay in the top-left corner."""
        if self._font is None:
            self._font = pygame.font.Font(None, 24)
        y_offset = 10
        for text in lines:
            surface = self._font.render(text, True, (120, 120, 120))
            self.surface.blit(surface, (10, y_offset))
            y_offset += 25

    def present(self) -> None:
        pygame.display.flip()
