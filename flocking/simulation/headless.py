"""
Headless simulation for running the flock without a display.
"""

import random
import time
from typing import Any, Dict, Optional

from ..analysis.metrics import calculate_aggregate_stats, flock_statistics
from ..core.config import SimulationConfig, DEFAULT_CONFIG
from ..core.flock import random_flock
from ..core.tick import step


class HeadlessSimulation:
    """
    Flocking simulation without a window.

    Runs ticks back to back (no frame delay) and samples flock
    statistics every statsInterval ticks.
    """

    def __init__(self, config: Optional[SimulationConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config if config else DEFAULT_CONFIG
        self.rng = rng if rng else random.Random(self.config.seed)

        self.flock = random_flock(
            self.config.bounds, self.config.maxVelocity,
            self.config.boidCount, self.rng,
        )
        self.tick_count = 0
        self.stats_over_time = []

    def update(self) -> None:
        """Advance the flock by one tick and sample statistics if due."""
        self.flock = step(self.config, self.flock)
        self.tick_count += 1

        if self.tick_count % self.config.statsInterval == 0:
            self._record_statistics()

    def _record_statistics(self) -> None:
        stats = flock_statistics(self.flock, self.config.bounds)
        stats["tick"] = self.tick_count
        self.stats_over_time.append(stats)

    def run(self, ticks: int) -> Dict[str, Any]:
        """
        Run a fixed number of ticks.

        Args:
            ticks: Number of ticks to run

        Returns:
            Dictionary with tick count, initial and final statistics,
            aggregates over the sampled statistics and elapsed time
        """
        if ticks < 0:
            raise ValueError(f"ticks must be non-negative, got {ticks}")

        start_time = time.time()
        initial = flock_statistics(self.flock, self.config.bounds)

        for _ in range(ticks):
            self.update()

        return {
            "ticks": self.tick_count,
            "boid_count": len(self.flock),
            "initial_stats": initial,
            "final_stats": flock_statistics(self.flock, self.config.bounds),
            "aggregates": calculate_aggregate_stats(self.stats_over_time),
            "stats_over_time": self.stats_over_time,
            "elapsed_time_seconds": time.time() - start_time,
        }
