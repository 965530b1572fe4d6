"""
Flock statistics for the stats overlay and headless runs.
"""

from typing import Dict, List

import numpy as np

from ..core.flock import Flock
from ..core.vector import Vector2


STAT_METRICS = [
    "avg_speed", "max_speed", "centroid_x", "centroid_y",
    "flock_cohesion", "out_of_bounds",
]


def flock_arrays(flock: Flock):
    """
    Stack boid locations and velocities into (n, 2) arrays.

    Returns:
        Tuple of (locations, velocities)
    """
    locations = np.array([b.location.as_tuple() for b in flock], dtype=np.float64)
    velocities = np.array([b.velocity.as_tuple() for b in flock], dtype=np.float64)
    return locations.reshape(-1, 2), velocities.reshape(-1, 2)


def flock_statistics(flock: Flock, bounds: Vector2) -> Dict[str, float]:
    """
    Summarize a flock state.

    Args:
        flock: Flock to summarize
        bounds: Arena width and height

    Returns:
        Dictionary with average/max speed, centroid, cohesion
        (mean distance to centroid) and number of boids outside the arena
    """
    if not flock:
        return {metric: 0.0 for metric in STAT_METRICS}

    locations, velocities = flock_arrays(flock)

    speeds = np.linalg.norm(velocities, axis=1)
    centroid = locations.mean(axis=0)
    spread = np.linalg.norm(locations - centroid, axis=1)

    outside = (
        (locations[:, 0] < 0) | (locations[:, 0] > bounds.x) |
        (locations[:, 1] < 0) | (locations[:, 1] > bounds.y)
    )

    return {
        "avg_speed": float(speeds.mean()),
        "max_speed": float(speeds.max()),
        "centroid_x": float(centroid[0]),
        "centroid_y": float(centroid[1]),
        "flock_cohesion": float(spread.mean()),
        "out_of_bounds": int(outside.sum()),
    }


def calculate_aggregate_stats(samples: List[Dict]) -> Dict[str, float]:
    """
    Calculate mean and standard deviation across statistic samples.

    Args:
        samples: List of dictionaries as returned by flock_statistics

    Returns:
        Dictionary with <metric>_mean and <metric>_std for each metric
    """
    if not samples:
        return {}

    aggregates = {}

    for metric in STAT_METRICS:
        values = np.array(
            [s[metric] for s in samples if s.get(metric) is not None],
            dtype=np.float64,
        )
        if values.size:
            aggregates[f"{metric}_mean"] = float(values.mean())
            if values.size > 1:
                aggregates[f"{metric}_std"] = float(values.std(ddof=1))
            else:
                aggregates[f"{metric}_std"] = 0.0

    return aggregates
