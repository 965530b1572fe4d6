"""
Analysis module for summarizing flock states.
"""

from .metrics import flock_statistics, calculate_aggregate_stats

__all__ = [
    'flock_statistics',
    'calculate_aggregate_stats',
]
