"""Result data structures for sample statistics."""

from .stats_result import Comparison, OutlierStats, WelchTestResult

__all__ = [
    "Comparison",
    "OutlierStats",
    "WelchTestResult",
]
