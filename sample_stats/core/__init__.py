"""
Core module for sample statistics.

This module contains pure Python implementations built on numpy only.
Every operation is a stateless function of its inputs and never mutates them.
"""

from .exceptions import InvalidArgumentError

from .models import Sample, StatsOptions

from .results import Comparison, OutlierStats, WelchTestResult

from .statistics import (
    mean,
    median,
    percentile,
    variance,
    standard_deviation,
    percentage_difference,
    signed_percentage_difference,
    QuartileBounds,
    quartile_bounds,
    remove_outliers,
    outlier_stats,
    inverse_normal_cdf,
    inverse_t_distribution,
    critical_t_value,
    t_sf,
    t_value,
    degrees_of_freedom,
    greater_than,
    less_than,
    compare,
    welch_t_test,
)

__all__ = [
    # Errors
    "InvalidArgumentError",

    # Models
    "Sample",
    "StatsOptions",

    # Results
    "Comparison",
    "OutlierStats",
    "WelchTestResult",

    # Descriptive
    "mean",
    "median",
    "percentile",
    "variance",
    "standard_deviation",
    "percentage_difference",
    "signed_percentage_difference",

    # Outliers
    "QuartileBounds",
    "quartile_bounds",
    "remove_outliers",
    "outlier_stats",

    # Distributions
    "inverse_normal_cdf",
    "inverse_t_distribution",
    "critical_t_value",
    "t_sf",

    # Welch's t-test
    "t_value",
    "degrees_of_freedom",
    "greater_than",
    "less_than",
    "compare",
    "welch_t_test",
]
