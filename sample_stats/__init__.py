"""
Sample Statistics

Descriptive statistics, IQR outlier filtering, percentage differences and
Welch's two-sample t-test for any finite collection of numbers.

Conventions:
- Inputs: any iterable of real numbers; integers and floats are coerced to float
- Inputs are never mutated; sorting works on a copy
- Percentiles: linear interpolation between closest ranks (R-7 / Excel)
- Variance: sample variance with Bessel's correction (n - 1)
- Significance tests: one-tailed, alpha = 0.05 unless given
- Degenerate results (NaN, +/-inf) are returned, not raised
"""

__version__ = "1.0.0"
__author__ = "Sample Statistics"

from .core.exceptions import InvalidArgumentError
from .core.models import Sample, StatsOptions
from .core.results import Comparison, OutlierStats, WelchTestResult
from .core.statistics import (
    mean,
    median,
    percentile,
    variance,
    standard_deviation,
    percentage_difference,
    signed_percentage_difference,
    remove_outliers,
    outlier_stats,
    t_value,
    degrees_of_freedom,
    greater_than,
    less_than,
    compare,
    welch_t_test,
)

__all__ = [
    # Version
    "__version__",

    # Errors
    "InvalidArgumentError",

    # Models
    "Sample",
    "StatsOptions",

    # Results
    "Comparison",
    "OutlierStats",
    "WelchTestResult",

    # Statistics
    "mean",
    "median",
    "percentile",
    "variance",
    "standard_deviation",
    "percentage_difference",
    "signed_percentage_difference",
    "remove_outliers",
    "outlier_stats",
    "t_value",
    "degrees_of_freedom",
    "greater_than",
    "less_than",
    "compare",
    "welch_t_test",
]
