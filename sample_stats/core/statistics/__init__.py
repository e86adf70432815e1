"""Statistics for finite numeric samples.

This package contains small, dependency-light statistical helpers:
- Descriptive statistics (mean, median, percentile, variance)
- IQR outlier removal
- Percentage differences between means
- Welch's two-sample t-test with closed-form critical values

No SciPy dependency is required.
"""

from .descriptive import mean, median, percentile, variance, standard_deviation
from .comparison import percentage_difference, signed_percentage_difference
from .outliers import QuartileBounds, quartile_bounds, remove_outliers, outlier_stats
from .distributions import inverse_normal_cdf, inverse_t_distribution, critical_t_value, t_sf
from .tests import t_value, degrees_of_freedom, greater_than, less_than, compare, welch_t_test

__all__ = [
    "mean",
    "median",
    "percentile",
    "variance",
    "standard_deviation",
    "percentage_difference",
    "signed_percentage_difference",
    "QuartileBounds",
    "quartile_bounds",
    "remove_outliers",
    "outlier_stats",
    "inverse_normal_cdf",
    "inverse_t_distribution",
    "critical_t_value",
    "t_sf",
    "t_value",
    "degrees_of_freedom",
    "greater_than",
    "less_than",
    "compare",
    "welch_t_test",
]
