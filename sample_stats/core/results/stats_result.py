"""
Result classes for sample statistics.

This module defines the output data structures returned by outlier filtering
and by Welch's two-sample t-test.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Any, Optional


def _json_safe_value(value: Any) -> Any:
    """Convert non-JSON-safe floats (nan/inf) to None."""
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return None
    return value


class Comparison(Enum):
    """Outcome of a statistical three-way comparison.

    Values follow the usual cmp convention so that ``result.value`` can be
    used wherever -1/0/1 is expected.
    """
    GREATER = 1
    EQUAL = 0
    LESS = -1


@dataclass
class OutlierStats:
    """
    Summary of an IQR outlier-removal pass.

    Attributes:
        original_count: Number of values before filtering
        filtered_count: Number of values kept
        outliers_removed: original_count - filtered_count
        outlier_percentage: Share of values removed, in percent (2 decimals)
    """

    original_count: int
    filtered_count: int
    outliers_removed: int
    outlier_percentage: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialize outlier statistics to dictionary."""
        return {
            "original_count": self.original_count,
            "filtered_count": self.filtered_count,
            "outliers_removed": self.outliers_removed,
            "outlier_percentage": self.outlier_percentage,
        }


@dataclass
class WelchTestResult:
    """
    Result of a one-tailed Welch's t-test between two samples.

    The verdict is GREATER when t exceeds the critical value, LESS when t is
    below its negation, and EQUAL otherwise.

    Attributes:
        t_statistic: Welch t-statistic (positive when the first mean is larger)
        degrees_of_freedom: Welch-Satterthwaite degrees of freedom
        critical_value: One-tailed critical value at alpha
        alpha: Significance level of the test
        comparison: Three-way verdict
        p_value: One-sided p-value in the direction of the observed difference
    """

    t_statistic: float
    degrees_of_freedom: float
    critical_value: float
    alpha: float
    comparison: Comparison
    p_value: Optional[float] = None

    @property
    def significant(self) -> bool:
        """True if the means differ at the given alpha."""
        return self.comparison is not Comparison.EQUAL

    def to_dict(self) -> Dict[str, Any]:
        """Serialize test result to dictionary."""
        return {
            "test_name": "welch_t",
            "t_statistic": _json_safe_value(self.t_statistic),
            "degrees_of_freedom": _json_safe_value(self.degrees_of_freedom),
            "critical_value": _json_safe_value(self.critical_value),
            "alpha": self.alpha,
            "comparison": self.comparison.name.lower(),
            "significant": self.significant,
            "p_value": _json_safe_value(self.p_value),
        }
