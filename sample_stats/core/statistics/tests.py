"""sample_stats.core.statistics.tests

Welch's two-sample t-test (unequal variances).

Test statistic:
    t = (mean_a - mean_b) / sqrt(s_a^2 / n_a + s_b^2 / n_b)

Degrees of freedom (Welch-Satterthwaite):
    v_a = s_a^2 / n_a,  v_b = s_b^2 / n_b
    df = (v_a + v_b)^2 / (v_a^2 / (n_a - 1) + v_b^2 / (n_b - 1))

Decisions are one-tailed against critical_t_value(df, alpha):
- A is greater than B if t > t_crit
- A is less than B    if t < -t_crit

Samples need at least two values each; smaller samples yield NaN statistics
and every decision comes out False/EQUAL.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable

from .descriptive import as_values, mean, variance
from .distributions import critical_t_value, t_sf
from ..results.stats_result import Comparison, WelchTestResult

logger = logging.getLogger(__name__)


def t_value(sample_a: Iterable[float], sample_b: Iterable[float]) -> float:
    """Welch t-statistic of sample_a against sample_b.

    Positive when sample_a has the larger mean. Returns 0.0 when the means are
    equal and a signed infinity when both variances are zero but the means
    differ.
    """
    a = as_values(sample_a)
    b = as_values(sample_b)
    if a.size == 0 or b.size == 0:
        return math.nan
    diff = mean(a) - mean(b)
    if diff == 0.0:
        return 0.0

    noise = math.sqrt(variance(a) / a.size + variance(b) / b.size)
    if noise == 0.0:
        return math.copysign(math.inf, diff)
    return diff / noise


def degrees_of_freedom(sample_a: Iterable[float], sample_b: Iterable[float]) -> float:
    """Welch-Satterthwaite degrees of freedom.

    Symmetric in its arguments and never above n_a + n_b - 2. NaN when a
    sample has fewer than two values or both variances are zero.
    """
    a = as_values(sample_a)
    b = as_values(sample_b)
    if a.size < 2 or b.size < 2:
        return math.nan

    n1 = variance(a) / a.size
    n2 = variance(b) / b.size

    denom = n1 ** 2 / (a.size - 1) + n2 ** 2 / (b.size - 1)
    if denom == 0.0:
        return math.nan
    # rounding can overshoot the pooled df when the variances match
    return min((n1 + n2) ** 2 / denom, float(a.size + b.size - 2))


def greater_than(sample_a: Iterable[float], sample_b: Iterable[float], alpha: float = 0.05) -> bool:
    """True if mean(sample_a) is significantly greater than mean(sample_b).

    Args:
        sample_a: first sample
        sample_b: second sample
        alpha: one-tailed significance level

    Returns:
        t > critical_t_value(df, alpha)
    """
    a = as_values(sample_a)
    b = as_values(sample_b)
    return t_value(a, b) > critical_t_value(degrees_of_freedom(a, b), alpha)


def less_than(sample_a: Iterable[float], sample_b: Iterable[float], alpha: float = 0.05) -> bool:
    """True if mean(sample_a) is significantly less than mean(sample_b)."""
    a = as_values(sample_a)
    b = as_values(sample_b)
    return t_value(a, b) < -critical_t_value(degrees_of_freedom(a, b), alpha)


def compare(sample_a: Iterable[float], sample_b: Iterable[float], alpha: float = 0.05) -> Comparison:
    """Three-way statistical comparison of two sample means.

    This is not a total order: different samples compare EQUAL whenever the
    difference is not significant at alpha.
    """
    a = as_values(sample_a)
    b = as_values(sample_b)
    if greater_than(a, b, alpha):
        return Comparison.GREATER
    if less_than(a, b, alpha):
        return Comparison.LESS
    return Comparison.EQUAL


def welch_t_test(
    sample_a: Iterable[float],
    sample_b: Iterable[float],
    alpha: float = 0.05,
) -> WelchTestResult:
    """Run Welch's t-test and collect statistic, df, critical value and verdict.

    The verdict matches ``compare``. The p-value is exact (incomplete beta)
    and one-sided in the direction of the observed difference.

    Args:
        sample_a: first sample
        sample_b: second sample
        alpha: one-tailed significance level

    Returns:
        WelchTestResult
    """
    a = as_values(sample_a)
    b = as_values(sample_b)

    t = t_value(a, b)
    df = degrees_of_freedom(a, b)
    t_crit = critical_t_value(df, alpha)

    if t > t_crit:
        comparison = Comparison.GREATER
    elif t < -t_crit:
        comparison = Comparison.LESS
    else:
        comparison = Comparison.EQUAL

    p_value = t_sf(abs(t), df)

    logger.debug(
        "Welch t-test: t=%.6g df=%.6g t_crit=%.6g alpha=%g p=%.6g -> %s",
        t, df, t_crit, alpha, p_value, comparison.name,
    )

    return WelchTestResult(
        t_statistic=float(t),
        degrees_of_freedom=float(df),
        critical_value=float(t_crit),
        alpha=float(alpha),
        comparison=comparison,
        p_value=p_value,
    )
