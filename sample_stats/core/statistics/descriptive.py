"""sample_stats.core.statistics.descriptive

Descriptive statistics over a finite sample of real numbers.

Implemented:
- mean, median, sample variance (Bessel-corrected), standard deviation
- percentile with linear interpolation between closest ranks

Percentile convention:
  The fractional rank is pos = (n - 1) * p / 100 on the sorted sample. Integer
  positions return the element itself; otherwise the two neighbours are
  blended with weight pos - floor(pos). This is the R-7 / Excel "linear"
  method, e.g. the 25th percentile of [10, 20, 30, 40, 50] is 20.0.

Degenerate inputs return NaN (mean of an empty sample, variance of fewer than
two values) rather than raising. Callers check ``math.isfinite`` where it
matters to them.
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, Optional

import numpy as np

from ..exceptions import InvalidArgumentError


def as_values(sample: Iterable[float]) -> np.ndarray:
    """Materialize a sample as a 1-D float array.

    Accepts any finite iterable (list, tuple, range, set, generator, ndarray).
    The caller's object is never modified.
    """
    if isinstance(sample, np.ndarray):
        return np.asarray(sample, dtype=float).ravel()
    return np.asarray(list(sample), dtype=float)


def quantile_sorted(sorted_values: np.ndarray, fraction: float) -> float:
    """Linear-interpolated quantile of an already sorted, non-empty array.

    Args:
        sorted_values: ascending values
        fraction: quantile in [0, 1]

    Returns:
        value at position (n - 1) * fraction
    """
    pos = (sorted_values.size - 1) * fraction
    lower = math.floor(pos)
    if pos == lower:
        return float(sorted_values[lower])

    upper = math.ceil(pos)
    weight = pos - lower
    lo = float(sorted_values[lower])
    hi = float(sorted_values[upper])
    return lo + weight * (hi - lo)


def mean(sample: Iterable[float]) -> float:
    """Arithmetic mean. NaN for an empty sample."""
    values = as_values(sample)
    if values.size == 0:
        return float("nan")
    return float(values.sum()) / values.size


def median(sample: Iterable[float]) -> Optional[float]:
    """Median of the sample, or None if it is empty.

    Even-sized samples interpolate halfway between the two central values,
    lo + (hi - lo) / 2, the same as percentile(s, 50).
    """
    values = np.sort(as_values(sample))
    if values.size == 0:
        return None
    return quantile_sorted(values, 0.5)


def _validate_percentile(p) -> None:
    if isinstance(p, bool) or not isinstance(p, numbers.Real) or not 0 <= p <= 100:
        raise InvalidArgumentError(
            f"Percentile must be a number between 0 and 100, got {p!r}",
            value=p,
        )


def percentile(sample: Iterable[float], p: float) -> Optional[float]:
    """Percentile using linear interpolation between closest ranks.

    Args:
        sample: values
        p: percentile in [0, 100]

    Returns:
        interpolated value, or None for an empty sample

    Raises:
        InvalidArgumentError: if p is not a real number in [0, 100]
    """
    _validate_percentile(p)

    values = np.sort(as_values(sample))
    if values.size == 0:
        return None

    if p == 0:
        return float(values[0])
    if p == 100:
        return float(values[-1])
    return quantile_sorted(values, p / 100.0)


def variance(sample: Iterable[float]) -> float:
    """Sample variance with Bessel's correction.

    s^2 = sum((x - mean)^2) / (n - 1)

    Returns:
        variance, NaN when fewer than two values are given
    """
    values = as_values(sample)
    n = values.size
    if n < 2:
        return float("nan")

    m = float(values.sum()) / n
    return float(((values - m) ** 2).sum()) / (n - 1)


def standard_deviation(sample: Iterable[float]) -> float:
    """Square root of the sample variance."""
    return math.sqrt(variance(sample))
