"""sample_stats.core.statistics.comparison

Relative difference between a sample mean and another sample or a value.

Both helpers use the mean of the two compared values as the reference:

    d = (a - b) / |(a + b) / 2| * 100

Edge cases:
- a == b returns 0.0, including 0 vs 0
- a + b == 0 with a != b returns an infinity
"""

from __future__ import annotations

import math
import numbers
from typing import Iterable, Tuple, Union

from .descriptive import mean

Other = Union[float, Iterable[float]]


def _means(sample: Iterable[float], other: Other) -> Tuple[float, float]:
    a = mean(sample)
    if isinstance(other, numbers.Real):
        b = float(other)
    else:
        b = mean(other)
    return a, b


def percentage_difference(sample: Iterable[float], other: Other) -> float:
    """Absolute percentage difference between two means.

    Args:
        sample: values
        other: another sample (compared via its mean) or a scalar

    Returns:
        |a - b| / |(a + b) / 2| * 100, always >= 0
    """
    a, b = _means(sample, other)
    if a == b:
        return 0.0

    avg = abs((a + b) / 2.0)
    if avg == 0.0:
        return math.inf
    return abs(a - b) / avg * 100.0


def signed_percentage_difference(sample: Iterable[float], other: Other) -> float:
    """Signed percentage difference between two means.

    Positive when the sample mean exceeds the other value. Useful for
    regressions, e.g. latency before/after a change.

    Returns:
        (a - b) / |(a + b) / 2| * 100
    """
    a, b = _means(sample, other)
    if a == b:
        return 0.0

    avg = abs((a + b) / 2.0)
    if avg == 0.0:
        return math.copysign(math.inf, a - b)
    return (a - b) / avg * 100.0
