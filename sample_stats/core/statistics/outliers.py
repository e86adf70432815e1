"""sample_stats.core.statistics.outliers

Outlier removal using the IQR (interquartile range) method.

Quartiles are taken from a sorted copy at positions (n-1)*0.25 and (n-1)*0.75
with the same linear interpolation as ``percentile``. Values inside the fences

    [Q1 - k * IQR, Q3 + k * IQR]

are kept (inclusive). k = 1.5 is the usual Tukey choice; 2.0-3.0 keeps more
data. This suits performance measurements, which often carry extreme values
from network hiccups, scheduler noise or GC pauses.

Samples with fewer than MIN_OUTLIER_SAMPLE values are returned unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple

import numpy as np

from .descriptive import as_values, quantile_sorted
from ..results.stats_result import OutlierStats

logger = logging.getLogger(__name__)

MIN_OUTLIER_SAMPLE = 4


@dataclass(frozen=True)
class QuartileBounds:
    """First and third quartile of a sample."""
    q1: float
    q3: float

    @property
    def iqr(self) -> float:
        """Interquartile range Q3 - Q1."""
        return self.q3 - self.q1

    def fences(self, multiplier: float = 1.5) -> Tuple[float, float]:
        """Return (lower, upper) outlier fences for the given IQR multiplier."""
        spread = multiplier * self.iqr
        return self.q1 - spread, self.q3 + spread


def quartile_bounds(sample: Iterable[float]) -> QuartileBounds:
    """Compute Q1 and Q3 from a sorted copy of a non-empty sample.

    Raises:
        ValueError: If the sample is empty.
    """
    values = np.sort(as_values(sample))
    if values.size == 0:
        raise ValueError("quartiles need at least one value")
    return QuartileBounds(
        q1=quantile_sorted(values, 0.25),
        q3=quantile_sorted(values, 0.75),
    )


def remove_outliers(sample: Iterable, multiplier: float = 1.5) -> List:
    """Remove values outside the IQR fences.

    Args:
        sample: values (not modified)
        multiplier: IQR multiplier k (1.5 is standard, 2.0 is more conservative)

    Returns:
        New list with the kept values in their original order. Samples
        smaller than MIN_OUTLIER_SAMPLE are returned as an unchanged copy.
    """
    items = list(sample)
    if len(items) < MIN_OUTLIER_SAMPLE:
        return items

    values = np.asarray(items, dtype=float)
    bounds = quartile_bounds(values)
    lower, upper = bounds.fences(multiplier)

    mask = (values >= lower) & (values <= upper)
    kept = [item for item, keep in zip(items, mask) if keep]

    if len(kept) < len(items):
        logger.debug(
            "Removed %d of %d values outside [%g, %g] (q1=%g, q3=%g, k=%g)",
            len(items) - len(kept), len(items), lower, upper,
            bounds.q1, bounds.q3, multiplier,
        )
    return kept


def outlier_stats(sample: Iterable, multiplier: float = 1.5) -> OutlierStats:
    """Report how many values ``remove_outliers`` would drop.

    Args:
        sample: values
        multiplier: IQR multiplier k

    Returns:
        OutlierStats with counts and the removed share in percent
    """
    items = list(sample)
    original_count = len(items)
    filtered_count = len(remove_outliers(items, multiplier=multiplier))
    removed = original_count - filtered_count

    if original_count == 0:
        percentage = 0.0
    else:
        percentage = round(removed / original_count * 100.0, 2)

    return OutlierStats(
        original_count=original_count,
        filtered_count=filtered_count,
        outliers_removed=removed,
        outlier_percentage=percentage,
    )
