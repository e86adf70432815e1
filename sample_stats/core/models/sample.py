"""
Sample class for sample statistics.

A Sample wraps a finite collection of numbers so that every statistic is
available as a method. Any iterable is accepted (list, tuple, range, set,
generator, numpy array); it is materialized once into an immutable tuple.

Comparison methods are named (greater_than, less_than, compare) instead of
overloading ``>``/``<``: a statistical "greater than" is not a total order.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple, Union

from .options import StatsOptions
from ..statistics import descriptive, comparison, outliers, tests
from ..statistics.outliers import QuartileBounds
from ..results.stats_result import Comparison, OutlierStats, WelchTestResult

Other = Union["Sample", Iterable[float]]


@dataclass(frozen=True)
class Sample:
    """
    Immutable finite sample of real numbers.

    Attributes:
        values: The materialized values, in input order
        options: Defaults for alpha and the outlier multiplier
    """

    values: Tuple[Any, ...]
    options: StatsOptions = field(default_factory=StatsOptions, compare=False)

    def __post_init__(self):
        if not isinstance(self.values, tuple):
            object.__setattr__(self, "values", tuple(self.values))
        if self.options is None:
            object.__setattr__(self, "options", StatsOptions())

    @classmethod
    def of(cls, data: Iterable[float], options: Optional[StatsOptions] = None) -> 'Sample':
        """Create a Sample from any iterable of numbers."""
        return cls(tuple(data), options if options is not None else StatsOptions())

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)

    @property
    def count(self) -> int:
        """Number of values."""
        return len(self.values)

    def _alpha(self, alpha: Optional[float]) -> float:
        return self.options.alpha if alpha is None else alpha

    def _multiplier(self, multiplier: Optional[float]) -> float:
        return self.options.outlier_multiplier if multiplier is None else multiplier

    # ------------------------------------------------------------------
    # Descriptive
    # ------------------------------------------------------------------

    def mean(self) -> float:
        return descriptive.mean(self.values)

    def median(self) -> Optional[float]:
        return descriptive.median(self.values)

    def percentile(self, p: float) -> Optional[float]:
        return descriptive.percentile(self.values, p)

    def variance(self) -> float:
        return descriptive.variance(self.values)

    def standard_deviation(self) -> float:
        return descriptive.standard_deviation(self.values)

    # ------------------------------------------------------------------
    # Outliers
    # ------------------------------------------------------------------

    def quartile_bounds(self) -> QuartileBounds:
        return outliers.quartile_bounds(self.values)

    def remove_outliers(self, multiplier: Optional[float] = None) -> 'Sample':
        """Return a new Sample without values outside the IQR fences."""
        kept = outliers.remove_outliers(self.values, multiplier=self._multiplier(multiplier))
        return Sample(tuple(kept), self.options)

    def outlier_stats(self, multiplier: Optional[float] = None) -> OutlierStats:
        return outliers.outlier_stats(self.values, multiplier=self._multiplier(multiplier))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def percentage_difference(self, other: Union[float, Other]) -> float:
        return comparison.percentage_difference(self.values, other)

    def signed_percentage_difference(self, other: Union[float, Other]) -> float:
        return comparison.signed_percentage_difference(self.values, other)

    # ------------------------------------------------------------------
    # Welch's t-test
    # ------------------------------------------------------------------

    def t_value(self, other: Other) -> float:
        return tests.t_value(self.values, other)

    def degrees_of_freedom(self, other: Other) -> float:
        return tests.degrees_of_freedom(self.values, other)

    def greater_than(self, other: Other, alpha: Optional[float] = None) -> bool:
        return tests.greater_than(self.values, other, alpha=self._alpha(alpha))

    def less_than(self, other: Other, alpha: Optional[float] = None) -> bool:
        return tests.less_than(self.values, other, alpha=self._alpha(alpha))

    def compare(self, other: Other, alpha: Optional[float] = None) -> Comparison:
        return tests.compare(self.values, other, alpha=self._alpha(alpha))

    def welch_t_test(self, other: Other, alpha: Optional[float] = None) -> WelchTestResult:
        return tests.welch_t_test(self.values, other, alpha=self._alpha(alpha))

    def summary(self) -> Dict[str, Any]:
        """Descriptive summary suitable for reporting."""
        if not self.values:
            return {"count": 0}
        return {
            "count": self.count,
            "mean": self.mean(),
            "median": self.median(),
            "min": descriptive.percentile(self.values, 0),
            "max": descriptive.percentile(self.values, 100),
            "variance": self.variance(),
            "standard_deviation": self.standard_deviation(),
        }
