"""
Options for sample statistics.

This module defines the defaults applied by the Sample model when a caller
does not pass an explicit significance level or outlier multiplier.
"""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass
class StatsOptions:
    """
    Configuration options for sample statistics.

    Attributes:
        alpha: One-tailed significance level for Welch's t-test (default: 0.05)
        outlier_multiplier: IQR multiplier for outlier fences (default: 1.5,
            2.0-3.0 is more conservative)
    """

    alpha: float = 0.05
    outlier_multiplier: float = 1.5

    def __post_init__(self):
        """Validate options after initialization."""
        if not 0 < self.alpha < 1:
            raise ValueError("alpha must be between 0 and 1")

        if self.outlier_multiplier < 0:
            raise ValueError("outlier_multiplier cannot be negative")

        self.alpha = float(self.alpha)
        self.outlier_multiplier = float(self.outlier_multiplier)

    @property
    def confidence_level(self) -> float:
        """
        Confidence level (complement of alpha).

        Returns:
            1 - alpha
        """
        return 1.0 - self.alpha

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize options to dictionary.

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return {
            "alpha": self.alpha,
            "outlier_multiplier": self.outlier_multiplier,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'StatsOptions':
        """
        Create StatsOptions from a dictionary.

        Args:
            data: Dictionary with option values

        Returns:
            New StatsOptions instance
        """
        return cls(
            alpha=data.get("alpha", 0.05),
            outlier_multiplier=data.get("outlier_multiplier", 1.5),
        )

    @classmethod
    def default(cls) -> 'StatsOptions':
        """Create options with default values."""
        return cls()
