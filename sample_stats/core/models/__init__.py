"""Data models for sample statistics."""

from .options import StatsOptions
from .sample import Sample

__all__ = [
    "StatsOptions",
    "Sample",
]
