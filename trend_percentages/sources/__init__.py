"""Trend sources: where the samples for a parameter come from."""

from .base_source import TrendSource
from .memory_source import InMemoryTrendSource
from .csv_source import CsvTrendSource

__all__ = [
    "TrendSource",
    "InMemoryTrendSource",
    "CsvTrendSource",
]
