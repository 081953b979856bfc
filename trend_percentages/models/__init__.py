"""Data models for trend samples, windows and distribution results."""

from .data_types import (
    NOT_TRENDED,
    Sample,
    TrendWindow,
    NormalizedEvent,
    ResultRow,
    TrendDistribution,
)
from .parameter import ParameterId

__all__ = [
    "NOT_TRENDED",
    "Sample",
    "TrendWindow",
    "NormalizedEvent",
    "ResultRow",
    "TrendDistribution",
    "ParameterId",
]
