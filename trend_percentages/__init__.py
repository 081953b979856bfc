"""Parameter Trend Percentages - time-in-state distribution for trended parameters."""

from .errors import (
    ConfigError,
    InvalidParameterId,
    InvalidWindow,
    InvariantViolation,
    RetrievalFailure,
    TrendPercentagesError,
)
from .models import (
    NOT_TRENDED,
    NormalizedEvent,
    ParameterId,
    ResultRow,
    Sample,
    TrendDistribution,
    TrendWindow,
)
from .calculator import StateDurationCalculator, calculate_distribution, validate_window

__version__ = "1.0.0"

__all__ = [
    "StateDurationCalculator",
    "calculate_distribution",
    "validate_window",
    "ConfigError",
    "InvalidParameterId",
    "InvalidWindow",
    "InvariantViolation",
    "RetrievalFailure",
    "TrendPercentagesError",
    "NOT_TRENDED",
    "NormalizedEvent",
    "ParameterId",
    "ResultRow",
    "Sample",
    "TrendDistribution",
    "TrendWindow",
]
