"""Core data types for trend samples and state distribution results."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .parameter import ParameterId


NOT_TRENDED = "Not trended"
"""State reported when no sample establishes what the parameter was doing."""


@dataclass(frozen=True)
class Sample:
    """A single trend record: the string state a parameter reported at a time."""
    timestamp: datetime
    value: str

    def __repr__(self) -> str:
        return (
            f"Sample(time={self.timestamp.strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]}, "
            f"value={self.value!r})"
        )


@dataclass(frozen=True)
class TrendWindow:
    """Time window a distribution is computed over.

    Endpoints may be ``None`` while arguments are still being resolved; the
    calculator rejects such a window with ``InvalidWindow``.
    """
    start: datetime | None
    end: datetime | None

    @property
    def is_complete(self) -> bool:
        """Whether both endpoints are set."""
        return self.start is not None and self.end is not None

    @property
    def duration(self) -> timedelta:
        """Length of the window."""
        return self.end - self.start

    @property
    def total_seconds(self) -> int:
        """Length of the window in whole seconds."""
        return int(self.duration.total_seconds())

    def contains(self, timestamp: datetime) -> bool:
        """Whether a timestamp lies strictly inside the window."""
        return self.start < timestamp < self.end

    def __repr__(self) -> str:
        return f"TrendWindow(start={self.start}, end={self.end})"


@dataclass(frozen=True)
class NormalizedEvent:
    """A state change after window anchoring, truncation and deduplication."""
    timestamp: datetime
    value: str


@dataclass(frozen=True)
class ResultRow:
    """Time spent in one state, as a percentage of the window and in seconds."""
    key: str
    percentage: float
    absolute: int


@dataclass
class TrendDistribution:
    """Complete result of a distribution computation for one parameter."""
    parameter_id: ParameterId | str
    window: TrendWindow
    rows: list[ResultRow] = field(default_factory=list)
    total_seconds: int = 0
    sample_count: int = 0

    @property
    def row_count(self) -> int:
        """Number of distinct states in the result."""
        return len(self.rows)

    @property
    def is_not_trended(self) -> bool:
        """Whether the parameter had no trend data at all."""
        return self.sample_count == 0

    def as_dict(self) -> dict[str, float]:
        """Map each state to its percentage."""
        return {row.key: row.percentage for row in self.rows}

    def get_row(self, key: str) -> ResultRow | None:
        """Look up the row for a state, if present."""
        for row in self.rows:
            if row.key == key:
                return row
        return None
