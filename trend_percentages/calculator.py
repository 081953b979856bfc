"""State duration distribution for a single trended parameter."""

from __future__ import annotations

import logging
from datetime import timedelta
from typing import Any, Iterable

from trend_percentages.errors import InvalidWindow
from trend_percentages.models import (
    NOT_TRENDED,
    ParameterId,
    ResultRow,
    Sample,
    TrendDistribution,
    TrendWindow,
)
from trend_percentages.sources import TrendSource
from trend_percentages.utils import aggregate_durations, normalize_samples

logger = logging.getLogger(__name__)

_MIN_WINDOW = timedelta(seconds=1)


def validate_window(window: TrendWindow) -> None:
    """Reject windows the distribution cannot be computed over.

    Raises:
        InvalidWindow: If an endpoint is missing, ``start >= end``, or the
            window is shorter than one whole second.
    """
    if window is None or not window.is_complete:
        raise InvalidWindow("Both start and end of the window are required")
    if window.start >= window.end:
        raise InvalidWindow(
            f"Invalid time provided: start {window.start} is not before end {window.end}"
        )
    if window.duration < _MIN_WINDOW:
        raise InvalidWindow(
            f"Window {window.start} - {window.end} is shorter than one second"
        )


def calculate_distribution(
    samples: Iterable[Sample],
    window: TrendWindow,
    decimals: int = 2
) -> list[ResultRow]:
    """Compute the time-in-state distribution of samples over a window.

    Args:
        samples: Trend records for one parameter, in any order
        window: Window to measure
        decimals: Decimal places kept on percentages

    Returns:
        One ResultRow per state. A parameter without any samples yields the
        single row ``("Not trended", 100, 0)``.

    Raises:
        InvalidWindow: If the window is not valid.
    """
    validate_window(window)

    samples = list(samples)
    if not samples:
        return [ResultRow(key=NOT_TRENDED, percentage=100.0, absolute=0)]

    events = normalize_samples(samples, window)
    return aggregate_durations(events, decimals)


class StateDurationCalculator:
    """Retrieves trend records for a parameter and computes its distribution."""

    def __init__(self, source: TrendSource, settings: dict[str, Any] | None = None):
        """Initialize the calculator.

        Args:
            source: Retrieval collaborator queried once per computation.
            settings: ``trend_settings`` section; defaults apply when omitted.
        """
        self.source = source
        self.settings = settings or {}

    @property
    def decimals(self) -> int:
        return int(self.settings.get("percentage_decimals", 2))

    def calculate(
        self,
        parameter_id: ParameterId | str,
        window: TrendWindow
    ) -> TrendDistribution:
        """Compute the distribution of one parameter over a window.

        Args:
            parameter_id: Parameter to query
            window: Window to measure

        Returns:
            TrendDistribution holding the result rows.

        Raises:
            InvalidWindow: If the window is not valid. Checked before retrieval.
            RetrievalFailure: If the source could not produce samples.
        """
        validate_window(window)

        samples = list(self.source.retrieve_samples(parameter_id, window))
        rows = calculate_distribution(samples, window, self.decimals)

        distribution = TrendDistribution(
            parameter_id=parameter_id,
            window=window,
            rows=rows,
            total_seconds=sum(row.absolute for row in rows),
            sample_count=len(samples),
        )

        if distribution.is_not_trended:
            logger.info("Parameter %s has no trend data", parameter_id)
        else:
            logger.info(
                "Parameter %s: %d samples, %d states over %ds",
                parameter_id,
                distribution.sample_count,
                distribution.row_count,
                distribution.total_seconds,
            )

        return distribution
