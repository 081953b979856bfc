"""Resolve the requested window from optional start/end arguments."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from trend_percentages.models import TrendWindow

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_HOURS = 24


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def resolve_window(
    start: datetime | None,
    end: datetime | None,
    lookback_hours: float = DEFAULT_LOOKBACK_HOURS,
    now: datetime | None = None
) -> TrendWindow:
    """Build the window to compute over.

    Both endpoints are used as given when both are set, even if they are in
    the wrong order; the calculator rejects such a window. If either one is
    missing the window falls back to the last ``lookback_hours`` up to now.

    Args:
        start: Requested start, or None
        end: Requested end, or None
        lookback_hours: Length of the fallback window
        now: Reference time for the fallback window (defaults to UTC now)

    Returns:
        TrendWindow to pass to the calculator
    """
    if start is not None and end is not None:
        return TrendWindow(start, end)

    if start is not None or end is not None:
        logger.warning(
            "Only one of start/end given; using the last %g hours instead", lookback_hours
        )

    now = now or utc_now()
    return TrendWindow(now - timedelta(hours=lookback_hours), now)
