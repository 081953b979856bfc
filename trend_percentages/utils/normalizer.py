"""Turn raw trend samples into a window-anchored sequence of state changes."""

from __future__ import annotations

import logging
from typing import Iterable

from trend_percentages.models import NOT_TRENDED, NormalizedEvent, Sample, TrendWindow

logger = logging.getLogger(__name__)


def is_blank(value: str | None) -> bool:
    """Whether a sample value carries no state."""
    return value is None or not value.strip()


def find_carry_in_state(samples: list[Sample], window: TrendWindow) -> str:
    """Find the state already active when the window opens.

    Args:
        samples: Samples sorted by timestamp
        window: Window being normalized

    Returns:
        Value of the latest non-blank sample at or before ``window.start``,
        or ``NOT_TRENDED`` when there is none.
    """
    carry_in = NOT_TRENDED
    for sample in samples:
        if sample.timestamp > window.start:
            break
        if not is_blank(sample.value):
            carry_in = sample.value
    return carry_in


def normalize_samples(
    samples: Iterable[Sample],
    window: TrendWindow
) -> list[NormalizedEvent]:
    """Build the ordered, deduplicated event sequence covering a window.

    The first event sits at ``window.start`` with the carry-in state and the
    last one at ``window.end`` holding the final state. In between, every
    non-blank sample strictly inside the window contributes one event at its
    timestamp truncated to whole seconds. When several samples truncate to
    the same second, the earliest one wins.

    Args:
        samples: Raw samples in any order
        window: Validated window with ``start < end``

    Returns:
        List of NormalizedEvent objects sorted by timestamp
    """
    ordered = sorted(samples, key=lambda s: s.timestamp)

    events = [NormalizedEvent(window.start, find_carry_in_state(ordered, window))]
    used_timestamps = {window.start}

    for sample in ordered:
        if not window.contains(sample.timestamp) or is_blank(sample.value):
            continue

        timestamp = sample.timestamp.replace(microsecond=0)

        # Truncation can pull a sample onto (or before) a fractional start.
        if timestamp <= window.start or timestamp in used_timestamps:
            logger.debug("Dropping %r: timestamp %s already taken", sample, timestamp)
            continue

        used_timestamps.add(timestamp)
        events.append(NormalizedEvent(timestamp, sample.value))

    if events[-1].timestamp != window.end:
        events.append(NormalizedEvent(window.end, events[-1].value))

    return events
