"""Accumulate time spent per state and convert it to distribution rows."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Sequence

from trend_percentages.errors import InvariantViolation
from trend_percentages.models import NormalizedEvent, ResultRow


def round_percentage(value: float, decimals: int = 2) -> float:
    """Round half away from zero to a fixed number of decimals.

    ``round()`` rounds half to even on the binary value, so 0.125 would
    become 0.12; this returns 0.13.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def accumulate_durations(events: Sequence[NormalizedEvent]) -> dict[str, int]:
    """Sum whole seconds spent in each state.

    Each event's state is active until the next event. Interval lengths are
    truncated toward zero before summing.

    Args:
        events: Events sorted by timestamp

    Returns:
        Dictionary mapping state to active seconds, in first-seen order
    """
    durations: dict[str, int] = {}

    for current, following in zip(events, events[1:]):
        seconds = int((following.timestamp - current.timestamp).total_seconds())
        durations[current.value] = durations.get(current.value, 0) + seconds

    return durations


def aggregate_durations(
    events: Sequence[NormalizedEvent],
    decimals: int = 2
) -> list[ResultRow]:
    """Convert a normalized event sequence into one row per state.

    Args:
        events: Normalized events covering the window
        decimals: Decimal places kept on percentages

    Returns:
        List of ResultRow objects in first-seen state order. Empty when fewer
        than two events are given.

    Raises:
        InvariantViolation: If the intervals add up to zero seconds.
    """
    if len(events) < 2:
        return []

    durations = accumulate_durations(events)
    total_duration = sum(durations.values())
    if total_duration <= 0:
        raise InvariantViolation(
            f"Normalized events span {total_duration}s; expected a positive duration"
        )

    return [
        ResultRow(
            key=state,
            percentage=round_percentage(seconds / total_duration * 100, decimals),
            absolute=seconds,
        )
        for state, seconds in durations.items()
    ]
