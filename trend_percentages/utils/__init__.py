"""Processing stages for state duration distributions."""

from .normalizer import is_blank, normalize_samples, find_carry_in_state
from .aggregator import aggregate_durations, accumulate_durations, round_percentage

__all__ = [
    'is_blank',
    'normalize_samples',
    'find_carry_in_state',
    'aggregate_durations',
    'accumulate_durations',
    'round_percentage',
]
