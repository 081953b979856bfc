"""Trend source backed by samples held in memory."""

from __future__ import annotations

from typing import Iterable, Mapping

from trend_percentages.models import ParameterId, Sample, TrendWindow
from .base_source import TrendSource


class InMemoryTrendSource(TrendSource):
    """Serves samples from a mapping of parameter ID to trend records."""

    name = "memory"

    def __init__(self, records: Mapping[ParameterId | str, Iterable[Sample]] | None = None):
        self._records: dict[str, list[Sample]] = {}
        for parameter_id, samples in (records or {}).items():
            self.add_samples(parameter_id, samples)

    def add_samples(self, parameter_id: ParameterId | str, samples: Iterable[Sample]) -> None:
        """Append trend records for a parameter."""
        self._records.setdefault(str(parameter_id), []).extend(samples)

    def retrieve_samples(
        self,
        parameter_id: ParameterId | str,
        window: TrendWindow
    ) -> list[Sample]:
        return [
            sample for sample in self._records.get(str(parameter_id), [])
            if sample.timestamp <= window.end
        ]
