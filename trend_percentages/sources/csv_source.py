"""Trend source reading trend records from a CSV export.

Expected layout, one record per row::

    timestamp,parameter,value
    2025-10-21 23:08:27.995,12/345/100,Running
    2025-10-21 23:09:02.120,12/345/100,Stopped

The header row is optional. When present its column names are matched
against the configured ``columns`` (any order); without it the columns are
read positionally as timestamp, parameter, value.
"""

from __future__ import annotations

import csv
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Iterable, Iterator

from trend_percentages.config import DEFAULT_SETTINGS
from trend_percentages.errors import RetrievalFailure
from trend_percentages.models import ParameterId, Sample, TrendWindow
from .base_source import TrendSource

logger = logging.getLogger(__name__)

_FIELDS = ("timestamp", "parameter", "value")


class CsvTrendSource(TrendSource):
    """Reads the samples of one parameter from a trend-record CSV file."""

    name = "csv"

    def __init__(self, file_path: str | Path, settings: dict[str, Any] | None = None):
        """Initialize the source.

        Args:
            file_path: CSV file to read.
            settings: ``csv_source`` settings section; defaults apply when omitted.
        """
        self.file_path = Path(file_path)
        settings = settings or DEFAULT_SETTINGS["csv_source"]
        self.timestamp_formats: list[str] = list(settings.get("timestamp_formats", []))
        self.delimiter: str = settings.get("delimiter", ",")
        self.columns: dict[str, str] = {
            **DEFAULT_SETTINGS["csv_source"]["columns"],
            **settings.get("columns", {}),
        }

    def retrieve_samples(
        self,
        parameter_id: ParameterId | str,
        window: TrendWindow
    ) -> list[Sample]:
        wanted = str(parameter_id)
        samples = []

        try:
            with open(self.file_path, "r", encoding="utf-8", newline="") as f:
                for line_no, row in self._iter_rows(csv.reader(f, delimiter=self.delimiter)):
                    if row["parameter"] != wanted:
                        continue

                    timestamp = self._parse_timestamp(row["timestamp"], line_no)
                    if timestamp <= window.end:
                        samples.append(Sample(timestamp, row["value"]))
        except OSError as e:
            raise RetrievalFailure(
                f"Failed to retrieve trend information from {self.file_path}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise RetrievalFailure(f"Failed to decode {self.file_path}: {e}") from e
        except csv.Error as e:
            raise RetrievalFailure(f"Malformed CSV in {self.file_path}: {e}") from e

        logger.debug("Read %d samples for %s from %s", len(samples), wanted, self.file_path)
        return samples

    def _iter_rows(self, reader: Iterable[list[str]]) -> Iterator[tuple[int, dict[str, str]]]:
        """Yield (line number, row) pairs keyed by field name."""
        header_map: dict[str, int] | None = None
        first_row = True

        for line_no, raw in enumerate(reader, start=1):
            if not raw or not any(cell.strip() for cell in raw):
                continue

            if first_row:
                first_row = False
                header_map = self._detect_header(raw)
                if header_map is not None:
                    continue

            index = header_map or {name: idx for idx, name in enumerate(_FIELDS)}
            if len(raw) <= max(index.values()):
                logger.warning(
                    "%s line %d: expected %d columns, got %d; skipping",
                    self.file_path, line_no, len(index), len(raw),
                )
                continue

            yield line_no, {name: raw[idx].strip() for name, idx in index.items()}

    def _detect_header(self, first_row: list[str]) -> dict[str, int] | None:
        normalized = [col.strip().lower() for col in first_row]
        header_map = {}
        for field in _FIELDS:
            column = self.columns[field].lower()
            if column not in normalized:
                return None
            header_map[field] = normalized.index(column)
        return header_map

    def _parse_timestamp(self, value: str, line_no: int) -> datetime:
        for fmt in self.timestamp_formats:
            try:
                return datetime.strptime(value, fmt)
            except ValueError:
                continue
        raise RetrievalFailure(
            f"{self.file_path} line {line_no}: unsupported timestamp format: {value!r}"
        )
