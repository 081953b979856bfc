"""Command line entry point: time-in-state distribution of a trended parameter.

Usage:
    trend-percentages --parameter 12/345/100 --samples trend.csv
    trend-percentages --parameter 12/345/100/row1 --samples trend.csv --start 2025-10-21T00:00:00 --end 2025-10-22T00:00:00
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable

from trend_percentages.calculator import StateDurationCalculator
from trend_percentages.config import load_settings
from trend_percentages.errors import (
    ConfigError,
    InvalidParameterId,
    InvalidWindow,
    RetrievalFailure,
)
from trend_percentages.formatting import render_table
from trend_percentages.models import ParameterId
from trend_percentages.sources import CsvTrendSource
from trend_percentages.window import resolve_window

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _parse_datetime(value: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid datetime {value!r}, expected ISO 8601 (YYYY-MM-DDTHH:MM:SS)"
        ) from None

    # Trend records are naive UTC.
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_args(argv: Iterable[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="trend-percentages",
        description="Show how long a parameter spent in each state over a time window.",
    )
    parser.add_argument(
        "--parameter",
        required=True,
        help="Parameter ID as dma/element/parameter[/instance].",
    )
    parser.add_argument(
        "--samples",
        type=Path,
        required=True,
        help="CSV file with timestamp,parameter,value trend records.",
    )
    parser.add_argument(
        "--start",
        type=_parse_datetime,
        default=None,
        help="Window start (ISO 8601). Defaults to the look-back window if start or end is omitted.",
    )
    parser.add_argument(
        "--end",
        type=_parse_datetime,
        default=None,
        help="Window end (ISO 8601).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML settings file.",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Override the log level from the settings file.",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def _fail(message: str, code: int) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return code


def main(argv: Iterable[str] | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings(args.config)
    except (FileNotFoundError, ConfigError) as e:
        return _fail(str(e), EXIT_FAILURE)

    log_settings = settings["logging"]
    logging.basicConfig(
        level=args.log_level or str(log_settings["level"]).upper(),
        format=log_settings["format"],
    )

    try:
        parameter_id = ParameterId.parse(args.parameter)
    except InvalidParameterId as e:
        return _fail(str(e), EXIT_USAGE)

    trend_settings = settings["trend_settings"]
    window = resolve_window(
        args.start,
        args.end,
        lookback_hours=float(trend_settings["default_lookback_hours"]),
    )

    calculator = StateDurationCalculator(
        CsvTrendSource(args.samples, settings["csv_source"]),
        trend_settings,
    )

    try:
        distribution = calculator.calculate(parameter_id, window)
    except InvalidWindow as e:
        return _fail(str(e), EXIT_USAGE)
    except RetrievalFailure as e:
        return _fail(str(e), EXIT_FAILURE)

    print(f"Parameter {parameter_id}: {window.start} - {window.end}")
    print(render_table(distribution, calculator.decimals))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
