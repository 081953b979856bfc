"""Table formatting for distribution results."""

from __future__ import annotations

from trend_percentages.models import TrendDistribution
from trend_percentages.utils import round_percentage

COLUMNS = ("Key", "Percentage", "Duration")


def format_percentage(percentage: float, decimals: int = 2) -> str:
    """Display value for a percentage cell, e.g. ``"33.33 %"`` or ``"50 %"``."""
    return f"{round_percentage(percentage, decimals):g} %"


def format_duration(seconds: int) -> str:
    """Format whole seconds as ``H:MM:SS``, with a day prefix past 24 hours."""
    days, remainder = divmod(int(seconds), 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes, secs = divmod(remainder, 60)
    text = f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{days}d {text}" if days else text


def build_table(
    distribution: TrendDistribution,
    decimals: int = 2
) -> list[tuple[str, str, str]]:
    """Build the display rows for a distribution, largest share first."""
    rows = sorted(distribution.rows, key=lambda r: (-r.percentage, r.key))
    return [
        (row.key, format_percentage(row.percentage, decimals), format_duration(row.absolute))
        for row in rows
    ]


def render_table(distribution: TrendDistribution, decimals: int = 2) -> str:
    """Render a distribution as a plain-text table."""
    table = [COLUMNS, *build_table(distribution, decimals)]
    widths = [max(len(row[i]) for row in table) for i in range(len(COLUMNS))]

    lines = []
    for index, row in enumerate(table):
        lines.append("  ".join(
            cell.ljust(width) if col == 0 else cell.rjust(width)
            for col, (cell, width) in enumerate(zip(row, widths))
        ).rstrip())
        if index == 0:
            lines.append("  ".join("-" * width for width in widths))
    return "\n".join(lines)
