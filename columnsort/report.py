"""Console report for a column-sort run."""

from __future__ import annotations

import sys
from typing import TextIO

from columnsort.config import TIME_DECIMALS
from columnsort.engine import ColumnSortResult

__all__ = [
    "format_seconds",
    "format_header",
    "format_report",
    "print_report",
]


def format_seconds(value: float) -> str:
    """Format ``value`` with three decimals; tiny magnitudes print as ``0.000``."""
    if abs(value) < 0.5 * 10 ** (-TIME_DECIMALS):
        return f"{0.0:.{TIME_DECIMALS}f}"
    return f"{value:.{TIME_DECIMALS}f}"


def format_header(result: ColumnSortResult) -> list[str]:
    return [
        f"n = {result.count}",
        f"r = {result.rows}",
        f"s = {result.cols}",
        f"Elapsed time = {format_seconds(result.elapsed_seconds)} seconds.",
    ]


def format_report(result: ColumnSortResult, *, include_values: bool = True) -> str:
    """Render the header lines followed by the sorted values, one per line."""
    lines = format_header(result)
    if include_values:
        lines.extend(str(v) for v in result.values.tolist())
    return "\n".join(lines)


def print_report(
    result: ColumnSortResult,
    file: TextIO | None = None,
    *,
    include_values: bool = True,
) -> None:
    print(format_report(result, include_values=include_values), file=file or sys.stdout)
