from __future__ import annotations

import io

import numpy as np
import pytest

from columnsort.dimensions import Dimensions
from columnsort.engine import ColumnSortResult
from columnsort.report import format_report, format_seconds, print_report


@pytest.mark.parametrize(
    "value, expected",
    [
        (0.0, "0.000"),
        (0.0004, "0.000"),
        (0.0004999, "0.000"),
        (-0.0004, "0.000"),
        (0.0006, "0.001"),
        (1.23456, "1.235"),
        (2.0, "2.000"),
        (12.5, "12.500"),
        (-0.75, "-0.750"),
    ],
)
def test_format_seconds(value: float, expected: str) -> None:
    assert format_seconds(value) == expected


def _result() -> ColumnSortResult:
    return ColumnSortResult(
        values=np.array([1, 2, 3, 4], dtype=np.int64),
        count=4,
        dimensions=Dimensions(2, 2),
        elapsed_seconds=0.0001,
    )


def test_format_report_lines() -> None:
    text = format_report(_result())
    assert text.splitlines() == [
        "n = 4",
        "r = 2",
        "s = 2",
        "Elapsed time = 0.000 seconds.",
        "1",
        "2",
        "3",
        "4",
    ]


def test_format_report_header_only() -> None:
    text = format_report(_result(), include_values=False)
    assert text.splitlines()[-1] == "Elapsed time = 0.000 seconds."
    assert len(text.splitlines()) == 4


def test_print_report_to_stream() -> None:
    buf = io.StringIO()
    print_report(_result(), file=buf)
    assert buf.getvalue().startswith("n = 4\nr = 2\ns = 2\n")
    assert buf.getvalue().endswith("4\n")


def test_print_report_defaults_to_stdout(capsys) -> None:
    print_report(_result(), include_values=False)
    out = capsys.readouterr().out
    assert "s = 2" in out
