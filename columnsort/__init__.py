"""Leighton's column sort for integer sequences.

The library layer (dimensions, matrix, engine, reader, report) is pure and
silent; console output lives in :mod:`columnsort.cli`.
"""

from columnsort.dimensions import Dimensions, check_dimensions, solve_dimensions
from columnsort.engine import ColumnSortEngine, ColumnSortResult, column_sort, timed_column_sort
from columnsort.matrix import NEG_INF, POS_INF

__all__ = [
    "Dimensions",
    "check_dimensions",
    "solve_dimensions",
    "ColumnSortEngine",
    "ColumnSortResult",
    "column_sort",
    "timed_column_sort",
    "NEG_INF",
    "POS_INF",
]

__version__ = "0.1.0"
