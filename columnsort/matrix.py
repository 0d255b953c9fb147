"""Flat-buffer matrix helpers for column sort.

A column-sort matrix of ``rows x cols`` values lives in a 1D ``int64`` numpy
buffer in column-major order: column ``j`` is ``buf[j * rows:(j + 1) * rows]``.
Every row-major/column-major reinterpretation in :mod:`columnsort.engine` is
a ``reshape``/transpose of that buffer, so no nested lists are built.

The two extreme ``int64`` values are reserved as sentinels. Input values must
lie strictly between them.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np

from columnsort.dimensions import Dimensions

__all__ = [
    "DTYPE",
    "NEG_INF",
    "POS_INF",
    "as_int_array",
    "build_buffer",
    "column_major",
    "sort_columns",
    "selection_sort",
]

DTYPE = np.int64
NEG_INF = int(np.iinfo(DTYPE).min)
POS_INF = int(np.iinfo(DTYPE).max)

# numpy ``kind`` names; "selection" is handled separately.
_NUMPY_KINDS = {"quicksort", "mergesort", "heapsort", "stable"}


def as_int_array(values: Iterable[int] | np.ndarray) -> np.ndarray:
    """Return ``values`` as a fresh 1D ``int64`` array.

    Raises ``TypeError`` for non-integer data and ``ValueError`` for values
    that collide with (or lie beyond) the sentinels.
    """
    arr = np.asarray(values if isinstance(values, np.ndarray) else list(values))

    if arr.ndim != 1:
        raise ValueError(f"expected a 1D sequence of integers, got shape {arr.shape}")
    if arr.size == 0:
        return np.empty(0, dtype=DTYPE)
    if arr.dtype.kind not in "iu":
        raise TypeError(f"column sort expects integer values, got dtype {arr.dtype}")

    # Checked before the cast so large unsigned values cannot wrap around.
    lo = int(arr.min())
    hi = int(arr.max())
    if lo <= NEG_INF or hi >= POS_INF:
        raise ValueError(
            f"values must lie strictly between {NEG_INF} and {POS_INF} "
            f"(reserved as sentinels), got range [{lo}, {hi}]"
        )

    return arr.astype(DTYPE, copy=True)


def build_buffer(values: Iterable[int] | np.ndarray, dimensions: Dimensions) -> tuple[int, np.ndarray]:
    """Lay ``values`` out as a column-major buffer of ``dimensions.size`` cells.

    Cells past the real values are filled with ``POS_INF``. Returns
    ``(count, buffer)`` where ``count`` is the number of real values.
    """
    arr = as_int_array(values)
    count = int(arr.size)

    if count < 1:
        raise ValueError("column sort needs at least one value")
    if count > dimensions.size:
        raise ValueError(
            f"{count} values do not fit a {dimensions.rows} x {dimensions.cols} matrix"
        )

    if count == dimensions.size:
        return count, arr

    buffer = np.full(dimensions.size, POS_INF, dtype=DTYPE)
    buffer[:count] = arr
    return count, buffer


def column_major(buffer: np.ndarray, rows: int) -> np.ndarray:
    """View ``buffer`` as ``(cols, rows)``: one row of the view per matrix column."""
    if rows < 1 or buffer.size % rows:
        raise ValueError(f"buffer of {buffer.size} cells is not a whole number of {rows}-row columns")
    return buffer.reshape(buffer.size // rows, rows)


def selection_sort(column: np.ndarray) -> None:
    """Sort a 1D array in place by repeatedly selecting the minimum."""
    for index in range(column.size - 1):
        smallest = index + int(np.argmin(column[index:]))
        if smallest != index:
            column[index], column[smallest] = column[smallest], column[index]


def sort_columns(buffer: np.ndarray, rows: int, kind: str = "quicksort") -> np.ndarray:
    """Sort every ``rows``-long column of ``buffer`` ascending, in place.

    Returns ``buffer`` so steps can be chained.
    """
    columns = column_major(buffer, rows)

    if kind == "selection":
        for column in columns:
            selection_sort(column)
    elif kind in _NUMPY_KINDS:
        columns.sort(axis=1, kind=kind)
    else:
        raise ValueError(f"Unknown column sort kind: {kind!r}")

    return buffer
