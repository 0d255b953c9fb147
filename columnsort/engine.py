"""Leighton's column sort over a flat column-major buffer.

The eight steps (Leighton, 1984, "Tight bounds on the complexity of parallel
sorting"):

1. sort each column
2. read column-major, refill row-major ("transpose")
3. sort each column
4. read row-major, refill column-major (inverse of step 2)
5. sort each column
6. shift down by ``floor(r/2)`` into ``s + 1`` columns, padding the top of the
   first column with ``NEG_INF`` and the bottom of the last with ``POS_INF``
7. sort each column
8. drop the sentinels ("unshift")

Each step takes the buffer left by its predecessor and returns the next one.
A single-column matrix only needs step 1.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Iterable

import numpy as np

from columnsort.config import get_sort_kind
from columnsort.dimensions import Dimensions, check_dimensions, solve_dimensions
from columnsort.matrix import DTYPE, NEG_INF, POS_INF, build_buffer, sort_columns

__all__ = [
    "ColumnSortEngine",
    "ColumnSortResult",
    "column_sort",
    "timed_column_sort",
    "transpose_to_rows",
    "untranspose_to_columns",
    "shift_with_sentinels",
    "unshift_and_strip",
]


def transpose_to_rows(buffer: np.ndarray, dimensions: Dimensions) -> np.ndarray:
    """Step 2: the column-major sequence becomes the row-major fill.

    When ``s`` divides ``r`` this is Leighton's reshape of each column into
    ``r/s`` consecutive rows.
    """
    return buffer.reshape(dimensions.rows, dimensions.cols).T.ravel()


def untranspose_to_columns(buffer: np.ndarray, dimensions: Dimensions) -> np.ndarray:
    """Step 4: the row-major sequence becomes the column-major fill."""
    return buffer.reshape(dimensions.cols, dimensions.rows).T.ravel()


def shift_with_sentinels(buffer: np.ndarray, dimensions: Dimensions) -> np.ndarray:
    """Step 6: build the ``r x (s + 1)`` buffer.

    Column 0 starts with ``floor(r/2)`` ``NEG_INF`` cells and the last column
    ends with ``ceil(r/2)`` ``POS_INF`` cells; the data fills everything in
    between in column-major order.
    """
    half = dimensions.rows // 2
    return np.concatenate(
        [
            np.full(half, NEG_INF, dtype=DTYPE),
            buffer,
            np.full(dimensions.rows - half, POS_INF, dtype=DTYPE),
        ]
    )


def unshift_and_strip(buffer: np.ndarray) -> np.ndarray:
    """Step 8: drop every sentinel, keeping column-major order."""
    return buffer[(buffer != NEG_INF) & (buffer != POS_INF)]


class ColumnSortEngine:
    """Run column sort once over a private copy of the input.

    The engine owns its buffer; :meth:`run` hands the sorted values back and
    leaves the engine spent. ``dimensions`` is checked like an explicit shape,
    so a matrix with too few rows for its columns raises ``ValueError``.
    """

    def __init__(
        self,
        values: Iterable[int] | np.ndarray,
        dimensions: Dimensions,
        *,
        kind: str | None = None,
    ) -> None:
        self.count, self._buffer = build_buffer(values, dimensions)
        self.dimensions = check_dimensions(self.count, dimensions.rows, dimensions.cols)
        self.kind = get_sort_kind(kind)

    def run(self) -> np.ndarray:
        if self._buffer is None:
            raise RuntimeError("ColumnSortEngine.run() can only be called once")

        buffer, self._buffer = self._buffer, None
        dims = self.dimensions
        rows = dims.rows

        if dims.is_degenerate:
            # Padding is POS_INF and sorts to the tail.
            return sort_columns(buffer, rows, self.kind)[: self.count]

        buffer = sort_columns(buffer, rows, self.kind)
        buffer = transpose_to_rows(buffer, dims)
        buffer = sort_columns(buffer, rows, self.kind)
        buffer = untranspose_to_columns(buffer, dims)
        buffer = sort_columns(buffer, rows, self.kind)
        buffer = shift_with_sentinels(buffer, dims)
        buffer = sort_columns(buffer, rows, self.kind)
        buffer = unshift_and_strip(buffer)

        if buffer.size != self.count:
            raise RuntimeError(
                f"column sort returned {buffer.size} values for {self.count} inputs"
            )
        return buffer


@dataclass(frozen=True)
class ColumnSortResult:
    values: np.ndarray
    count: int
    dimensions: Dimensions
    elapsed_seconds: float

    @property
    def rows(self) -> int:
        return self.dimensions.rows

    @property
    def cols(self) -> int:
        return self.dimensions.cols

    def to_dict(self) -> dict[str, Any]:
        return {
            "n": self.count,
            "r": self.rows,
            "s": self.cols,
            "elapsed_seconds": self.elapsed_seconds,
            "values": self.values.tolist(),
        }


def _resolve_dimensions(count: int, dimensions: Dimensions | None) -> Dimensions:
    if dimensions is None:
        return solve_dimensions(count)
    return check_dimensions(count, dimensions.rows, dimensions.cols)


def column_sort(
    values: Iterable[int] | np.ndarray,
    dimensions: Dimensions | None = None,
    *,
    kind: str | None = None,
) -> np.ndarray:
    """Sort integers with column sort and return a new ``int64`` array.

    Without ``dimensions`` the widest valid matrix for ``len(values)`` is
    solved for. Explicit dimensions are validated and may hold more cells than
    values, in which case the surplus is padded and stripped again.
    """
    return timed_column_sort(values, dimensions, kind=kind).values


def timed_column_sort(
    values: Iterable[int] | np.ndarray,
    dimensions: Dimensions | None = None,
    *,
    kind: str | None = None,
) -> ColumnSortResult:
    """Like :func:`column_sort`, also timing the eight steps.

    Only :meth:`ColumnSortEngine.run` is timed; validation and padding are not.
    """
    arr = values if isinstance(values, np.ndarray) else np.asarray(list(values))
    dims = _resolve_dimensions(int(arr.size), dimensions)
    engine = ColumnSortEngine(arr, dims, kind=kind)

    start = time.perf_counter()
    sorted_values = engine.run()
    elapsed = time.perf_counter() - start

    return ColumnSortResult(
        values=sorted_values,
        count=engine.count,
        dimensions=dims,
        elapsed_seconds=elapsed,
    )
