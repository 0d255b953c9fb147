"""Matrix dimensions for Leighton's column sort.

Column sort needs an ``r x s`` matrix with enough rows relative to columns
that one shifted pass of column sorts fixes every element left out of place
by the first five steps. Concretely::

    r * s == n    and    r >= 2 * (s - 1) ** 2

:func:`solve_dimensions` picks the widest such matrix for a given item count;
:func:`check_dimensions` validates a caller-chosen shape that may hold more
cells than items (the engine pads the rest).
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = [
    "Dimensions",
    "min_rows_for",
    "solve_dimensions",
    "check_dimensions",
]


@dataclass(frozen=True)
class Dimensions:
    """Row/column counts of a column-sort matrix."""

    rows: int
    cols: int

    @property
    def size(self) -> int:
        return self.rows * self.cols

    @property
    def is_degenerate(self) -> bool:
        """A single column: column sort reduces to one full sort."""
        return self.cols == 1


def min_rows_for(cols: int) -> int:
    """Smallest row count that supports ``cols`` columns."""
    return 2 * (cols - 1) ** 2


def solve_dimensions(n: int) -> Dimensions:
    """Return the ``(r, s)`` pair with the most columns for ``n`` items.

    Candidate column counts are scanned downward from ``n - 1``. A candidate
    must divide ``n`` and leave ``r = n // s`` rows with ``r >= 2 * (s - 1)**2``;
    the first one found wins. When nothing above one qualifies (``n`` prime,
    ``n`` small) the result is the single column ``(n, 1)``.

    Raises ``ValueError`` for ``n < 1``.
    """
    if n < 1:
        raise ValueError(f"solve_dimensions expects a positive item count, got {n}")

    cols = n - 1
    while cols > 1:
        if n % cols == 0:
            rows = n // cols
            if rows >= min_rows_for(cols):
                return Dimensions(rows=rows, cols=cols)
        cols -= 1

    return Dimensions(rows=n, cols=1)


def check_dimensions(n: int, rows: int, cols: int) -> Dimensions:
    """Validate an explicit ``rows x cols`` shape for ``n`` items.

    The shape may hold more cells than items; the surplus is padded by the
    engine and stripped again before output.
    """
    if n < 1:
        raise ValueError(f"check_dimensions expects a positive item count, got {n}")
    if rows < 1 or cols < 1:
        raise ValueError(f"rows and cols must be positive, got rows={rows}, cols={cols}")
    if rows * cols < n:
        raise ValueError(
            f"{rows} x {cols} matrix has {rows * cols} cells, too few for {n} items"
        )
    if cols > 1 and rows < min_rows_for(cols):
        raise ValueError(
            f"{cols} columns need at least {min_rows_for(cols)} rows, got {rows}"
        )
    return Dimensions(rows=rows, cols=cols)
