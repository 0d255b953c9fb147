from __future__ import annotations

import pytest

from columnsort.dimensions import Dimensions, check_dimensions, min_rows_for, solve_dimensions


def _brute_force_cols(n: int) -> int:
    """Largest valid column count, found by trying every divisor."""
    best = 1
    for s in range(2, n):
        if n % s == 0 and n // s >= 2 * (s - 1) ** 2:
            best = max(best, s)
    return best


def test_single_item_is_one_by_one() -> None:
    assert solve_dimensions(1) == Dimensions(rows=1, cols=1)


@pytest.mark.parametrize(
    "n, expected",
    [
        (2, Dimensions(2, 1)),
        (4, Dimensions(2, 2)),
        (6, Dimensions(3, 2)),
        (9, Dimensions(9, 1)),
        (24, Dimensions(8, 3)),
        (32, Dimensions(16, 2)),
        (100, Dimensions(25, 4)),
        (1000, Dimensions(125, 8)),
    ],
)
def test_known_dimensions(n: int, expected: Dimensions) -> None:
    assert solve_dimensions(n) == expected


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97, 101, 7919])
def test_prime_counts_fall_back_to_one_column(n: int) -> None:
    dims = solve_dimensions(n)
    assert dims.cols == 1
    assert dims.rows == n
    assert dims.is_degenerate


def test_solved_dimensions_are_valid_and_maximal() -> None:
    for n in range(1, 400):
        dims = solve_dimensions(n)
        assert dims.size == n
        assert dims.cols == 1 or dims.rows >= 2 * (dims.cols - 1) ** 2
        assert dims.cols == _brute_force_cols(n), n


@pytest.mark.parametrize("n", [0, -1, -50])
def test_non_positive_count_raises(n: int) -> None:
    with pytest.raises(ValueError, match="positive item count"):
        solve_dimensions(n)


def test_min_rows_for() -> None:
    assert min_rows_for(1) == 0
    assert min_rows_for(2) == 2
    assert min_rows_for(4) == 18


def test_check_dimensions_accepts_padded_shape() -> None:
    dims = check_dimensions(10, 8, 3)
    assert dims == Dimensions(8, 3)
    assert dims.size == 24


@pytest.mark.parametrize(
    "n, rows, cols, message",
    [
        (10, 2, 3, "too few"),
        (10, 3, 4, "at least 18 rows"),
        (10, 0, 3, "must be positive"),
        (10, 12, 0, "must be positive"),
        (0, 4, 1, "positive item count"),
    ],
)
def test_check_dimensions_rejects(n: int, rows: int, cols: int, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        check_dimensions(n, rows, cols)


def test_check_dimensions_single_column_needs_only_capacity() -> None:
    assert check_dimensions(3, 5, 1) == Dimensions(5, 1)
