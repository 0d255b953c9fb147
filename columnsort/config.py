# columnsort/config.py

from __future__ import annotations

import os
from dataclasses import dataclass, field

# --- Base paths ---
# Project root can be overridden if needed (e.g. for tests or benchmarks)
BASE_DIR = os.path.abspath(os.getenv("COLUMNSORT_BASE_DIR", os.path.join(os.path.dirname(__file__), "..")))


# ---------------------------
# Structured configuration
# ---------------------------

@dataclass(frozen=True)
class PathsConfig:
    """Filesystem and path configuration.

    Values can be overridden via environment variables:
    - COLUMNSORT_BENCHMARKS_DIR
    """

    benchmarks_dir: str = field(
        default_factory=lambda: os.getenv(
            "COLUMNSORT_BENCHMARKS_DIR", os.path.join(BASE_DIR, "benchmarks")
        )
    )

    def benchmark_csv(self, label: str) -> str:
        return os.path.join(self.benchmarks_dir, f"column_sort_{label.lower()}.csv")

    def benchmark_plot(self, label: str) -> str:
        return os.path.join(self.benchmarks_dir, f"column_sort_{label.lower()}.png")


@dataclass(frozen=True)
class SortConfig:
    """Engine and report defaults."""

    # Per-column sort used in steps 1, 3, 5 and 7
    column_sort_kind: str = field(
        default_factory=lambda: os.getenv("COLUMNSORT_KIND", "quicksort")
    )
    available_kinds: tuple[str, ...] = ("quicksort", "mergesort", "heapsort", "stable", "selection")

    # Report formatting
    time_decimals: int = 3
    input_encoding: str = "utf-8"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Defaults for ``scripts/benchmark_sort_kinds.py``."""

    sizes: list[int] = field(default_factory=lambda: [1_000, 10_000, 100_000, 1_000_000])
    repeats: int = 3
    seed: int = 1984
    value_low: int = -1_000_000
    value_high: int = 1_000_000


# Instantiate structured configs
PATHS = PathsConfig()
SORT = SortConfig()
BENCHMARK = BenchmarkConfig()


# ---------------------------
# Flat aliases
# ---------------------------
DEFAULT_KIND = SORT.column_sort_kind
AVAILABLE_KINDS = SORT.available_kinds
TIME_DECIMALS = SORT.time_decimals
INPUT_ENCODING = SORT.input_encoding


def get_sort_kind(kind: str | None = None) -> str:
    """Return the effective per-column sort kind.

    ``kind`` wins over ``COLUMNSORT_KIND``; the name is lower-cased and must be
    one of :data:`AVAILABLE_KINDS`.
    """
    name = (kind or DEFAULT_KIND).strip().lower()
    if name not in AVAILABLE_KINDS:
        raise ValueError(
            f"Unknown column sort kind {name!r}; expected one of {list(AVAILABLE_KINDS)}"
        )
    return name
