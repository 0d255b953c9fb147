"""Time column sort across input sizes and per-column sort kinds.

Usage (from repo root):

    python -m scripts.benchmark_sort_kinds --sizes 1000 10000 100000 \
        --kinds quicksort mergesort --repeats 3 --csv --plot

Each run sorts a fresh random integer array, checks the output against
``np.sort`` and records one row. The script prints a pivot of median
elapsed seconds (sizes x kinds). With ``--csv`` the raw rows are written to
``benchmarks/column_sort_<label>.csv``; with ``--plot`` a log-log chart goes
to ``benchmarks/column_sort_<label>.png``.
"""
from __future__ import annotations

import argparse
import os
from typing import Sequence

import numpy as np
import pandas as pd

from columnsort.config import AVAILABLE_KINDS, BENCHMARK, PATHS
from columnsort.engine import timed_column_sort


def run_benchmark(
    sizes: Sequence[int],
    kinds: Sequence[str],
    *,
    repeats: int = BENCHMARK.repeats,
    seed: int = BENCHMARK.seed,
) -> pd.DataFrame:
    """Return one row per (size, kind, repeat) with the solved shape and time.

    Raises ``AssertionError`` if any run disagrees with ``np.sort``.
    """
    rng = np.random.default_rng(seed)
    rows = []

    for n in sizes:
        for repeat in range(repeats):
            values = rng.integers(BENCHMARK.value_low, BENCHMARK.value_high, size=n, dtype=np.int64)
            expected = np.sort(values)
            for kind in kinds:
                result = timed_column_sort(values, kind=kind)
                np.testing.assert_array_equal(result.values, expected)
                rows.append(
                    {
                        "n": n,
                        "rows": result.rows,
                        "cols": result.cols,
                        "kind": kind,
                        "repeat": repeat,
                        "elapsed_seconds": result.elapsed_seconds,
                    }
                )

    return pd.DataFrame(rows, columns=["n", "rows", "cols", "kind", "repeat", "elapsed_seconds"])


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Median elapsed seconds per size (index) and kind (columns)."""
    return df.pivot_table(index="n", columns="kind", values="elapsed_seconds", aggfunc="median")


def plot_summary(summary: pd.DataFrame, out_path: str) -> None:
    import matplotlib

    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=(8, 5))
    for kind in summary.columns:
        ax.plot(summary.index, summary[kind], marker="o", label=kind)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel("n (items)")
    ax.set_ylabel("median elapsed seconds")
    ax.set_title("Column sort by per-column sort kind")
    ax.grid(True, which="both", alpha=0.3)
    ax.legend()

    os.makedirs(os.path.dirname(out_path), exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path)
    plt.close(fig)


def main() -> None:
    p = argparse.ArgumentParser(description="Benchmark column sort over sizes and sort kinds.")
    p.add_argument("--sizes", type=int, nargs="+", default=BENCHMARK.sizes)
    p.add_argument(
        "--kinds",
        type=str,
        nargs="+",
        default=["quicksort", "mergesort", "heapsort", "stable"],
        choices=list(AVAILABLE_KINDS),
        help="Per-column sort kinds ('selection' is quadratic; keep sizes small).",
    )
    p.add_argument("--repeats", type=int, default=BENCHMARK.repeats)
    p.add_argument("--seed", type=int, default=BENCHMARK.seed)
    p.add_argument("--label", type=str, default="benchmark", help="Suffix for output files.")
    p.add_argument("--csv", action="store_true", help="Write raw rows to CSV.")
    p.add_argument("--plot", action="store_true", help="Write a PNG chart of the medians.")

    args = p.parse_args()

    df = run_benchmark(args.sizes, args.kinds, repeats=args.repeats, seed=args.seed)
    summary = summarize(df)

    shapes = df.drop_duplicates("n").set_index("n")[["rows", "cols"]]
    print("Solved shapes:")
    print(shapes.to_string())
    print()
    print("Median elapsed seconds:")
    print(summary.to_string(float_format=lambda v: f"{v:.6f}"))

    if args.csv:
        csv_path = PATHS.benchmark_csv(args.label)
        os.makedirs(os.path.dirname(csv_path), exist_ok=True)
        df.to_csv(csv_path, index=False)
        print(f"\nWrote {len(df)} rows to {csv_path}")

    if args.plot:
        png_path = PATHS.benchmark_plot(args.label)
        plot_summary(summary, png_path)
        print(f"Wrote plot to {png_path}")


if __name__ == "__main__":
    main()
