"""Command-line entry point: read integers, column-sort them, print the report.

Usage (from repo root)::

    python -m columnsort data/numbers.txt
    python -m columnsort data/numbers.txt --rows 50 --cols 6 --kind selection
    python -m columnsort            # prompts for the file name

Exit status is 0 on success and 1 on any input or dimension error; on error
no report is printed.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence

from columnsort.config import AVAILABLE_KINDS, DEFAULT_KIND
from columnsort.dimensions import Dimensions, check_dimensions
from columnsort.engine import timed_column_sort
from columnsort.reader import InputFormatError, read_integers
from columnsort.report import print_report


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="columnsort",
        description="Sort a file of integers (one per line) with Leighton's column sort.",
    )
    p.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Input file. When omitted, the file name is read from stdin.",
    )
    p.add_argument("--rows", type=int, default=None, help="Explicit row count r (requires --cols).")
    p.add_argument("--cols", type=int, default=None, help="Explicit column count s (requires --rows).")
    p.add_argument(
        "--kind",
        type=str,
        default=DEFAULT_KIND,
        choices=list(AVAILABLE_KINDS),
        help=f"Per-column sort used in steps 1, 3, 5 and 7 (default: {DEFAULT_KIND}).",
    )
    p.add_argument(
        "--json-out",
        type=str,
        default=None,
        help="Optional path for a JSON copy of the result (n, r, s, elapsed_seconds, values).",
    )
    p.add_argument(
        "--quiet",
        action="store_true",
        help="Print only n, r, s and the elapsed time, not the sorted values.",
    )
    return p


def _prompt_for_path() -> str:
    print("Enter File Name: ", end="", flush=True)
    return sys.stdin.readline().strip()


def _error(message: str) -> int:
    print(message, file=sys.stderr)
    return 1


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if (args.rows is None) != (args.cols is None):
        parser.error("--rows and --cols must be given together")

    path = args.path if args.path is not None else _prompt_for_path()
    if not path:
        return _error("Error: no input file given.")

    try:
        values = read_integers(path)
    except InputFormatError as exc:
        return _error(f"File Contains a non-Integer Value\nDetails: {exc}")
    except FileNotFoundError:
        return _error(f"Error: input file not found: '{path}'.")
    except OSError as exc:
        return _error(f"Error: could not read '{path}'.\nDetails: {exc}")

    if values.size == 0:
        return _error(f"Error: '{path}' contains no integers.")

    dims: Dimensions | None = None
    if args.rows is not None:
        try:
            dims = check_dimensions(int(values.size), args.rows, args.cols)
        except ValueError as exc:
            return _error(f"Error: invalid dimensions.\nDetails: {exc}")

    result = timed_column_sort(values, dims, kind=args.kind)

    print_report(result, include_values=not args.quiet)

    if args.json_out:
        out_path = Path(args.json_out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(result.to_dict(), indent=2), encoding="utf-8")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
