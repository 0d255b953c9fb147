"""Read integer input for column sort.

Input is plain text with one integer per line (any whitespace separates
tokens). A single malformed token fails the whole read; nothing is returned
partially.
"""

from __future__ import annotations

import re
from pathlib import Path

import numpy as np

from columnsort.config import INPUT_ENCODING
from columnsort.matrix import DTYPE, NEG_INF, POS_INF

__all__ = [
    "InputFormatError",
    "parse_integers",
    "read_integers",
]

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


class InputFormatError(ValueError):
    """A token in the input is not a usable integer."""

    def __init__(self, source: str, line: int, token: str, reason: str = "not an integer") -> None:
        self.source = source
        self.line = line
        self.token = token
        self.reason = reason
        super().__init__(f"{source}:{line}: {token!r} is {reason}")


def parse_integers(text: str, *, source: str = "<string>") -> np.ndarray:
    """Parse whitespace-separated integers from ``text``.

    Tokens must be an optional sign followed by ASCII digits. Values equal to
    or beyond the ``int64`` extremes are rejected because those are reserved
    as sentinels.
    """
    values: list[int] = []

    for line_no, line in enumerate(text.splitlines(), start=1):
        for token in line.split():
            if not _INT_TOKEN.fullmatch(token):
                raise InputFormatError(source, line_no, token)
            value = int(token)
            if value <= NEG_INF or value >= POS_INF:
                raise InputFormatError(
                    source, line_no, token, f"outside the open range ({NEG_INF}, {POS_INF})"
                )
            values.append(value)

    return np.array(values, dtype=DTYPE)


def read_integers(path: str | Path) -> np.ndarray:
    """Read and parse the integer file at ``path``.

    ``FileNotFoundError`` and other ``OSError`` subclasses propagate.
    """
    p = Path(path)
    text = p.read_text(encoding=INPUT_ENCODING)
    return parse_integers(text, source=str(p))
