# citygrid/assets/importers/grammar.py
"""
Line scanning shared by the OBJ and MTL parsers.

Both formats are one statement per line: a keyword followed by arguments.
Handlers get the arguments twice, once split on whitespace and once as the
raw remainder for free-form values such as file names containing spaces.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, List, Sequence

from citygrid.errors import MalformedNumberError


@dataclass(frozen=True, slots=True)
class Statement:
    line_no: int  # 1-based
    keyword: str
    parts: List[str]
    unparsed: str


def iter_statements(text: str) -> Iterator[Statement]:
    """Yield every non-blank, non-comment line as a Statement."""
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue

        head = line.split(maxsplit=1)
        keyword = head[0]
        unparsed = head[1].strip() if len(head) > 1 else ""

        yield Statement(line_no, keyword, unparsed.split(), unparsed)


def parse_float(token: str, line_no: int) -> float:
    # float() also takes "nan", "inf" and "1_0"; none of those is valid here.
    try:
        if "_" in token:
            raise ValueError(token)
        value = float(token)
    except ValueError:
        raise MalformedNumberError(
            f"expected a number, got {token!r}", line_no
        ) from None
    if not math.isfinite(value):
        raise MalformedNumberError(
            f"expected a finite number, got {token!r}", line_no
        )
    return value


def parse_int(token: str, line_no: int) -> int:
    try:
        if "_" in token:
            raise ValueError(token)
        return int(token)
    except ValueError:
        raise MalformedNumberError(
            f"expected an integer, got {token!r}", line_no
        ) from None


def parse_floats(
    parts: Sequence[str], count: int, line_no: int
) -> tuple[float, ...]:
    """Parse exactly `count` leading floats; extra tokens are ignored."""
    if len(parts) < count:
        raise MalformedNumberError(
            f"expected {count} values, got {len(parts)}", line_no
        )
    return tuple(parse_float(p, line_no) for p in parts[:count])
