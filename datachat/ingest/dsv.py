# datachat/ingest/dsv.py
"""
Delimiter-separated values parsing with automatic value typing.

Cells are typed the way d3-dsv's autoType does it, so numbers become
numbers, ISO dates become datetimes and empty cells become None.
"""

from __future__ import annotations

import csv
import io
import math
import re
from datetime import datetime, timedelta, timezone
from typing import Any

_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_INFINITY_RE = re.compile(r"^[+-]?Infinity$")
_PREFIXED_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_ISO_DATE_RE = re.compile(
    r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?"
    r"(?:T(\d{2}):(\d{2})(?::(\d{2})(?:\.(\d{3}))?)?(Z|[-+]\d{2}:\d{2})?)?$",
    re.ASCII,
)

_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)

BOM = "\ufeff"

# SQLite INTEGER is a signed 64-bit value.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _as_int(value: int) -> int | float:
    if INT64_MIN <= value <= INT64_MAX:
        return value
    return float(value)


def _parse_number(text: str) -> int | float | None:
    if _PREFIXED_RE.match(text):
        return _as_int(int(text, 0))

    if _INFINITY_RE.match(text):
        return float("-inf") if text.startswith("-") else float("inf")

    if not _DECIMAL_RE.match(text):
        return None

    number = float(text)
    if math.isfinite(number) and number.is_integer():
        # Keep exact digits for integers beyond float precision.
        if _INTEGER_RE.match(text):
            return _as_int(int(text))
        return _as_int(int(number))
    return number


def _parse_date(text: str) -> datetime | None:
    match = _ISO_DATE_RE.match(text)
    if not match:
        return None

    year, month, day, hour, minute, second, millis, offset = match.groups()

    if offset is None or offset == "Z":
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        hours, minutes = int(offset[1:3]), int(offset[4:6])
        tz = timezone(sign * timedelta(hours=hours, minutes=minutes))

    try:
        return datetime(
            int(year),
            int(month or 1),
            int(day or 1),
            int(hour or 0),
            int(minute or 0),
            int(second or 0),
            int(millis or 0) * 1000,
            tzinfo=tz,
        )
    except ValueError:
        return None


def auto_type(value: str) -> Any:
    """
    Convert a raw cell to the most specific Python value.

    Examples:
        >>> auto_type(" 42 ")
        42
        >>> auto_type("true")
        True
        >>> auto_type("")
        >>> auto_type("hello")
        'hello'
    """
    text = value.strip()

    if not text:
        return None
    if text == "true":
        return True
    if text == "false":
        return False
    if text == "NaN":
        return float("nan")

    number = _parse_number(text)
    if number is not None:
        return number

    date = _parse_date(text)
    if date is not None:
        return date

    return value


def parse_dsv(text: str, separator: str) -> list[dict[str, Any]]:
    """
    Parse delimited text into typed row dicts.

    The first non-blank line is the header. A blank line between data rows
    becomes a row of None values; blank lines at the end are dropped. Short
    rows are padded with None and extra cells are dropped.

    Args:
        text: Decoded file contents
        separator: Field delimiter, "," or "\\t"

    Returns:
        One dict per data row, keyed by header name
    """
    if text.startswith(BOM):
        text = text[len(BOM) :]

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=separator)

    header: list[str] | None = None
    rows: list[dict[str, Any]] = []
    blank_lines = 0

    for cells in reader:
        if header is None:
            if cells:
                header = cells
            continue
        if not cells:
            blank_lines += 1
            continue

        for _ in range(blank_lines):
            rows.append(dict.fromkeys(header))
        blank_lines = 0

        row: dict[str, Any] = {}
        for i, name in enumerate(header):
            row[name] = auto_type(cells[i]) if i < len(cells) else None
        rows.append(row)

    return rows


__all__ = ["auto_type", "parse_dsv"]
