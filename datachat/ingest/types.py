# datachat/ingest/types.py
"""SQL type inference and value conversion for typed rows."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import Any

_UNSAFE_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_]")


def infer_sql_type(value: Any) -> str:
    """
    Map a Python value to a SQLite column type.

    bool is checked before int since bool is an int subclass.
    """
    if isinstance(value, bool):
        return "INTEGER"
    if isinstance(value, int):
        return "INTEGER"
    if isinstance(value, float):
        return "REAL"
    return "TEXT"


def format_timestamp(value: datetime) -> str:
    """Format a datetime as ISO-8601 UTC with milliseconds, e.g. 2024-01-15T00:00:00.000Z."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f".{value.microsecond // 1000:03d}Z"
    )


def to_sql_value(value: Any) -> Any:
    """Convert a typed cell into something sqlite3 can bind."""
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, float) and math.isnan(value):
        return None
    return value


def table_name_for(file_name: str) -> str:
    """
    Derive a table name from an uploaded file name.

    Drops the last four characters and replaces anything outside
    [A-Za-z0-9_] with an underscore.

    Examples:
        >>> table_name_for("sales data.csv")
        'sales_data'
    """
    return _UNSAFE_NAME_CHARS.sub("_", file_name[:-4])


def quote_identifier(name: str) -> str:
    """Double-quote a SQL identifier, escaping embedded quotes."""
    return '"' + name.replace('"', '""') + '"'


__all__ = [
    "infer_sql_type",
    "format_timestamp",
    "to_sql_value",
    "table_name_for",
    "quote_identifier",
]
