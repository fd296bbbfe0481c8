# datachat/db/models.py
"""Schema and query result models for the session database."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class ColumnInfo:
    """One row of PRAGMA table_info."""

    cid: int
    name: str
    type: str
    notnull: int
    dflt_value: Optional[str]
    pk: int


@dataclass
class TableInfo:
    """A user table with its CREATE statement and columns."""

    name: str
    sql: str
    columns: list[ColumnInfo] = field(default_factory=list)

    @property
    def column_names(self) -> list[str]:
        return [c.name for c in self.columns]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class QueryResult:
    """Rows returned by a statement, keyed by column name."""

    columns: list[str]
    rows: list[dict[str, Any]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def head(self, limit: int) -> list[dict[str, Any]]:
        """First `limit` rows."""
        return self.rows[:limit]


def schema_fingerprint(tables: list[TableInfo]) -> str:
    """Stable serialization of a schema, used as a cache key."""
    return json.dumps([t.to_dict() for t in tables], sort_keys=True)


__all__ = ["ColumnInfo", "TableInfo", "QueryResult", "schema_fingerprint"]
