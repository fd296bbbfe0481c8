# tests/conftest.py
"""
Root conftest - shared fixtures.

Every test runs against a temporary .datachat workspace, so nothing
touches the real working directory. LLM calls go to FakeChat.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any, Optional

import pytest

from datachat.core.paths import DatachatPaths
from datachat.db.session import SessionDatabase

SALES_CSV = """region,product,units,price,sold_on
North,Widget,10,2.5,2024-01-15
South,Gadget,3,10,2024-02-01
North,Gadget,7,10,2024-02-03
East,Widget,1,2.5,2024-03-10
"""

DEFAULT_REPLY = """The objective is to count rows.

```sql
SELECT COUNT(*) AS n FROM sales
```
"""


class FakeChat:
    """Stands in for ChatClient; records every call."""

    def __init__(
        self,
        reply: str = DEFAULT_REPLY,
        questions: Optional[list[str]] = None,
        error: Optional[Exception] = None,
    ):
        self.reply = reply
        self.questions = questions if questions is not None else ["How many units per region?"]
        self.error = error
        self.calls: list[dict[str, Any]] = []

    def complete(self, system: str, user: str, schema: Optional[dict] = None) -> Any:
        self.calls.append({"system": system, "user": user, "schema": schema})
        if self.error is not None:
            raise self.error
        if schema is not None:
            return {"questions": list(self.questions)}
        return self.reply


@pytest.fixture(autouse=True)
def workspace(tmp_path):
    """Point DatachatPaths at a temporary workspace."""
    ws = tmp_path / ".datachat"
    DatachatPaths.set_workspace(ws)
    yield ws
    DatachatPaths.reset()


@pytest.fixture
def no_api_keys(monkeypatch):
    """Remove API keys from the environment."""
    for name in ("DATACHAT_LLM_API_KEY", "LLMFOUNDRY_TOKEN", "OPENAI_API_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def database():
    db = SessionDatabase()
    yield db
    db.close()


@pytest.fixture
def fake_chat():
    return FakeChat()


@pytest.fixture
def sales_csv() -> bytes:
    return SALES_CSV.encode("utf-8")


@pytest.fixture
def make_sqlite(tmp_path):
    """Build a SQLite file from a mapping of table name to (create_sql, rows)."""

    def _make(tables: dict[str, tuple[str, list[tuple]]], name: str = "upload.db") -> Path:
        path = tmp_path / name
        conn = sqlite3.connect(path)
        for table, (create_sql, rows) in tables.items():
            conn.execute(create_sql)
            if rows:
                placeholders = ", ".join("?" for _ in rows[0])
                conn.executemany(f'INSERT INTO "{table}" VALUES ({placeholders})', rows)
        conn.commit()
        conn.close()
        return path

    return _make
