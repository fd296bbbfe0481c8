# datachat/ingest/exceptions.py
"""Errors raised while loading files into the session database."""

from __future__ import annotations

from datachat.core.exceptions import DatachatError


class IngestError(DatachatError):
    """Base error for file ingestion."""

    pass


class UnsupportedFileError(IngestError):
    """Raised when a file name has no recognised extension."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown file type: {name}")


class EmptyTableError(IngestError):
    """Raised when a delimited file has a header but no data rows."""

    def __init__(self, source: str):
        self.source = source
        super().__init__(f"No data rows found in {source}")


class TableExistsError(IngestError):
    """Raised when an uploaded database defines tables the session already has."""

    def __init__(self, tables: list[str]):
        self.tables = tables
        super().__init__(f"Tables already exist in session database: {', '.join(tables)}")


class InvalidDatabaseError(IngestError):
    """Raised when an uploaded file is not a readable SQLite database."""

    def __init__(self, source: str, reason: str = "file is not a SQLite database"):
        self.source = source
        super().__init__(f"Cannot import {source}: {reason}")


class TableLoadError(IngestError):
    """Raised when SQLite rejects a table or its rows."""

    def __init__(self, table: str, reason: str):
        self.table = table
        super().__init__(f"Cannot load table {table}: {reason}")


__all__ = [
    "IngestError",
    "UnsupportedFileError",
    "EmptyTableError",
    "TableExistsError",
    "InvalidDatabaseError",
    "TableLoadError",
]
