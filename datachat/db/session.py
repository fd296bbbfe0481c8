# datachat/db/session.py
"""
Session database - the embedded SQLite store that uploads land in.

Defaults to an in-memory database. The connection is shared across
threads so the HTTP layer can use one session.
"""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Union

from datachat.core.exceptions import DatachatError
from datachat.db.models import ColumnInfo, QueryResult, TableInfo, schema_fingerprint
from datachat.ingest.exceptions import (
    EmptyTableError,
    InvalidDatabaseError,
    TableExistsError,
    TableLoadError,
)
from datachat.ingest.types import infer_sql_type, quote_identifier, to_sql_value
from datachat.logging.logger import get_logger
from datachat.logging.tags import DB

logger = get_logger(__name__)

MEMORY = ":memory:"

USER_TABLES_SQL = (
    "SELECT name, sql FROM sqlite_master "
    "WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\' "
    "ORDER BY rowid"
)


class QueryError(DatachatError):
    """Raised when a statement fails to execute."""

    def __init__(self, message: str, sql: str = ""):
        self.sql = sql
        super().__init__(message)


class SessionDatabase:
    """
    Embedded SQLite database holding every uploaded table.

    Transactions are managed explicitly, so the connection runs in
    autocommit mode outside of `transaction()`.
    """

    def __init__(self, path: Union[str, Path] = MEMORY):
        self.path = str(path)
        self._conn: sqlite3.Connection | None = None

    @property
    def conn(self) -> sqlite3.Connection:
        """Get or create database connection."""
        if self._conn is None:
            if self.path != MEMORY:
                Path(self.path).parent.mkdir(parents=True, exist_ok=True)
            self._conn = sqlite3.connect(self.path, check_same_thread=False, isolation_level=None)
            logger.debug(f"{DB} Opened session database at {self.path}")
        return self._conn

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run a block in one transaction, rolling back on any error."""
        conn = self.conn
        conn.execute("BEGIN")
        try:
            yield conn
        except BaseException:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def insert_rows(self, table_name: str, rows: list[dict[str, Any]]) -> int:
        """
        Create a table from typed rows and insert them.

        Column types come from the first row. An existing table of the same
        name gets the rows appended.

        Returns:
            Number of rows inserted

        Raises:
            EmptyTableError: If there are no rows
            TableLoadError: If SQLite rejects the table or a value
        """
        if not rows:
            raise EmptyTableError(table_name)

        columns = list(rows[0].keys())
        table = quote_identifier(table_name)
        column_defs = ", ".join(
            f"{quote_identifier(col)} {infer_sql_type(rows[0][col])}" for col in columns
        )
        column_list = ", ".join(quote_identifier(col) for col in columns)
        placeholders = ", ".join("?" for _ in columns)

        try:
            with self.transaction() as conn:
                conn.execute(f"CREATE TABLE IF NOT EXISTS {table} ({column_defs})")
                conn.executemany(
                    f"INSERT INTO {table} ({column_list}) VALUES ({placeholders})",
                    ([to_sql_value(row.get(col)) for col in columns] for row in rows),
                )
        except (sqlite3.Error, OverflowError) as e:
            raise TableLoadError(table_name, str(e)) from e

        logger.debug(f"{DB} Inserted {len(rows)} rows into {table_name}")
        return len(rows)

    def import_database(
        self, source_path: Union[str, Path], source: str | None = None
    ) -> list[tuple[str, int]]:
        """
        Copy every user table of another SQLite file into this session.

        Args:
            source_path: SQLite file to read (opened read-only)
            source: Display name for errors, defaults to the file name

        Returns:
            (table name, rows copied) per imported table

        Raises:
            InvalidDatabaseError: If the file can't be read as SQLite
            TableExistsError: If any table name is already taken. Nothing is
                imported in that case.
            TableLoadError: If SQLite rejects a table or its rows. The merge
                is rolled back.
        """
        path = Path(source_path).resolve()
        label = source or path.name

        try:
            src = sqlite3.connect(f"{path.as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise InvalidDatabaseError(label, str(e)) from e

        try:
            try:
                tables = src.execute(USER_TABLES_SQL).fetchall()
            except sqlite3.DatabaseError as e:
                raise InvalidDatabaseError(label, str(e)) from e

            existing = {name.lower() for name in self.table_names()}
            collisions = [name for name, _ in tables if name.lower() in existing]
            if collisions:
                raise TableExistsError(collisions)

            imported: list[tuple[str, int]] = []
            name = label
            try:
                with self.transaction() as conn:
                    for name, create_sql in tables:
                        conn.execute(create_sql)
                        cursor = src.execute(f"SELECT * FROM {quote_identifier(name)}")
                        columns = [d[0] for d in cursor.description]
                        rows = cursor.fetchall()
                        column_list = ", ".join(quote_identifier(c) for c in columns)
                        placeholders = ", ".join("?" for _ in columns)
                        conn.executemany(
                            f"INSERT INTO {quote_identifier(name)} ({column_list}) VALUES ({placeholders})",
                            rows,
                        )
                        imported.append((name, len(rows)))
                        logger.debug(f"{DB} Copied {len(rows)} rows into {name}")
            except sqlite3.Error as e:
                raise TableLoadError(name, str(e)) from e
        finally:
            src.close()

        return imported

    # -------------------------------------------------------------------------
    # Schema
    # -------------------------------------------------------------------------

    def schema(self) -> list[TableInfo]:
        """User tables in creation order, with their columns."""
        tables = self.conn.execute(USER_TABLES_SQL).fetchall()
        result = []
        for name, create_sql in tables:
            info = self.conn.execute(f"PRAGMA table_info({quote_identifier(name)})").fetchall()
            result.append(
                TableInfo(name=name, sql=create_sql, columns=[ColumnInfo(*col) for col in info])
            )
        return result

    def schema_sql(self) -> str:
        """CREATE statements of all user tables, separated by blank lines."""
        return "\n\n".join(t.sql for t in self.schema())

    def schema_fingerprint(self) -> str:
        return schema_fingerprint(self.schema())

    def table_names(self) -> list[str]:
        return [row[0] for row in self.conn.execute(USER_TABLES_SQL).fetchall()]

    def drop_table(self, name: str) -> None:
        """
        Drop a user table.

        Raises:
            KeyError: If the table doesn't exist
        """
        if name.lower() not in {t.lower() for t in self.table_names()}:
            raise KeyError(f"No such table: {name}")
        self.conn.execute(f"DROP TABLE {quote_identifier(name)}")
        logger.debug(f"{DB} Dropped table {name}")

    # -------------------------------------------------------------------------
    # Querying
    # -------------------------------------------------------------------------

    def execute(self, sql: str) -> QueryResult:
        """
        Run a single SQL statement.

        Raises:
            QueryError: With the SQLite message, if the statement fails
        """
        logger.debug(f"{DB} Executing: {sql}")
        try:
            cursor = self.conn.execute(sql)
            records = cursor.fetchall()
        except (sqlite3.Error, sqlite3.Warning) as e:
            raise QueryError(str(e), sql=sql) from e

        columns = [d[0] for d in cursor.description] if cursor.description else []
        rows = [dict(zip(columns, record)) for record in records]
        return QueryResult(columns=columns, rows=rows)

    def close(self) -> None:
        """Close database connection."""
        if self._conn:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> "SessionDatabase":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = ["SessionDatabase", "QueryError", "MEMORY"]
