# datachat/ingest/uploader.py
"""
Uploader - loads CSV, TSV and SQLite files into the session database.

CSV/TSV files become one table named after the file. SQLite files have
all their user tables merged into the session in a single transaction.

Usage:
    uploader = Uploader(database)
    report = uploader.upload("sales.csv", data)
    reports, failures = uploader.upload_many([("a.csv", a), ("b.db", b)])
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Union

from datachat.ingest.detect import FileKind, detect_file_kind
from datachat.ingest.dsv import parse_dsv
from datachat.ingest.exceptions import EmptyTableError, IngestError, InvalidDatabaseError
from datachat.ingest.models import ImportReport, UploadFailure
from datachat.ingest.types import table_name_for
from datachat.logging.logger import get_logger
from datachat.logging.tags import INGEST

if TYPE_CHECKING:
    from datachat.db.session import SessionDatabase

logger = get_logger(__name__)

SQLITE_HEADER = b"SQLite format 3\x00"


class Uploader:
    """Loads uploaded files into a SessionDatabase."""

    def __init__(self, database: "SessionDatabase"):
        self.database = database

    def upload(self, name: str, data: bytes) -> ImportReport:
        """
        Load one file.

        Args:
            name: Original file name, used for type detection and table naming
            data: Raw file contents

        Raises:
            UnsupportedFileError: Unknown extension
            EmptyTableError: Delimited file without data rows
            TableExistsError: SQLite file defines a table the session has
            InvalidDatabaseError: SQLite extension but unreadable content
        """
        kind = detect_file_kind(name)

        if kind is FileKind.SQLITE:
            return self._upload_sqlite(name, data)
        return self._upload_dsv(name, data, kind)

    def upload_path(self, path: Union[str, Path]) -> ImportReport:
        """Load a file from disk."""
        p = Path(path)
        return self.upload(p.name, p.read_bytes())

    def upload_many(
        self, files: Iterable[tuple[str, bytes]]
    ) -> tuple[list[ImportReport], list[UploadFailure]]:
        """
        Load several files in order.

        A failing file is recorded and the rest still load.
        """
        reports: list[ImportReport] = []
        failures: list[UploadFailure] = []

        for name, data in files:
            try:
                reports.append(self.upload(name, data))
            except IngestError as e:
                logger.warning(f"{INGEST} Failed to load {name}: {e}")
                failures.append(UploadFailure(source=name, error=str(e)))

        return reports, failures

    def _upload_dsv(self, name: str, data: bytes, kind: FileKind) -> ImportReport:
        text = data.decode("utf-8", errors="replace")
        rows = parse_dsv(text, kind.separator)
        if not rows:
            raise EmptyTableError(name)

        table = table_name_for(name)
        count = self.database.insert_rows(table, rows)
        logger.info(f"{INGEST} Imported table: {table}")
        return ImportReport(source=name, kind=kind, tables=[table], rows=count)

    def _upload_sqlite(self, name: str, data: bytes) -> ImportReport:
        if data and not data.startswith(SQLITE_HEADER):
            raise InvalidDatabaseError(name)

        with tempfile.TemporaryDirectory(prefix="datachat-") as tmp:
            path = Path(tmp) / "upload.sqlite"
            path.write_bytes(data)
            imported = self.database.import_database(path, source=name)

        logger.info(f"{INGEST} Imported SQLite DB: {name}")
        return ImportReport(
            source=name,
            kind=FileKind.SQLITE,
            tables=[table for table, _ in imported],
            rows=sum(count for _, count in imported),
        )


__all__ = ["Uploader", "SQLITE_HEADER"]
