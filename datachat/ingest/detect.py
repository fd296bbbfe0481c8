# datachat/ingest/detect.py
"""File-type detection by file name."""

from __future__ import annotations

import re
from enum import Enum

from datachat.ingest.exceptions import UnsupportedFileError


class FileKind(str, Enum):
    """Kinds of file the uploader understands."""

    SQLITE = "sqlite"
    CSV = "csv"
    TSV = "tsv"

    @property
    def separator(self) -> str | None:
        """Field separator for delimited kinds, None for SQLite."""
        return {FileKind.CSV: ",", FileKind.TSV: "\t"}.get(self)


SQLITE_PATTERN = re.compile(r"\.(sqlite3|sqlite|db|s3db|sl3)$", re.IGNORECASE)
CSV_PATTERN = re.compile(r"\.csv$", re.IGNORECASE)
TSV_PATTERN = re.compile(r"\.tsv$", re.IGNORECASE)

_PATTERNS = [
    (SQLITE_PATTERN, FileKind.SQLITE),
    (CSV_PATTERN, FileKind.CSV),
    (TSV_PATTERN, FileKind.TSV),
]

SUPPORTED_EXTENSIONS = {".sqlite3", ".sqlite", ".db", ".s3db", ".sl3", ".csv", ".tsv"}


def detect_file_kind(name: str) -> FileKind:
    """
    Classify a file by its name.

    Raises:
        UnsupportedFileError: If the extension isn't recognised
    """
    for pattern, kind in _PATTERNS:
        if pattern.search(name):
            return kind
    raise UnsupportedFileError(name)


def is_supported(name: str) -> bool:
    """Check if a file name has a supported extension."""
    try:
        detect_file_kind(name)
    except UnsupportedFileError:
        return False
    return True


__all__ = [
    "FileKind",
    "SUPPORTED_EXTENSIONS",
    "detect_file_kind",
    "is_supported",
]
