# datachat/ingest/__init__.py
"""
File ingestion: type detection, DSV parsing, SQL typing and upload.

Public API:
    - Uploader: loads CSV/TSV/SQLite files into a SessionDatabase
    - detect_file_kind / FileKind: classify a file by name
    - parse_dsv / auto_type: delimited text to typed rows
    - infer_sql_type / table_name_for: schema normalization helpers
"""

from datachat.ingest.detect import SUPPORTED_EXTENSIONS, FileKind, detect_file_kind, is_supported
from datachat.ingest.dsv import auto_type, parse_dsv
from datachat.ingest.exceptions import (
    EmptyTableError,
    IngestError,
    InvalidDatabaseError,
    TableExistsError,
    TableLoadError,
    UnsupportedFileError,
)
from datachat.ingest.models import ImportReport, UploadFailure
from datachat.ingest.types import infer_sql_type, quote_identifier, table_name_for, to_sql_value
from datachat.ingest.uploader import Uploader

__all__ = [
    "Uploader",
    "ImportReport",
    "UploadFailure",
    "FileKind",
    "SUPPORTED_EXTENSIONS",
    "detect_file_kind",
    "is_supported",
    "auto_type",
    "parse_dsv",
    "infer_sql_type",
    "to_sql_value",
    "table_name_for",
    "quote_identifier",
    "IngestError",
    "UnsupportedFileError",
    "EmptyTableError",
    "TableExistsError",
    "InvalidDatabaseError",
    "TableLoadError",
]
