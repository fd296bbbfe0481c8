# tests/ingest/test_detect.py
"""Tests for file-type detection."""

import pytest

from datachat.ingest.detect import FileKind, detect_file_kind, is_supported
from datachat.ingest.exceptions import UnsupportedFileError


class TestDetectFileKind:
    """Tests for detect_file_kind."""

    @pytest.mark.parametrize("name", ["a.sqlite3", "a.sqlite", "a.db", "a.s3db", "a.sl3", "A.DB"])
    def test_sqlite_extensions(self, name):
        assert detect_file_kind(name) is FileKind.SQLITE

    def test_csv_and_tsv(self):
        assert detect_file_kind("sales.csv") is FileKind.CSV
        assert detect_file_kind("SALES.CSV") is FileKind.CSV
        assert detect_file_kind("sales.tsv") is FileKind.TSV

    def test_separators(self):
        assert FileKind.CSV.separator == ","
        assert FileKind.TSV.separator == "\t"
        assert FileKind.SQLITE.separator is None

    def test_unknown_extension_raises(self):
        with pytest.raises(UnsupportedFileError, match="Unknown file type: notes.txt"):
            detect_file_kind("notes.txt")

    def test_extension_must_be_at_end(self):
        """Only the final extension counts."""
        assert not is_supported("data.csv.bak")
        assert not is_supported("archive.db.zip")

    def test_is_supported(self):
        assert is_supported("x.tsv")
        assert not is_supported("x.xlsx")
