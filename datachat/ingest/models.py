# datachat/ingest/models.py
"""Upload outcome models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from datachat.ingest.detect import FileKind


@dataclass
class ImportReport:
    """Result of loading one file into the session database."""

    source: str
    kind: FileKind
    tables: list[str] = field(default_factory=list)
    rows: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "kind": self.kind.value,
            "tables": list(self.tables),
            "rows": self.rows,
        }


@dataclass
class UploadFailure:
    """A file that could not be loaded."""

    source: str
    error: str

    def to_dict(self) -> dict[str, Any]:
        return {"source": self.source, "error": self.error}


__all__ = ["ImportReport", "UploadFailure"]
