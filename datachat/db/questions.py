# datachat/db/questions.py
"""
Sample-question cache.

Holds one memoized set of suggested questions, keyed by the schema it
was generated for. The LLM is only asked again once the schema changes.
The value can be persisted to a JSON file so separate CLI runs share it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Union

from datachat.core.exceptions import DatachatError
from datachat.db.models import schema_fingerprint
from datachat.logging.logger import get_logger
from datachat.logging.tags import LLM

if TYPE_CHECKING:
    from datachat.db.session import SessionDatabase

logger = get_logger(__name__)

QUESTIONS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {"questions": {"type": "array", "items": {"type": "string"}}},
    "required": ["questions"],
    "additionalProperties": False,
}


@dataclass
class QuestionInfo:
    """Suggested questions, or the error from generating them."""

    questions: list[str] = field(default_factory=list)
    error: Optional[str] = None
    schema: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {"questions": list(self.questions), "error": self.error, "schema": self.schema}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "QuestionInfo":
        return cls(
            questions=[str(q) for q in data.get("questions", [])],
            error=data.get("error"),
            schema=data.get("schema"),
        )


def questions_prompt(count: int) -> str:
    return f"Suggest {count} diverse, useful questions that a user can answer from this dataset using SQLite"


class QuestionCache:
    """
    Memoizes sample questions for the current schema.

    Args:
        chat: Object with `complete(system, user, schema)` (e.g. ChatClient)
        path: Optional JSON file to persist the memoized value
        count: Number of questions to ask for
    """

    def __init__(self, chat: Any, path: Union[str, Path, None] = None, count: int = 5):
        self.chat = chat
        self.path = Path(path) if path is not None else None
        self.count = count
        self._info: QuestionInfo | None = None

    def get(self, database: "SessionDatabase", refresh: bool = False) -> QuestionInfo:
        """
        Questions for the database's current schema.

        An empty database yields no questions and no LLM call. A failed
        call is memoized like a successful one, until the schema changes
        or `refresh` is set.
        """
        tables = database.schema()
        if not tables:
            return QuestionInfo()

        fingerprint = schema_fingerprint(tables)
        cached = self._load()
        if not refresh and cached is not None and cached.schema == fingerprint:
            return cached

        schema_sql = "\n\n".join(t.sql for t in tables)
        try:
            response = self.chat.complete(
                system=questions_prompt(self.count),
                user=schema_sql,
                schema=QUESTIONS_SCHEMA,
            )
            questions = [str(q) for q in response["questions"]]
            info = QuestionInfo(questions=questions, error=None, schema=fingerprint)
            logger.info(f"{LLM} Generated {len(questions)} sample questions")
        except (DatachatError, KeyError, TypeError) as e:
            logger.warning(f"{LLM} Could not generate sample questions: {e}")
            info = QuestionInfo(questions=[], error=str(e), schema=fingerprint)

        self._store(info)
        return info

    def clear(self) -> None:
        """Drop the memoized value and its file."""
        self._info = None
        if self.path is not None and self.path.exists():
            self.path.unlink()

    def _load(self) -> QuestionInfo | None:
        if self._info is not None or self.path is None or not self.path.exists():
            return self._info
        try:
            self._info = QuestionInfo.from_dict(json.loads(self.path.read_text(encoding="utf-8")))
        except (json.JSONDecodeError, OSError, AttributeError):
            return None
        return self._info

    def _store(self, info: QuestionInfo) -> None:
        self._info = info
        if self.path is not None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(info.to_dict(), indent=2), encoding="utf-8")


__all__ = ["QuestionCache", "QuestionInfo", "QUESTIONS_SCHEMA", "questions_prompt"]
