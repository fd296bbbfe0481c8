# datachat/db/__init__.py
"""Session database, schema models and the sample-question cache."""

from datachat.db.models import ColumnInfo, QueryResult, TableInfo, schema_fingerprint
from datachat.db.questions import QuestionCache, QuestionInfo
from datachat.db.session import MEMORY, QueryError, SessionDatabase

__all__ = [
    "SessionDatabase",
    "QueryError",
    "MEMORY",
    "ColumnInfo",
    "TableInfo",
    "QueryResult",
    "schema_fingerprint",
    "QuestionCache",
    "QuestionInfo",
]
