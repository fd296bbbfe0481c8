# datachat/api/models/schemas.py
"""Pydantic models for API requests and responses."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status")
    version: str = Field(..., description="datachat version")
    tables: int = Field(..., description="Number of tables in the session database")


class ColumnSchema(BaseModel):
    """One column from PRAGMA table_info."""

    cid: int
    name: str
    type: str
    notnull: bool
    default: Optional[str] = Field(None, description="Default value expression")
    pk: int = Field(0, description="Position in the primary key, 0 if not part of it")


class TableSchema(BaseModel):
    """A table with its CREATE statement."""

    name: str
    sql: str
    columns: List[ColumnSchema] = Field(default_factory=list)


class TablesResponse(BaseModel):
    tables: List[TableSchema] = Field(default_factory=list)


class UploadReport(BaseModel):
    """One successfully loaded file."""

    source: str = Field(..., description="Uploaded file name")
    kind: str = Field(..., description="sqlite, csv or tsv")
    tables: List[str] = Field(default_factory=list, description="Tables created")
    rows: int = Field(0, description="Rows inserted")


class UploadError(BaseModel):
    """One file that failed to load."""

    source: str
    error: str


class UploadResponse(BaseModel):
    reports: List[UploadReport] = Field(default_factory=list)
    errors: List[UploadError] = Field(default_factory=list)


class QuestionsResponse(BaseModel):
    questions: List[str] = Field(default_factory=list)
    error: Optional[str] = Field(None, description="Why questions could not be generated")


class QueryRequest(BaseModel):
    """A natural-language question."""

    question: str = Field(..., description="The question to ask", min_length=1)


class SQLRequest(BaseModel):
    """A raw SQL statement."""

    sql: str = Field(..., description="One SQL statement", min_length=1)


class ResultResponse(BaseModel):
    """Rows from a statement, truncated for display."""

    columns: List[str] = Field(default_factory=list)
    rows: List[Dict[str, Any]] = Field(default_factory=list)
    row_count: int = Field(0, description="Total rows returned by the statement")
    truncated: bool = Field(False, description="Whether rows holds fewer than row_count")


class QueryResponse(ResultResponse):
    """Answer to a question."""

    question: str
    markdown: str = Field(..., description="The LLM reply")
    sql: str = Field(..., description="SQL extracted from the reply")
