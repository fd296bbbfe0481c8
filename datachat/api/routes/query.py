# datachat/api/routes/query.py
"""Question, sample-question and raw SQL endpoints."""

from typing import Any

from fastapi import APIRouter, Request

from datachat.api.dependencies import get_database, get_datachat
from datachat.api.error_handlers import handle_api_errors
from datachat.api.models.schemas import (
    QueryRequest,
    QueryResponse,
    QuestionsResponse,
    ResultResponse,
    SQLRequest,
)
from datachat.db.models import QueryResult

router = APIRouter(tags=["query"])


def _jsonable(value: Any) -> Any:
    if isinstance(value, bytes):
        return value.hex()
    return value


def _result_fields(result: QueryResult, limit: int) -> dict[str, Any]:
    rows = [{k: _jsonable(v) for k, v in row.items()} for row in result.head(limit)]
    return {
        "columns": result.columns,
        "rows": rows,
        "row_count": result.row_count,
        "truncated": result.row_count > limit,
    }


@router.get("/questions", response_model=QuestionsResponse)
@handle_api_errors
async def questions(request: Request, refresh: bool = False) -> QuestionsResponse:
    """Suggested questions for the current schema."""
    if not get_database(request).table_names():
        return QuestionsResponse()

    info = get_datachat(request).sample_questions(refresh=refresh)
    return QuestionsResponse(questions=info.questions, error=info.error)


@router.post("/query", response_model=QueryResponse)
@handle_api_errors
async def query(body: QueryRequest, request: Request) -> QueryResponse:
    """Turn a question into SQL, run it and return the rows."""
    datachat = get_datachat(request)
    answer = datachat.ask(body.question)

    return QueryResponse(
        question=answer.question,
        markdown=answer.markdown,
        sql=answer.sql,
        **_result_fields(answer.result, answer.max_display_rows),
    )


@router.post("/sql", response_model=ResultResponse)
@handle_api_errors
async def run_sql(body: SQLRequest, request: Request) -> ResultResponse:
    """Run one raw SQL statement."""
    result = get_database(request).execute(body.sql)
    limit = request.app.state.config.query.max_display_rows
    return ResultResponse(**_result_fields(result, limit))
