# datachat/api/routes/tables.py
"""Schema and upload endpoints."""

from typing import List

from fastapi import APIRouter, File, Request, UploadFile

from datachat.api.dependencies import get_database
from datachat.api.error_handlers import handle_api_errors
from datachat.api.models.schemas import (
    ColumnSchema,
    TableSchema,
    TablesResponse,
    UploadError,
    UploadReport,
    UploadResponse,
)
from datachat.ingest.uploader import Uploader
from datachat.logging.logger import get_logger
from datachat.logging.tags import API

logger = get_logger(__name__)

router = APIRouter(tags=["tables"])


@router.get("/tables", response_model=TablesResponse)
@handle_api_errors
async def list_tables(request: Request) -> TablesResponse:
    """Every table in the session database, with columns."""
    database = get_database(request)
    return TablesResponse(
        tables=[
            TableSchema(
                name=t.name,
                sql=t.sql,
                columns=[
                    ColumnSchema(
                        cid=c.cid,
                        name=c.name,
                        type=c.type,
                        notnull=bool(c.notnull),
                        default=c.dflt_value,
                        pk=c.pk,
                    )
                    for c in t.columns
                ],
            )
            for t in database.schema()
        ]
    )


@router.delete("/tables/{name}", status_code=204)
@handle_api_errors
async def drop_table(name: str, request: Request) -> None:
    """Remove a table from the session."""
    get_database(request).drop_table(name)


@router.post("/upload", response_model=UploadResponse)
@handle_api_errors
async def upload(request: Request, files: List[UploadFile] = File(...)) -> UploadResponse:
    """
    Load CSV, TSV and SQLite files.

    Files load in order. A failing file is reported in `errors` and the
    others still load.
    """
    payload = [(f.filename or "", await f.read()) for f in files]
    logger.info(f"{API} Upload of {len(payload)} file(s)")

    reports, failures = Uploader(get_database(request)).upload_many(payload)

    return UploadResponse(
        reports=[UploadReport(**r.to_dict()) for r in reports],
        errors=[UploadError(**f.to_dict()) for f in failures],
    )
