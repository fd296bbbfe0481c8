# datachat/api/app.py
"""
FastAPI application factory.

One app holds one session: a SessionDatabase plus a lazily built
DataChat. Run it with `datachat serve` or any ASGI server:

    uvicorn datachat.api.app:create_app --factory
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from fastapi import FastAPI, Request

from datachat.api.dependencies import get_database, get_version
from datachat.api.models.schemas import HealthResponse
from datachat.api.routes import query, tables
from datachat.config.loader import load_config
from datachat.config.schema import DatachatConfig
from datachat.db.session import MEMORY, SessionDatabase
from datachat.logging.logger import get_logger
from datachat.logging.tags import API

logger = get_logger(__name__)


def create_app(
    config: Optional[DatachatConfig] = None,
    database: Optional[SessionDatabase] = None,
    chat: Any = None,
    questions_path: Union[str, Path, None] = None,
) -> FastAPI:
    """
    Build the API.

    Args:
        config: Loaded configuration; defaults to load_config()
        database: Session database; defaults to `database.path` or in-memory
        chat: LLM client; built from config on first use when omitted
        questions_path: Optional file to persist sample questions
    """
    config = config or load_config()
    if database is None:
        database = SessionDatabase(config.database.path or MEMORY)

    app = FastAPI(title="datachat", version=get_version())
    app.state.config = config
    app.state.database = database
    app.state.chat = chat
    app.state.datachat = None
    app.state.questions_path = questions_path

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health(request: Request) -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=get_version(),
            tables=len(get_database(request).table_names()),
        )

    app.include_router(tables.router)
    app.include_router(query.router)

    logger.debug(f"{API} App created (database: {database.path})")
    return app


__all__ = ["create_app"]
