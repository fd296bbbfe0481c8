# datachat/api/error_handlers.py
"""
API error handling utilities.

Provides a decorator to standardize exception handling across all API routes.
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, TypeVar

from fastapi import HTTPException

from datachat.chat.engine import NoTablesError
from datachat.db.session import QueryError
from datachat.ingest.exceptions import IngestError
from datachat.llm.client import LLMError
from datachat.llm.credentials import CredentialError
from datachat.logging.logger import get_logger
from datachat.logging.tags import API

logger = get_logger(__name__)

T = TypeVar("T")


def handle_api_errors(fn: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for standardized API error handling.

    Maps exceptions to HTTP status codes:
    - ValueError, IngestError, QueryError, NoTablesError -> 400 Bad Request
    - KeyError, FileNotFoundError -> 404 Not Found
    - LLMError -> 502 Bad Gateway
    - CredentialError -> 503 Service Unavailable
    - HTTPException -> Re-raised as-is
    - Exception -> 500 Internal Server Error

    Usage:
        @router.get("/tables")
        @handle_api_errors
        async def tables(request: Request):
            ...
    """

    @wraps(fn)
    async def wrapper(*args, **kwargs):
        try:
            return await fn(*args, **kwargs)
        except HTTPException:
            raise
        except (ValueError, IngestError, QueryError, NoTablesError) as e:
            raise HTTPException(status_code=400, detail=str(e))
        except KeyError as e:
            detail = str(e).strip("'\"") if str(e) else "Resource not found"
            raise HTTPException(status_code=404, detail=detail)
        except FileNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except LLMError as e:
            logger.warning(f"{API} LLM call failed in {fn.__name__}: {e}")
            raise HTTPException(status_code=502, detail=str(e))
        except CredentialError as e:
            raise HTTPException(status_code=503, detail=str(e))
        except Exception as e:
            logger.exception(f"{API} Unexpected error in {fn.__name__}: {e}")
            raise HTTPException(status_code=500, detail=str(e))

    return wrapper


__all__ = ["handle_api_errors"]
