# datachat/core/http.py
"""
httpx client factory and error conversion for the LLM endpoint.

Usage:
    from datachat.core.http import create_api_client, raise_for_status

    client = create_api_client(base_url, api_key=key, timeout_type="chat")
    response = client.post("/chat/completions", json=payload)
    raise_for_status(response, provider="llm", endpoint="/chat/completions")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

import httpx

from datachat.core.exceptions import DatachatError
from datachat.logging.logger import get_logger

logger = get_logger(__name__)

TIMEOUTS = {
    "default": 30.0,
    "chat": 120.0,
}

_STATUS_MESSAGES = {
    401: "authentication failed",
    403: "access denied",
    404: "endpoint or model not found",
    429: "rate limit exceeded",
}


@dataclass
class APIError(DatachatError):
    """An HTTP call that failed, with whatever the server said about it."""

    message: str
    status_code: Optional[int] = None
    endpoint: str = ""
    details: Optional[str] = None

    def __str__(self) -> str:
        text = self.message
        if self.status_code:
            text += f" (HTTP {self.status_code})"
        if self.details:
            text += f" - {self.details}"
        return text


def create_api_client(
    base_url: str,
    api_key: Optional[str] = None,
    timeout: Optional[float] = None,
    timeout_type: str = "default",
    **kwargs: Any,
) -> httpx.Client:
    """
    Build an httpx.Client that sends JSON with a bearer token.

    `timeout` wins over the `timeout_type` preset. Extra keyword arguments
    go to httpx.Client (e.g. `transport=`).
    """
    if timeout is None:
        timeout = TIMEOUTS.get(timeout_type, TIMEOUTS["default"])

    headers = {"Content-Type": "application/json", "Accept": "application/json"}
    if api_key:
        headers["Authorization"] = f"Bearer {api_key}"

    logger.debug(f"Created HTTP client for {base_url} (timeout={timeout}s)")
    return httpx.Client(base_url=base_url, headers=headers, timeout=timeout, **kwargs)


def _body_message(response: httpx.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or None

    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict):
            return error.get("message") or str(error)
        return body.get("message") or (str(error) if error else None)
    return str(body)[:200]


def handle_api_error(exc: Exception, provider: str = "api", endpoint: str = "") -> APIError:
    """Turn an httpx exception into an APIError."""
    if isinstance(exc, httpx.HTTPStatusError):
        status = exc.response.status_code
        reason = _STATUS_MESSAGES.get(status, "request failed")
        return APIError(
            f"{provider} {reason}",
            status_code=status,
            endpoint=endpoint,
            details=_body_message(exc.response),
        )
    if isinstance(exc, httpx.ConnectError):
        return APIError(f"Failed to connect to {provider}", endpoint=endpoint, details=str(exc))
    if isinstance(exc, httpx.TimeoutException):
        return APIError(
            f"{provider} request timed out", endpoint=endpoint, details="raise llm.timeout"
        )
    return APIError(f"{provider} request failed: {exc}", endpoint=endpoint)


def raise_for_status(response: httpx.Response, provider: str = "api", endpoint: str = "") -> None:
    """Raise APIError for a 4xx/5xx response."""
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise handle_api_error(exc, provider=provider, endpoint=endpoint) from exc


__all__ = ["APIError", "TIMEOUTS", "create_api_client", "handle_api_error", "raise_for_status"]
