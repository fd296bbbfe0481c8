# datachat/llm/client.py
"""
Chat-completions client.

Sends a system + user message pair to an OpenAI-compatible
/chat/completions endpoint. When a JSON schema is supplied the request
asks for strict structured output and the reply is parsed as JSON.

Usage:
    from datachat.llm import ChatClient

    chat = ChatClient.from_config(config.llm)
    sql_markdown = chat.complete(system="...", user="How many rows?")
    data = chat.complete(system="...", user="...", schema={...})
"""

from __future__ import annotations

import json
from typing import Any, Optional

from datachat.config.schema import LLMConfig
from datachat.core.exceptions import DatachatError
from datachat.core.http import APIError, create_api_client, handle_api_error, raise_for_status
from datachat.llm.credentials import resolve_api_key
from datachat.logging.logger import get_logger
from datachat.logging.tags import LLM

logger = get_logger(__name__)

COMPLETIONS_PATH = "/chat/completions"
PROVIDER = "llm"


class LLMError(DatachatError):
    """Raised when the LLM call fails or returns something unusable."""

    pass


class ChatClient:
    """
    Minimal client for an OpenAI-compatible chat endpoint.

    Extra keyword arguments go to httpx.Client, e.g. `transport=` in tests.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        model: str = "gpt-4o-mini",
        temperature: float = 0.0,
        app_tag: str = "",
        timeout: Optional[float] = None,
        **client_kwargs: Any,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.temperature = temperature

        token = f"{api_key}:{app_tag}" if app_tag else api_key
        self._client = create_api_client(
            base_url=self.base_url,
            api_key=token,
            timeout=timeout,
            timeout_type="chat",
            **client_kwargs,
        )

    @classmethod
    def from_config(cls, config: LLMConfig, **client_kwargs: Any) -> "ChatClient":
        """Build a client from the `llm` config block, resolving the key."""
        return cls(
            base_url=config.base_url,
            api_key=resolve_api_key(config.api_key),
            model=config.model,
            temperature=config.temperature,
            app_tag=config.app_tag,
            timeout=config.timeout,
            **client_kwargs,
        )

    def build_payload(
        self,
        system: str,
        user: str,
        schema: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system},
                {"role": "user", "content": user},
            ],
            "temperature": self.temperature,
        }
        if schema is not None:
            payload["response_format"] = {
                "type": "json_schema",
                "json_schema": {"name": "response", "strict": True, "schema": schema},
            }
        return payload

    def complete(
        self,
        system: str,
        user: str,
        schema: Optional[dict[str, Any]] = None,
    ) -> Any:
        """
        Run one completion.

        Args:
            system: System prompt
            user: User message
            schema: Optional JSON schema for structured output

        Returns:
            The message content as a string, or the parsed JSON object when
            `schema` is given.

        Raises:
            LLMError: On transport errors, API errors, or unusable replies
        """
        payload = self.build_payload(system, user, schema)
        logger.debug(f"{LLM} POST {self.base_url}{COMPLETIONS_PATH} model={self.model}")

        data = self._post(payload)

        if isinstance(data, dict) and data.get("error"):
            error = data["error"]
            message = error.get("message", error) if isinstance(error, dict) else error
            raise LLMError(f"LLM returned an error: {message}")

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise LLMError(f"Unexpected LLM response shape: {data!r}"[:500]) from e

        if content is None:
            raise LLMError("LLM returned an empty message")

        if schema is None:
            return content

        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise LLMError(f"LLM returned invalid JSON: {e}") from e

    def _post(self, payload: dict[str, Any]) -> Any:
        try:
            response = self._client.post(COMPLETIONS_PATH, json=payload)
            raise_for_status(response, provider=PROVIDER, endpoint=COMPLETIONS_PATH)
            return response.json()
        except APIError as exc:
            raise LLMError(str(exc)) from exc
        except ValueError as exc:
            raise LLMError(f"LLM returned a non-JSON body: {exc}") from exc
        except Exception as exc:
            error = handle_api_error(exc, provider=PROVIDER, endpoint=COMPLETIONS_PATH)
            raise LLMError(str(error)) from exc

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ChatClient":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()


__all__ = ["ChatClient", "LLMError", "COMPLETIONS_PATH"]
