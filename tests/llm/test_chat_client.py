# tests/llm/test_chat_client.py
"""Tests for ChatClient against a mocked HTTP transport."""

import json

import httpx
import pytest

from datachat.config.schema import LLMConfig
from datachat.llm.client import ChatClient, LLMError


def _client(handler, **kwargs) -> ChatClient:
    params = {"model": "gpt-4o-mini", "app_tag": "datachat"}
    params.update(kwargs)
    return ChatClient(
        "https://llm.example.com/v1/",
        "secret",
        transport=httpx.MockTransport(handler),
        **params,
    )


def _reply(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestRequest:
    """What gets sent."""

    def test_posts_to_chat_completions(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_reply("```sql\nSELECT 1\n```"))

        with _client(handler) as chat:
            content = chat.complete(system="sys", user="How many?")

        assert content == "```sql\nSELECT 1\n```"
        assert seen["url"] == "https://llm.example.com/v1/chat/completions"
        assert seen["auth"] == "Bearer secret:datachat"
        assert seen["body"] == {
            "model": "gpt-4o-mini",
            "messages": [
                {"role": "system", "content": "sys"},
                {"role": "user", "content": "How many?"},
            ],
            "temperature": 0.0,
        }

    def test_no_app_tag(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            return httpx.Response(200, json=_reply("ok"))

        _client(handler, app_tag="").complete("s", "u")
        assert seen["auth"] == "Bearer secret"

    def test_schema_requests_structured_output(self):
        schema = {"type": "object", "properties": {"questions": {"type": "array"}}}
        seen = {}

        def handler(request):
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_reply('{"questions": ["a", "b"]}'))

        result = _client(handler).complete("s", "u", schema=schema)

        assert result == {"questions": ["a", "b"]}
        assert seen["body"]["response_format"] == {
            "type": "json_schema",
            "json_schema": {"name": "response", "strict": True, "schema": schema},
        }

    def test_from_config_resolves_key(self, monkeypatch):
        monkeypatch.setenv("DATACHAT_LLM_API_KEY", "env-key")
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json=_reply("ok"))

        config = LLMConfig(base_url="https://llm.example.com/v1", model="m", temperature=0.5)
        chat = ChatClient.from_config(config, transport=httpx.MockTransport(handler))
        chat.complete("s", "u")

        assert seen["auth"] == "Bearer env-key:datachat"
        assert seen["body"]["model"] == "m"
        assert seen["body"]["temperature"] == 0.5


class TestErrors:
    """Everything that goes wrong surfaces as LLMError."""

    def test_http_error(self):
        def handler(request):
            return httpx.Response(401, json={"error": {"message": "bad key"}})

        with pytest.raises(LLMError, match="bad key"):
            _client(handler).complete("s", "u")

    def test_error_in_body(self):
        def handler(request):
            return httpx.Response(200, json={"error": {"message": "quota exceeded"}})

        with pytest.raises(LLMError, match="quota exceeded"):
            _client(handler).complete("s", "u")

    def test_missing_choices(self):
        def handler(request):
            return httpx.Response(200, json={"choices": []})

        with pytest.raises(LLMError, match="Unexpected LLM response"):
            _client(handler).complete("s", "u")

    def test_null_content(self):
        def handler(request):
            return httpx.Response(200, json=_reply(None))

        with pytest.raises(LLMError, match="empty"):
            _client(handler).complete("s", "u")

    def test_invalid_json_content_with_schema(self):
        def handler(request):
            return httpx.Response(200, json=_reply("not json"))

        with pytest.raises(LLMError, match="invalid JSON"):
            _client(handler).complete("s", "u", schema={"type": "object"})

    def test_non_json_body(self):
        def handler(request):
            return httpx.Response(200, text="<html>gateway</html>")

        with pytest.raises(LLMError, match="non-JSON"):
            _client(handler).complete("s", "u")

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(LLMError, match="Failed to connect"):
            _client(handler).complete("s", "u")
