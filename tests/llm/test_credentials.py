# tests/llm/test_credentials.py
"""Tests for API key resolution."""

import pytest

from datachat.llm.credentials import CredentialError, resolve_api_key


class TestResolveAPIKey:
    """Resolution order: config, then environment variables."""

    def test_config_key_wins(self, monkeypatch):
        monkeypatch.setenv("DATACHAT_LLM_API_KEY", "env")
        assert resolve_api_key("from-config") == "from-config"

    def test_env_order(self, no_api_keys, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "openai")
        assert resolve_api_key() == "openai"

        monkeypatch.setenv("LLMFOUNDRY_TOKEN", "foundry")
        assert resolve_api_key() == "foundry"

        monkeypatch.setenv("DATACHAT_LLM_API_KEY", "datachat")
        assert resolve_api_key() == "datachat"

    def test_empty_config_key_falls_through(self, no_api_keys, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "openai")
        assert resolve_api_key("") == "openai"

    def test_missing_key(self, no_api_keys):
        with pytest.raises(CredentialError, match="DATACHAT_LLM_API_KEY"):
            resolve_api_key()
