# datachat/llm/__init__.py
"""
LLM access for datachat.

A single OpenAI-compatible chat-completions client plus credential
resolution. Anything with a `complete(system, user, schema=None)` method can
stand in for ChatClient (the chat layer is duck-typed).
"""

from datachat.llm.client import ChatClient, LLMError
from datachat.llm.credentials import CredentialError, resolve_api_key

__all__ = ["ChatClient", "LLMError", "CredentialError", "resolve_api_key"]
