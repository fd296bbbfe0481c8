# datachat/api/dependencies.py
"""Shared session objects for API routes, kept on app.state."""

from __future__ import annotations

from fastapi import Request

from datachat.chat.engine import DataChat
from datachat.db.session import SessionDatabase
from datachat.llm.client import ChatClient


def get_database(request: Request) -> SessionDatabase:
    return request.app.state.database


def get_datachat(request: Request) -> DataChat:
    """
    The app's DataChat, built on first use.

    Upload and schema routes work without LLM credentials; only routes
    that call this need them.
    """
    state = request.app.state
    if state.datachat is None:
        if state.chat is None:
            state.chat = ChatClient.from_config(state.config.llm)
        state.datachat = DataChat.from_config(
            state.config,
            database=state.database,
            chat=state.chat,
            questions_path=state.questions_path,
        )
    return state.datachat


def get_version() -> str:
    from datachat import __version__

    return __version__


__all__ = ["get_database", "get_datachat", "get_version"]
