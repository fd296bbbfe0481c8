# datachat/chat/__init__.py
"""Question to SQL orchestration."""

from datachat.chat.engine import Answer, DataChat, NoTablesError
from datachat.chat.prompts import SQL_SYSTEM_PROMPT, build_sql_system_prompt
from datachat.chat.sql import extract_sql

__all__ = [
    "DataChat",
    "Answer",
    "NoTablesError",
    "SQL_SYSTEM_PROMPT",
    "build_sql_system_prompt",
    "extract_sql",
]
