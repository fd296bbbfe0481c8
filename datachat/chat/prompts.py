# datachat/chat/prompts.py
"""System prompt for turning questions into SQLite SQL."""

from __future__ import annotations

from typing import Optional

SQL_SYSTEM_PROMPT = """You'll answer the user's question based on this SQLite schema:

{schema}

1. Guess my objective in asking this.
2. Describe the steps to achieve this objective in SQL.
3. Write SQL to answer the question. Use SQLite syntax.

Replace generic filter values (e.g. "a location", "specific region", etc.) by querying a random value from data.
Wrap columns with spaces inside [].
{context}"""

CONTEXT_HEADER = "Notes about the tables and columns:"


def format_context(context: str) -> str:
    context = context.strip()
    if not context:
        return ""
    return f"\n{CONTEXT_HEADER}\n{context}\n"


def build_sql_system_prompt(
    schema_sql: str,
    context: str = "",
    template: Optional[str] = None,
) -> str:
    """
    Fill the SQL system prompt.

    Args:
        schema_sql: CREATE statements of the session tables
        context: Free-text notes about the tables, appended when non-empty
        template: Replacement prompt; `{schema}` and `{context}` are
                  substituted, other braces are left alone

    Returns:
        The system prompt text
    """
    text = template if template is not None else SQL_SYSTEM_PROMPT
    return text.replace("{schema}", schema_sql).replace("{context}", format_context(context)).rstrip() + "\n"


__all__ = ["SQL_SYSTEM_PROMPT", "build_sql_system_prompt", "format_context"]
