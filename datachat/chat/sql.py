# datachat/chat/sql.py
"""Pull the SQL statement out of an LLM reply."""

from __future__ import annotations

import re

_FENCE_RE = re.compile(r"```.*?\n(.*?)```", re.DOTALL)


def extract_sql(markdown: str) -> str:
    """
    Return the body of the first fenced code block.

    A reply without a fence is taken as SQL as-is.

    Examples:
        >>> extract_sql("Steps...\\n```sql\\nSELECT 1\\n```")
        'SELECT 1\\n'
        >>> extract_sql("SELECT 2")
        'SELECT 2'
    """
    match = _FENCE_RE.search(markdown)
    if match:
        return match.group(1)
    return markdown


__all__ = ["extract_sql"]
