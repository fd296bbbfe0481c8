# datachat/cli/commands/ask.py
"""
Ask a question about the loaded data.

Usage:
    datachat ask "Which region sold the most?"
    datachat ask "Top 5 customers" --sql-only
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.chat.engine import DataChat, NoTablesError
from datachat.cli.context import CLIContext
from datachat.cli.display import display_result
from datachat.cli.ui import ui
from datachat.db.session import QueryError
from datachat.llm.client import LLMError
from datachat.logging.logger import get_logger

logger = get_logger(__name__)


def answer_question(datachat: DataChat, question: str, sql_only: bool = False) -> bool:
    """
    Draft, show and run SQL for one question.

    Returns:
        True if the question was answered, False if it failed
    """
    try:
        markdown, sql = datachat.draft(question)
    except (ValueError, NoTablesError, LLMError) as e:
        ui.error(str(e))
        return False

    ui.markdown(markdown)
    if sql_only:
        return True

    try:
        answer = datachat.run(question, markdown, sql)
    except QueryError as e:
        ui.error(f"SQL failed: {e}")
        return False

    display_result(answer.result, answer.max_display_rows)
    return True


def command(
    question: str,
    sql_only: bool = False,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Turn a question into SQL, run it and show the result."""
    ctx = CLIContext.load(db=db, config_path=config)

    with ctx.open_database() as database:
        if not database.table_names():
            ui.error(str(NoTablesError()))
            raise typer.Exit(1)

        datachat = ctx.open_datachat(database)
        ok = answer_question(datachat, question, sql_only=sql_only)

    if not ok:
        raise typer.Exit(1)
