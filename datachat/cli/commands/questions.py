# datachat/cli/commands/questions.py
"""
Sample questions.

Usage:
    datachat questions             # Suggested questions for the loaded data
    datachat questions --refresh   # Ask the LLM again
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.display import display_questions
from datachat.cli.ui import ui
from datachat.logging.logger import get_logger

logger = get_logger(__name__)


def command(
    refresh: bool = False,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Suggest questions that the loaded data can answer."""
    ctx = CLIContext.load(db=db, config_path=config)

    with ctx.open_database() as database:
        if not database.table_names():
            ui.info("No tables loaded. Use 'datachat load <file>' to add data.")
            return

        datachat = ctx.open_datachat(database)
        info = datachat.sample_questions(refresh=refresh)

    if info.error:
        ui.error(f"Could not generate questions: {info.error}")
        raise typer.Exit(1)

    display_questions(info.questions)
