# datachat/cli/commands/chat.py
"""
Interactive question loop.

Usage:
    datachat chat      # Ask questions until 'exit' or Ctrl-D
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.chat.engine import NoTablesError
from datachat.cli.commands.ask import answer_question
from datachat.cli.context import CLIContext
from datachat.cli.display import display_questions
from datachat.cli.ui import ui
from datachat.logging.logger import get_logger

logger = get_logger(__name__)

EXIT_WORDS = {"exit", "quit", "q"}


def command(
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Ask questions about the loaded data, one after another."""
    ctx = CLIContext.load(db=db, config_path=config)

    with ctx.open_database() as database:
        if not database.table_names():
            ui.error(str(NoTablesError()))
            raise typer.Exit(1)

        datachat = ctx.open_datachat(database)
        ui.header("datachat", "Ask a question about your data. Type 'exit' to quit.")

        info = datachat.sample_questions()
        if info.questions:
            display_questions(info.questions)
        elif info.error:
            ui.warning("Could not generate sample questions", detail=info.error)

        while True:
            try:
                text = ui.prompt_text("\n[bold]Question[/bold]").strip()
            except (EOFError, KeyboardInterrupt):
                break

            if not text:
                continue
            if text.lower() in EXIT_WORDS:
                break
            if text.isdigit() and 1 <= int(text) <= len(info.questions):
                text = info.questions[int(text) - 1]
                ui.info(text)

            answer_question(datachat, text)

    ui.info("Bye.")
