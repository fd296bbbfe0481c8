# datachat/cli/commands/tables.py
"""
Table listing.

Usage:
    datachat tables                # Show every table with its columns
    datachat tables --drop sales   # Remove a table
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.display import display_schema
from datachat.cli.ui import ui
from datachat.logging.logger import get_logger

logger = get_logger(__name__)


def command(
    drop: Optional[str] = None,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Show the schema of the session database."""
    ctx = CLIContext.load(db=db, config_path=config)

    with ctx.open_database() as database:
        if drop is not None:
            try:
                database.drop_table(drop)
            except KeyError as e:
                ui.error(str(e).strip("'\""))
                raise typer.Exit(1)
            ui.success(f"Dropped table {drop}")
            return

        tables = database.schema()

    if not tables:
        ui.info("No tables loaded. Use 'datachat load <file>' to add data.")
        return

    ui.header("Tables", f"{len(tables)} table(s) in {ctx.db_path}")
    display_schema(tables)
