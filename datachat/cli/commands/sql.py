# datachat/cli/commands/sql.py
"""
Raw SQL.

Usage:
    datachat sql "SELECT COUNT(*) FROM sales"
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.display import display_result
from datachat.cli.ui import ui
from datachat.db.session import QueryError


def command(
    statement: str,
    limit: Optional[int] = None,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Run one SQL statement against the session database."""
    ctx = CLIContext.load(db=db, config_path=config)

    with ctx.open_database() as database:
        try:
            result = database.execute(statement)
        except QueryError as e:
            ui.error(str(e))
            raise typer.Exit(1)

    display_result(result, limit or ctx.config.query.max_display_rows)
