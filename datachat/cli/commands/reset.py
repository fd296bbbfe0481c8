# datachat/cli/commands/reset.py
"""
Session reset.

Usage:
    datachat reset            # Delete the session database and question cache
    datachat reset --force    # Skip confirmation prompt
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.ui import ui
from datachat.logging.logger import get_logger
from datachat.logging.tags import CLI

logger = get_logger(__name__)


def command(
    force: bool = False,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Delete the session database and its sample-question cache."""
    ctx = CLIContext.load(db=db, config_path=config)

    if ctx.is_memory:
        ui.info("Session database is in memory; nothing to reset.")
        return

    targets = [Path(ctx.db_path)]
    if ctx.questions_path is not None:
        targets.append(ctx.questions_path)
    existing = [p for p in targets if p.exists()]

    if not existing:
        ui.info("Nothing to reset.")
        return

    if not force and not ui.prompt_confirm(f"Delete {', '.join(str(p) for p in existing)}?", default=False):
        ui.info("Cancelled.")
        raise typer.Exit(0)

    for path in existing:
        path.unlink()
        logger.debug(f"{CLI} Deleted {path}")
        ui.success(f"Deleted {path}")
