# datachat/cli/commands/load.py
"""
Load command.

Usage:
    datachat load sales.csv                 # One file
    datachat load data/                     # Every supported file in a folder
    datachat load a.csv b.tsv chinook.db    # Several files, loaded in order
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.ui import ui
from datachat.ingest.detect import SUPPORTED_EXTENSIONS, is_supported
from datachat.ingest.models import UploadFailure
from datachat.ingest.uploader import Uploader
from datachat.logging.logger import get_logger

logger = get_logger(__name__)


def _expand(paths: list[Path]) -> tuple[list[Path], list[UploadFailure]]:
    """Expand directories into their supported files, in name order."""
    files: list[Path] = []
    missing: list[UploadFailure] = []

    for path in paths:
        if path.is_dir():
            files.extend(sorted(p for p in path.iterdir() if p.is_file() and is_supported(p.name)))
        elif path.exists():
            files.append(path)
        else:
            missing.append(UploadFailure(source=str(path), error=f"File not found: {path}"))

    return files, missing


def command(
    files: list[Path],
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Load CSV, TSV and SQLite files into the session database."""
    ctx = CLIContext.load(db=db, config_path=config)
    paths, failures = _expand(files)

    if not paths and not failures:
        ui.warning("No supported files found", detail=", ".join(sorted(SUPPORTED_EXTENSIONS)))
        raise typer.Exit(1)

    with ctx.open_database() as database:
        uploader = Uploader(database)
        reports, upload_failures = uploader.upload_many((p.name, p.read_bytes()) for p in paths)
        failures.extend(upload_failures)

    for report in reports:
        if report.tables:
            ui.success(f"{report.source}: {', '.join(report.tables)} ({report.rows} rows)")
        else:
            ui.warning(f"{report.source}: no tables found")

    for failure in failures:
        ui.error(f"{failure.source}: {failure.error}")

    if ctx.is_memory:
        ui.info("Session database is in memory; loaded tables are discarded on exit.")

    if failures:
        raise typer.Exit(1)
