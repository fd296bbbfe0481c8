# datachat/cli/commands/config.py
"""
Configuration command.

Usage:
    datachat config            # Show effective config
    datachat config --json     # Output as JSON
    datachat config --path     # Show config file path
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

from datachat.cli.context import CLIContext
from datachat.cli.ui import ui
from datachat.logging.logger import get_logger

logger = get_logger(__name__)

MASK = "****"


def _masked(config: dict[str, Any]) -> dict[str, Any]:
    """Copy of the config dict with the API key hidden."""
    llm = dict(config.get("llm", {}))
    if llm.get("api_key"):
        llm["api_key"] = MASK
    return {**config, "llm": llm}


def _show_config_summary(config: dict[str, Any], db_path: str) -> None:
    llm = config["llm"]
    rows = [
        ["LLM", llm["model"], llm["base_url"]],
        ["API key", "set in config" if llm.get("api_key") else "from environment", ""],
        ["Database", db_path, ""],
        ["Questions", str(config["questions"]["count"]), "suggested per schema"],
        ["Display", str(config["query"]["max_display_rows"]), "rows per result"],
        ["Prompt", "custom" if config["prompt"]["template"] else "built-in", ""],
        ["Logging", config["logging"]["level"], ""],
    ]
    ui.table(["Component", "Value", "Details"], rows)


def command(
    show_path: bool = False,
    as_json: bool = False,
    config: Optional[Path] = None,
    db: Optional[Path] = None,
) -> None:
    """Show the effective configuration."""
    ctx = CLIContext.load(db=db, config_path=config)

    if show_path:
        typer.echo(ctx.config_source)
        return

    data = _masked(ctx.config.model_dump())

    if as_json:
        typer.echo(json.dumps(data, indent=2))
        return

    ui.header("Configuration", ctx.config_source)
    _show_config_summary(data, ctx.db_path)
