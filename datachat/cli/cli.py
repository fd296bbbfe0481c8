# datachat/cli/cli.py
"""
datachat CLI - Main application.

Commands:
    datachat load        Load CSV/TSV/SQLite files into the session database
    datachat tables      Show tables and columns
    datachat questions   Suggest questions for the loaded data
    datachat ask         Ask one question
    datachat sql         Run raw SQL
    datachat chat        Interactive question loop
    datachat config      View configuration
    datachat reset       Delete the session database
    datachat serve       Start the HTTP API

NOTE: Commands use lazy loading - imports only happen when a command is invoked.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from datachat.logging.logger import configure_logging

app = typer.Typer(
    name="datachat",
    help="Chat with your data. Start with: datachat load data.csv",
    no_args_is_help=True,
    add_completion=False,
)

DB_HELP = "Session database file (':memory:' for a throwaway session)."
CONFIG_HELP = "Config file overriding the package defaults."


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging."),
) -> None:
    """Chat with your data."""
    configure_logging("DEBUG" if verbose else "WARNING")

    from datachat.cli.context import CLIContext

    CLIContext.verbose = verbose


# =============================================================================
# LAZY COMMANDS
# =============================================================================


@app.command("load")
def load(
    files: List[Path] = typer.Argument(..., help="Files or folders to load."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Load CSV, TSV and SQLite files."""
    from datachat.cli.commands import load as mod

    mod.command(files=files, db=db, config=config)


@app.command("tables")
def tables(
    drop: Optional[str] = typer.Option(None, "--drop", help="Drop this table instead of listing."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Show tables and their columns."""
    from datachat.cli.commands import tables as mod

    mod.command(drop=drop, db=db, config=config)


@app.command("questions")
def questions(
    refresh: bool = typer.Option(False, "--refresh", "-r", help="Ask the LLM again."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Suggest questions for the loaded data."""
    from datachat.cli.commands import questions as mod

    mod.command(refresh=refresh, db=db, config=config)


@app.command("ask")
def ask(
    question: str = typer.Argument(..., help="Question about your data."),
    sql_only: bool = typer.Option(False, "--sql-only", help="Show the SQL without running it."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Ask a question and show the result table."""
    from datachat.cli.commands import ask as mod

    mod.command(question=question, sql_only=sql_only, db=db, config=config)


@app.command("sql")
def sql(
    statement: str = typer.Argument(..., help="SQL statement to run."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", help="Rows to show."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Run raw SQL against the session database."""
    from datachat.cli.commands import sql as mod

    mod.command(statement=statement, limit=limit, db=db, config=config)


@app.command("chat")
def chat(
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Interactive question loop."""
    from datachat.cli.commands import chat as mod

    mod.command(db=db, config=config)


@app.command("config")
def config_cmd(
    show_path: bool = typer.Option(False, "--path", "-p", help="Show config file path."),
    as_json: bool = typer.Option(False, "--json", help="Output as JSON."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """View configuration."""
    from datachat.cli.commands import config as mod

    mod.command(show_path=show_path, as_json=as_json, config=config, db=db)


@app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Delete the session database and question cache."""
    from datachat.cli.commands import reset as mod

    mod.command(force=force, db=db, config=config)


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", "--host", "-h", help="Host to bind to."),
    port: int = typer.Option(8000, "--port", "-p", help="Port to bind to."),
    db: Optional[Path] = typer.Option(None, "--db", help=DB_HELP),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
) -> None:
    """Start the HTTP API."""
    from datachat.cli.commands import serve as mod

    mod.command(host=host, port=port, db=db, config=config)


if __name__ == "__main__":
    app()
