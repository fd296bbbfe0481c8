# datachat/cli/commands/serve.py
"""
API server.

Usage:
    datachat serve                      # http://127.0.0.1:8000
    datachat serve --host 0.0.0.0 -p 9000
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from datachat.cli.context import CLIContext
from datachat.cli.ui import ui


def command(
    host: str = "127.0.0.1",
    port: int = 8000,
    db: Optional[Path] = None,
    config: Optional[Path] = None,
) -> None:
    """Start the HTTP API with uvicorn."""
    import uvicorn

    from datachat.api.app import create_app

    ctx = CLIContext.load(db=db, config_path=config)

    app = create_app(
        config=ctx.config,
        database=ctx.open_database(),
        questions_path=ctx.questions_path,
    )

    ui.header("datachat API", f"http://{host}:{port}  (database: {ctx.db_path})")
    uvicorn.run(app, host=host, port=port)
