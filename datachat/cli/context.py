# datachat/cli/context.py
"""
Central CLI context - config, session database and LLM wiring.

Commands never read config or build clients themselves; they ask the
context, which turns failures into a printed error and exit code 1.

Usage:
    from datachat.cli.context import CLIContext

    ctx = CLIContext.load(db=db, config_path=config)
    with ctx.open_database() as database:
        datachat = ctx.open_datachat(database)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, Optional

import typer

from datachat.chat.engine import DataChat
from datachat.config.loader import ConfigError, get_config_source, load_config
from datachat.config.schema import DatachatConfig
from datachat.core.paths import DatachatPaths
from datachat.db.session import MEMORY, SessionDatabase
from datachat.llm.client import ChatClient
from datachat.llm.credentials import CredentialError
from datachat.logging.logger import configure_logging, get_logger
from datachat.logging.tags import CLI

from datachat.cli.ui import ui

logger = get_logger(__name__)


@dataclass
class CLIContext:
    """Resolved configuration for one CLI invocation."""

    config: DatachatConfig
    db_path: str
    config_path: Optional[Path] = None
    config_source: str = field(default="")

    verbose: ClassVar[bool] = False

    @classmethod
    def load(cls, db: Optional[Path] = None, config_path: Optional[Path] = None) -> "CLIContext":
        """
        Load config, apply its log level and resolve the session database path.

        `--verbose` (set on the class by the CLI callback) forces DEBUG.

        Precedence for the database: --db, then `database.path` in config,
        then the workspace session.db.
        """
        try:
            config = load_config(config_path)
        except ConfigError as e:
            ui.error(str(e))
            raise typer.Exit(1)

        configure_logging("DEBUG" if cls.verbose else config.logging.level)

        if db is not None:
            db_path = str(db)
        elif config.database.path:
            db_path = config.database.path
        else:
            db_path = str(DatachatPaths.session_db())

        logger.debug(f"{CLI} Session database: {db_path}")
        return cls(
            config=config,
            db_path=db_path,
            config_path=config_path,
            config_source=get_config_source(config_path),
        )

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY

    @property
    def questions_path(self) -> Optional[Path]:
        """Question cache file, kept next to a file-backed session database."""
        if self.is_memory:
            return None
        db = Path(self.db_path)
        if db.resolve() == DatachatPaths.session_db().resolve():
            return DatachatPaths.questions_cache()
        return db.with_suffix(db.suffix + ".questions.json")

    def open_database(self) -> SessionDatabase:
        return SessionDatabase(self.db_path)

    def require_chat_client(self) -> ChatClient:
        """Build the LLM client or exit with an actionable message."""
        try:
            return ChatClient.from_config(self.config.llm)
        except CredentialError as e:
            ui.error(str(e))
            raise typer.Exit(1)

    def open_datachat(self, database: SessionDatabase) -> DataChat:
        return DataChat.from_config(
            self.config,
            database=database,
            chat=self.require_chat_client(),
            questions_path=self.questions_path,
        )


__all__ = ["CLIContext"]
