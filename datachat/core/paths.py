# datachat/core/paths.py
"""
Central path management for datachat.

All components that need a file location ask this module.

Layout (relative to the workspace root, default {CWD}/.datachat/):
    config.yaml        user configuration overrides
    session.db         session database used by the CLI
    questions.json     memoized sample questions for the session
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class DatachatPaths:
    """
    Workspace-relative paths.

    Usage:
        from datachat.core.paths import DatachatPaths

        db_path = DatachatPaths.session_db()

        # Override workspace for testing
        DatachatPaths.set_workspace("/tmp/test_datachat")
    """

    _workspace_override: Optional[Path] = None

    @classmethod
    def set_workspace(cls, path: Optional[str | Path]) -> None:
        """Override the workspace root. Pass None to reset to the default."""
        if path is None:
            cls._workspace_override = None
        else:
            cls._workspace_override = Path(path)

    @classmethod
    def reset(cls) -> None:
        """Reset to default workspace (CWD). Useful in tests."""
        cls._workspace_override = None

    @classmethod
    def workspace(cls) -> Path:
        """The .datachat workspace directory."""
        if cls._workspace_override is not None:
            return cls._workspace_override
        return Path.cwd() / ".datachat"

    @classmethod
    def config(cls) -> Path:
        """User config file: {workspace}/config.yaml"""
        return cls.workspace() / "config.yaml"

    @classmethod
    def session_db(cls) -> Path:
        """Session database file: {workspace}/session.db"""
        return cls.workspace() / "session.db"

    @classmethod
    def questions_cache(cls) -> Path:
        """Memoized sample questions: {workspace}/questions.json"""
        return cls.workspace() / "questions.json"


__all__ = ["DatachatPaths"]
