# datachat/config/loader.py
"""
Layered configuration loading.

Merge strategy:
    1. Package defaults (datachat/config/default.yaml) - always loaded
    2. User config (.datachat/config.yaml or an explicit path) - overrides defaults

The merged dict is validated into DatachatConfig, so callers never need
fallback logic.

Usage:
    from datachat.config import load_config

    config = load_config()
    config.llm.model  # always exists
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from datachat.config.schema import DatachatConfig
from datachat.core.exceptions import DatachatError
from datachat.core.paths import DatachatPaths
from datachat.logging.logger import get_logger
from datachat.logging.tags import CONFIG

logger = get_logger(__name__)

DEFAULTS_PATH = Path(__file__).parent / "default.yaml"


# =============================================================================
# Errors
# =============================================================================


class ConfigError(DatachatError):
    """Base error for configuration issues."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        if path:
            message = f"{message} (file: {path})"
        super().__init__(message)


class ConfigNotFoundError(ConfigError):
    """Raised when a config file doesn't exist."""

    pass


class ConfigParseError(ConfigError):
    """Raised when YAML parsing fails."""

    pass


class ConfigValidationError(ConfigError):
    """Raised when config doesn't match the schema."""

    pass


# =============================================================================
# Helpers
# =============================================================================


def deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from `override` take precedence. Nested dicts are merged
    recursively; lists are replaced entirely.

    Examples:
        >>> deep_merge({"a": 1, "b": {"c": 2, "d": 3}}, {"b": {"c": 10}})
        {'a': 1, 'b': {'c': 10, 'd': 3}}
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def load_yaml(path: Union[str, Path]) -> dict[str, Any]:
    """
    Load a YAML file as a mapping.

    Raises:
        ConfigNotFoundError: If file doesn't exist
        ConfigParseError: If YAML is invalid or not a mapping
    """
    p = Path(path)

    if not p.exists():
        raise ConfigNotFoundError("Config file not found", path=p)

    if p.is_dir():
        raise ConfigError("Config path is a directory, not a file", path=p)

    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigParseError(f"Invalid YAML syntax: {e}", path=p) from e

    if not isinstance(data, dict):
        raise ConfigParseError("Config root must be a mapping (dict)", path=p)

    return data


# =============================================================================
# Loading Functions
# =============================================================================


def load_defaults() -> dict[str, Any]:
    """Load package defaults."""
    return load_yaml(DEFAULTS_PATH)


def load_user_config(path: Optional[Union[str, Path]] = None) -> dict[str, Any] | None:
    """
    Load user overrides.

    An explicit path must exist. The workspace config is optional.
    """
    if path is not None:
        return load_yaml(path)

    user_path = DatachatPaths.config()
    if not user_path.exists():
        logger.debug(f"{CONFIG} No user config at {user_path}")
        return None

    return load_yaml(user_path)


def load_config_dict(path: Optional[Union[str, Path]] = None) -> dict[str, Any]:
    """Return the merged (defaults + user) config as a plain dict."""
    defaults = load_defaults()
    user_config = load_user_config(path)

    if user_config is None:
        logger.debug(f"{CONFIG} Using defaults only")
        return defaults

    logger.debug(f"{CONFIG} Merged defaults with user overrides")
    return deep_merge(defaults, user_config)


def load_config(path: Optional[Union[str, Path]] = None) -> DatachatConfig:
    """
    Load and validate the complete configuration.

    Args:
        path: Optional explicit user config file. Defaults to the workspace
              config, which may be absent.

    Raises:
        ConfigNotFoundError: If an explicit path doesn't exist
        ConfigParseError: If a file isn't valid YAML
        ConfigValidationError: If the merged config doesn't match the schema
    """
    merged = load_config_dict(path)

    try:
        return DatachatConfig.model_validate(merged)
    except ValidationError as e:
        source = Path(path) if path is not None else DatachatPaths.config()
        raise ConfigValidationError(f"Invalid configuration: {e}", path=source) from e


def get_config_source(path: Optional[Union[str, Path]] = None) -> str:
    """Describe where config is loaded from, for CLI display."""
    user_path = Path(path) if path is not None else DatachatPaths.config()

    if user_path.exists():
        return f"{user_path} (overriding defaults)"
    return f"{DEFAULTS_PATH} (package defaults)"


__all__ = [
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "deep_merge",
    "load_yaml",
    "load_defaults",
    "load_user_config",
    "load_config_dict",
    "load_config",
    "get_config_source",
]
