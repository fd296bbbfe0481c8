# datachat/config/__init__.py
"""
Configuration management for datachat.

Usage:
    from datachat.config import load_config

    config = load_config()
    config.llm.model
"""

from datachat.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    load_config,
    load_config_dict,
)
from datachat.config.schema import DatachatConfig

__all__ = [
    "DatachatConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "load_config",
    "load_config_dict",
]
