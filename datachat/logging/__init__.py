# datachat/logging/__init__.py
"""Logging helpers shared by every datachat module."""

from datachat.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
