# datachat/core/__init__.py
"""Core building blocks: paths, HTTP client factory and base errors."""

from datachat.core.exceptions import DatachatError
from datachat.core.paths import DatachatPaths

__all__ = ["DatachatError", "DatachatPaths"]
