# datachat/core/exceptions.py
"""Root of the datachat exception hierarchy."""

from __future__ import annotations


class DatachatError(Exception):
    """Base class for all errors raised by datachat."""

    pass


__all__ = ["DatachatError"]
