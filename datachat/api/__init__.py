# datachat/api/__init__.py
"""HTTP API for uploading data and asking questions."""

from datachat.api.app import create_app

__all__ = ["create_app"]
