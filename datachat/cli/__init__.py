# datachat/cli/__init__.py
"""
datachat CLI.

Usage:
    datachat load sales.csv     # Load data
    datachat tables             # Inspect schema
    datachat ask "question"     # Ask a question
    datachat chat               # Interactive loop
"""

from datachat.cli.cli import app

__all__ = ["app"]
