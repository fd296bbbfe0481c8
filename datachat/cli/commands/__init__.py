# datachat/cli/commands/__init__.py
"""CLI command implementations, imported lazily by datachat.cli.cli."""
