# speckit/cli/commands/__init__.py
"""CLI command implementations, imported lazily by speckit.cli.cli."""
