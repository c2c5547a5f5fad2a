# speckit/cli/__init__.py
"""
speckit command-line interface.

Entry point: `speckit` (speckit.cli.cli:app).
"""

from speckit.cli.cli import app

__all__ = ["app"]
