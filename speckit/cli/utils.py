# speckit/cli/utils.py
"""Helpers shared by CLI commands."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional

import typer

from speckit.cli.ui import ui
from speckit.core.errors import SpecKitError
from speckit.logging.logger import get_logger
from speckit.logging.tags import CLI

logger = get_logger(__name__)


@contextmanager
def cli_errors() -> Iterator[None]:
    """Turn speckit errors into a printed message and exit code 1."""
    try:
        yield
    except SpecKitError as e:
        logger.debug(f"{CLI} Command failed", exc_info=True)
        ui.error(str(e))
        raise typer.Exit(1) from e


def parse_operation_ids(value: Optional[str]) -> Optional[List[str]]:
    """Comma-separated ids to a list; None or blank gives None."""
    if value is None:
        return None
    ids = [part.strip() for part in value.split(",") if part.strip()]
    return ids or None


def display_path(path: Path, root: Optional[Path] = None) -> str:
    """Path relative to `root` (or CWD) when possible."""
    base = root or Path.cwd()
    try:
        return str(path.resolve().relative_to(base.resolve()))
    except ValueError:
        return str(path)


__all__ = ["cli_errors", "display_path", "parse_operation_ids"]
