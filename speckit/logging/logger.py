# speckit/logging/logger.py
"""
Logger setup for the `speckit` namespace.

Modules take a child of the package logger:
    from speckit.logging.logger import get_logger
    logger = get_logger(__name__)      # e.g. "speckit.emit.writer"

Only the CLI calls configure_logging(). It attaches one handler to the
`speckit` logger and leaves the root logger alone, so importing speckit as a
library never changes the host application's logging. Records go to stderr
by default because `speckit check --json` and `speckit config --json` print
machine-readable output on stdout.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

PACKAGE_LOGGER = "speckit"
DEFAULT_FORMAT = "[%(levelname)s] %(name)s - %(message)s"


def configure_logging(
    level: int = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Attach a stream handler to the `speckit` logger and set its level.

    Repeated calls only change the level; the first call's handler stays.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if not package_logger.handlers:
        handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        handler.setFormatter(logging.Formatter(fmt))
        package_logger.addHandler(handler)

    package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Logger for a speckit module; pass `__name__`."""
    return logging.getLogger(name)


__all__ = ["DEFAULT_FORMAT", "PACKAGE_LOGGER", "configure_logging", "get_logger"]
