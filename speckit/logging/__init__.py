# speckit/logging/__init__.py
"""Logging helpers: `get_logger` and subsystem tags."""

from speckit.logging.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
