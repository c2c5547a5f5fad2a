# tests/test_logging.py
"""
Tests for the speckit logger setup.
"""

from __future__ import annotations

import io
import logging

import pytest

from speckit.logging.logger import PACKAGE_LOGGER, configure_logging, get_logger
from speckit.logging.tags import EMIT


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.handlers.clear()
    return logger


class TestConfigureLogging:
    def test_module_loggers_reach_package_handler(self, package_logger):
        stream = io.StringIO()
        configure_logging(logging.DEBUG, stream=stream)

        get_logger("speckit.emit.writer").debug(f"{EMIT} wrote 3 file(s)")

        assert stream.getvalue() == "[DEBUG] speckit.emit.writer - [EMIT] wrote 3 file(s)\n"

    def test_repeated_calls_keep_one_handler(self, package_logger):
        configure_logging(logging.DEBUG, stream=io.StringIO())
        configure_logging(logging.WARNING, stream=io.StringIO())

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_root_logger_untouched(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)

        configure_logging(logging.DEBUG, stream=io.StringIO())

        assert logging.getLogger().handlers == root_handlers
