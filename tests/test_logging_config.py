"""Tests for logging setup."""

from __future__ import annotations

import logging
import logging.handlers

import pytest
from textual.logging import TextualHandler

from diffpanes.logging_config import configure_logging, reset_logging


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_textual_handler_only(self):
        configure_logging("DEBUG")
        logger = logging.getLogger("diffpanes")
        assert logger.level == logging.DEBUG
        assert [type(h) for h in logger.handlers] == [TextualHandler]
        assert logger.propagate is False

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "diffpanes.log"
        configure_logging("INFO", str(log_file))

        logging.getLogger("diffpanes.core.dispatcher").info("hello")
        for handler in logging.getLogger("diffpanes").handlers:
            handler.flush()

        assert log_file.exists()
        assert "hello" in log_file.read_text(encoding="utf-8")
        assert any(
            isinstance(h, logging.handlers.RotatingFileHandler)
            for h in logging.getLogger("diffpanes").handlers
        )

    def test_idempotent(self):
        configure_logging()
        configure_logging()
        assert len(logging.getLogger("diffpanes").handlers) == 1
