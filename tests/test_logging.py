"""
Unit tests for the logging utilities of the pokercards package.
"""

import logging

import pytest

import pokercards.utils.logging as log_utils
from pokercards.core.card import Card
from pokercards.core.errors import InvalidSuit
from pokercards.utils.logging import setup_logging


@pytest.fixture
def clean_logger(monkeypatch):
    """Give each test a package logger without handlers and restore it afterwards."""
    logger = logging.getLogger("pokercards")
    saved_handlers = list(logger.handlers)
    saved_level = logger.level
    monkeypatch.setattr(log_utils, "_console_handler", None)
    logger.handlers = [h for h in saved_handlers if isinstance(h, logging.NullHandler)]
    yield logger
    for handler in logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    logger.handlers = saved_handlers
    logger.setLevel(saved_level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_returns_package_logger(self, clean_logger):
        """Test that the package logger is configured at the requested level."""
        logger = setup_logging(level=logging.DEBUG)
        assert logger is clean_logger
        assert logger.level == logging.DEBUG

    def test_no_duplicate_handlers(self, clean_logger, tmp_path):
        """Test that repeated calls do not stack handlers."""
        log_file = tmp_path / "cards.log"
        setup_logging(str(log_file))
        count = len(clean_logger.handlers)
        setup_logging(str(log_file), level=logging.WARNING)
        assert len(clean_logger.handlers) == count
        assert all(h.level == logging.WARNING for h in clean_logger.handlers
                   if not isinstance(h, logging.NullHandler))

    def test_file_handler_creates_directory(self, clean_logger, tmp_path):
        """Test that the log directory is created and parse failures reach the file."""
        log_file = tmp_path / "logs" / "cards.log"
        setup_logging(str(log_file), level=logging.DEBUG)

        with pytest.raises(InvalidSuit):
            Card.parse("AX")

        for handler in clean_logger.handlers:
            handler.flush()
        contents = log_file.read_text()
        assert "pokercards.core.card - DEBUG" in contents
        assert "invalid suit: X" in contents

    def test_info_level_hides_parse_failures(self, clean_logger, tmp_path):
        """Test that rejected input is only logged at debug level."""
        log_file = tmp_path / "cards.log"
        setup_logging(str(log_file), level=logging.INFO)

        with pytest.raises(InvalidSuit):
            Card.parse("AX")

        for handler in clean_logger.handlers:
            handler.flush()
        assert log_file.read_text() == ""
