"""Tests for logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

from stimtab.config import LoggingConfig, configure_logging


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_level(self) -> None:
        """Test that the logger level is set."""
        logger = configure_logging(LoggingConfig(level="WARNING"))
        assert logger.name == "stimtab"
        assert logger.level == logging.WARNING

    def test_console_handler(self) -> None:
        """Test that a console handler is installed."""
        logger = configure_logging(LoggingConfig())
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], logging.StreamHandler)

    def test_no_console(self) -> None:
        """Test disabling console output."""
        logger = configure_logging(LoggingConfig(console=False))
        assert logger.handlers == []

    def test_reconfigure_replaces_handlers(self) -> None:
        """Test that configuring twice does not duplicate handlers."""
        configure_logging(LoggingConfig())
        logger = configure_logging(LoggingConfig())
        assert len(logger.handlers) == 1

    def test_foreign_handlers_kept(self) -> None:
        """Test that handlers added elsewhere survive reconfiguration."""
        logger = logging.getLogger("stimtab")
        foreign = logging.NullHandler()
        logger.addHandler(foreign)
        configure_logging(LoggingConfig(console=False))
        assert logger.handlers == [foreign]

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test logging to a file."""
        log_file = tmp_path / "logs" / "stimtab.log"
        logger = configure_logging(
            LoggingConfig(console=False, file=log_file, format="%(message)s")
        )
        logging.getLogger("stimtab.markup").info("built markup")
        for handler in logger.handlers:
            handler.flush()
        assert log_file.read_text(encoding="utf-8") == "built markup\n"
