"""
Tests for logging configuration module.
"""

import logging
import os
import tempfile
from pathlib import Path
from unittest.mock import patch

from tool_versions.logging_config import (
    ColoredFormatter,
    WorkflowCommandFormatter,
    get_logger,
    setup_logging,
)


def _record(level, msg):
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestSetupLogging:
    """Test logging setup and configuration."""

    def test_setup_logging_default(self):
        """Test default logging setup."""
        logger = setup_logging()
        assert logger.name == "tool_versions"
        assert logger.level == logging.INFO
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)

    def test_setup_logging_verbose(self):
        """Test verbose logging enables DEBUG level."""
        logger = setup_logging(verbose=True)
        assert logger.level == logging.DEBUG

    def test_setup_logging_quiet(self):
        """Test quiet mode keeps only warnings and errors on the console."""
        logger = setup_logging(quiet=True)
        assert logger.level == logging.WARNING
        console_handlers = [
            h for h in logger.handlers
            if isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        ]
        assert len(console_handlers) == 1
        assert console_handlers[0].level == logging.WARNING

    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    def test_setup_logging_quiet_still_annotates(self, capsys):
        """Errors are still emitted as ::error:: commands in quiet mode."""
        logger = setup_logging(quiet=True)
        logger.info("hidden")
        logger.error("failed")
        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "::error::failed" in out

    def test_setup_logging_file_receives_debug(self, tmp_path):
        """The log file gets debug records even at the default console level."""
        log_file = tmp_path / "debug.log"
        logger = setup_logging(log_file=str(log_file))
        logger.debug("detail")
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        assert "detail" in log_file.read_text(encoding="utf-8")

    def test_setup_logging_with_file(self):
        """Test logging to file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = Path(tmpdir) / "sub" / "test.log"
            logger = setup_logging(log_file=str(log_file))

            logger.info("Test message")
            for handler in logger.handlers:
                handler.flush()

            assert log_file.exists()
            assert "Test message" in log_file.read_text()

            for handler in list(logger.handlers):
                handler.close()
            logger.handlers.clear()

    @patch.dict(os.environ, {"GITHUB_ACTIONS": "true"})
    def test_setup_logging_github_actions(self):
        """Under Actions every level is handed to the runner as a command."""
        logger = setup_logging()
        assert logger.level == logging.DEBUG
        assert isinstance(logger.handlers[0].formatter, WorkflowCommandFormatter)

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1


class TestGetLogger:
    """Test logger retrieval."""

    def test_get_logger_returns_instance(self):
        assert isinstance(get_logger(), logging.Logger)

    def test_get_logger_singleton(self):
        assert get_logger() is get_logger()


class TestColoredFormatter:
    """Test colored log formatter."""

    def test_colored_formatter_with_colors(self):
        formatter = ColoredFormatter("%(levelname_colored)s %(message)s", use_colors=True)
        formatted = formatter.format(_record(logging.INFO, "Test message"))
        assert "Test message" in formatted
        assert "\033[" in formatted

    def test_colored_formatter_without_colors(self):
        formatter = ColoredFormatter("%(levelname_colored)s %(message)s", use_colors=False)
        assert formatter.format(_record(logging.WARNING, "careful")) == "WARNING careful"


class TestWorkflowCommandFormatter:
    """Test workflow command formatter."""

    def test_info_is_plain(self):
        formatter = WorkflowCommandFormatter()
        assert formatter.format(_record(logging.INFO, "Gathered 'a' version 1")) == "Gathered 'a' version 1"

    def test_levels_map_to_commands(self):
        formatter = WorkflowCommandFormatter()
        assert formatter.format(_record(logging.DEBUG, "d")) == "::debug::d"
        assert formatter.format(_record(logging.WARNING, "w")) == "::warning::w"
        assert formatter.format(_record(logging.ERROR, "e")) == "::error::e"
        assert formatter.format(_record(logging.CRITICAL, "c")) == "::error::c"

    def test_message_escaped(self):
        formatter = WorkflowCommandFormatter()
        assert formatter.format(_record(logging.ERROR, "line1\nline2")) == "::error::line1%0Aline2"
