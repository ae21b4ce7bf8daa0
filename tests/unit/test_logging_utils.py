#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_logging_utils.py
"""Unit tests for the command line logging setup."""

import logging

import pytest

from mdspans.logging_utils import configure_logging, match_logging_enabled, resolve_level


@pytest.mark.unit
class TestResolveLevel:
    """Tests for level name handling."""

    def test_names_and_numbers(self):
        """Test names are case-insensitive and numbers pass through."""
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING
        assert resolve_level(15) == 15

    def test_unknown_name(self):
        """Test unknown names fall back to INFO."""
        assert resolve_level("chatty") == logging.INFO


@pytest.mark.unit
class TestConfigureLogging:
    """Tests for handler installation on the package logger."""

    def test_package_logger_configured(self):
        """Test handlers go on the mdspans logger and the root logger is untouched."""
        root_handlers = logging.getLogger().handlers[:]
        logger = configure_logging("INFO")
        assert logger.name == "mdspans"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert logging.getLogger().handlers == root_handlers

    def test_reconfigure_replaces_handlers(self):
        """Test a second call does not stack handlers."""
        configure_logging("INFO")
        logger = configure_logging("ERROR")
        assert len(logger.handlers) == 1
        assert logger.level == logging.ERROR

    def test_console_output(self, capsys):
        """Test records from package modules reach stderr in the plain format."""
        configure_logging("INFO")
        logging.getLogger("mdspans.api").info("parsed it")
        assert "INFO: parsed it" in capsys.readouterr().err

    def test_trace_format(self, capsys):
        """Test trace mode adds the logger name."""
        configure_logging("INFO", trace_mode=True)
        logging.getLogger("mdspans.api").info("parsed it")
        assert "[INFO] [mdspans.api] parsed it" in capsys.readouterr().err

    def test_log_file(self, tmp_path):
        """Test records are copied to the log file."""
        path = tmp_path / "mdspans.log"
        logger = configure_logging("INFO", log_file=str(path))
        logging.getLogger("mdspans.cli").info("written")
        for handler in logger.handlers:
            handler.flush()
        content = path.read_text(encoding="utf-8")
        assert "Logging to file" in content
        assert "INFO: written" in content

    def test_unwritable_log_file(self, tmp_path, capsys):
        """Test an unusable log file path only produces a warning."""
        logger = configure_logging("INFO", log_file=str(tmp_path / "missing" / "mdspans.log"))
        assert len(logger.handlers) == 1
        assert "Could not create log file" in capsys.readouterr().err


@pytest.mark.unit
class TestMatchLogging:
    """Tests for deciding whether rule matches are traced."""

    def test_enabled_at_debug(self):
        """Test match tracing follows the configured level."""
        configure_logging("DEBUG")
        assert match_logging_enabled() is True
        configure_logging("INFO")
        assert match_logging_enabled() is False
