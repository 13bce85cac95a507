"""Tests for transcript-pdf structured logging."""

from __future__ import annotations

import io
import logging
import re

import pytest

from transcript_pdf.log import get_logger, setup_logging


class TestSetupLogging:
    """Tests for the setup_logging function."""

    def test_setup_logging_sets_level(self) -> None:
        """setup_logging('DEBUG') must set root logger to DEBUG."""
        setup_logging("DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_default_level_is_info(self) -> None:
        """setup_logging() with no args defaults to INFO."""
        setup_logging()

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_accepts_lowercase(self) -> None:
        """Level names are case-insensitive."""
        setup_logging("warning")

        assert logging.getLogger().level == logging.WARNING

    def test_setup_logging_invalid_level_raises(self) -> None:
        """An unrecognised level string must raise ValueError."""
        with pytest.raises(ValueError, match="Invalid log level"):
            setup_logging("INVALID")

    def test_setup_logging_idempotent(self) -> None:
        """Calling setup_logging() twice must not add duplicate handlers."""
        setup_logging()
        count_after_first = len(logging.getLogger().handlers)

        setup_logging("DEBUG")
        count_after_second = len(logging.getLogger().handlers)

        assert count_after_second == count_after_first

    def test_engine_loggers_quiet_at_info(self) -> None:
        """pdfminer debug chatter is held back unless running at DEBUG."""
        setup_logging("INFO")

        assert logging.getLogger("pdfminer").level == logging.WARNING
        assert logging.getLogger("pdfplumber").level == logging.WARNING

    def test_engine_loggers_follow_debug(self) -> None:
        """At DEBUG the engine loggers are opened up too."""
        setup_logging("DEBUG")

        assert logging.getLogger("pdfminer").level == logging.DEBUG


class TestGetLogger:
    """Tests for the get_logger function."""

    def test_get_logger_name(self) -> None:
        """get_logger() must return a logger with the requested name."""
        logger = get_logger("transcript_pdf.test")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "transcript_pdf.test"


class TestLogOutput:
    """Tests for the actual log output format."""

    def test_log_line_format(self) -> None:
        """A record renders as timestamp | level | name | message."""
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        get_logger("test.format").info("hello world")

        output = stream.getvalue()
        assert re.search(
            r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2} \| INFO     \| test\.format \| hello world$",
            output,
            re.MULTILINE,
        )

    def test_default_stream_is_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Without a stream argument, records go to stderr."""
        setup_logging("INFO")
        get_logger("test.stderr").info("to stderr")

        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert "to stderr" not in captured.out

    def test_debug_not_shown_at_info_level(self) -> None:
        """DEBUG messages must not appear when level is INFO."""
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)
        get_logger("test.filter").debug("should not appear")

        assert "should not appear" not in stream.getvalue()

    def test_debug_shown_at_debug_level(self) -> None:
        """DEBUG messages must appear when level is DEBUG."""
        stream = io.StringIO()
        setup_logging("DEBUG", stream=stream)
        get_logger("test.debug_show").debug("should appear")

        assert "should appear" in stream.getvalue()
