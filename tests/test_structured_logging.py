"""Tests for structured logging functionality."""

import json
import logging
from io import StringIO
from unittest.mock import patch

from mmcsvparse.utils.display_utils import print_success, print_warning
from mmcsvparse.utils.logging_utils import (
    ColoredFormatter,
    DetailedFormatter,
    StructuredFormatter,
    configure_from_env,
    get_logger,
    setup_logging,
)


def make_record(msg="Test message", level=logging.INFO):
    return logging.LogRecord(
        name="mmcsvparse.test",
        level=level,
        pathname="test.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestStructuredFormatter:
    """Test structured JSON formatter."""

    def test_basic_formatting(self):
        """Test basic log record formatting."""
        log_data = json.loads(StructuredFormatter().format(make_record()))

        assert log_data["level"] == "INFO"
        assert log_data["logger"] == "mmcsvparse.test"
        assert log_data["message"] == "Test message"
        assert log_data["line"] == 42
        assert "timestamp" in log_data

    def test_context_fields(self):
        """Test that context fields are included."""
        record = make_record()
        record.user_id = "u1"
        record.operation = "resolve_user"
        record.csv_line = 7

        log_data = json.loads(StructuredFormatter().format(record))

        assert log_data["user_id"] == "u1"
        assert log_data["operation"] == "resolve_user"
        assert log_data["csv_line"] == 7
        assert log_data["line"] == 42


class TestDetailedFormatter:
    """Test detailed formatter."""

    def test_appends_context(self):
        """Test that context is appended in brackets."""
        formatter = DetailedFormatter(fmt="%(message)s")
        record = make_record()
        record.user_id = "u1"
        record.api_endpoint = "/api/v4/users/u1"
        record.csv_line = 3

        result = formatter.format(record)

        assert result == "Test message [user=u1, endpoint=/api/v4/users/u1, line=3]"

    def test_no_context(self):
        """Test that plain records are unchanged."""
        formatter = DetailedFormatter(fmt="%(message)s")
        assert formatter.format(make_record()) == "Test message"


class TestColoredFormatter:
    """Test colored console formatter."""

    def test_no_colors_when_disabled(self):
        """Test that disabled colors leave the level name untouched."""
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s", disable_colors=True)
        assert formatter.format(make_record()) == "INFO Test message"

    def test_colors_on_tty_do_not_leak(self):
        """Test coloring on a terminal keeps the record's level name intact."""
        formatter = ColoredFormatter(fmt="%(levelname)s %(message)s")
        record = make_record(level=logging.WARNING)

        with patch("sys.stderr") as mock_stderr:
            mock_stderr.isatty.return_value = True
            result = formatter.format(record)

        assert "\033[33mWARNING\033[0m" in result
        assert record.levelname == "WARNING"


class TestSetupLogging:
    """Test logging configuration."""

    def test_sets_level_and_handler(self):
        """Test that setup replaces handlers and applies the level."""
        logger = setup_logging(level="DEBUG")
        assert logger.name == "mmcsvparse"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

        setup_logging(level="WARNING")
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_log_file_is_json(self, tmp_path):
        """Test that the log file always receives JSON lines."""
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(level="INFO", log_file=str(log_file))

        get_logger("test").info("hello", extra={"user_id": "u1"})
        for handler in logging.getLogger("mmcsvparse").handlers:
            handler.flush()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["message"] == "hello"
        assert entry["user_id"] == "u1"

    def test_configure_from_env(self, monkeypatch):
        """Test environment-driven configuration."""
        monkeypatch.setenv("MM_LOG_LEVEL", "ERROR")
        logger = configure_from_env()
        assert logger.level == logging.ERROR

    def test_configure_from_env_debug_overrides(self, monkeypatch):
        """Test that the debug flag forces DEBUG level."""
        monkeypatch.setenv("MM_LOG_LEVEL", "ERROR")
        logger = configure_from_env(debug=True)
        assert logger.level == logging.DEBUG

    def test_get_logger_namespacing(self):
        """Test logger names stay under the package."""
        assert get_logger("foo").name == "mmcsvparse.foo"
        assert get_logger("mmcsvparse.utils").name == "mmcsvparse.utils"


class TestDisplayHelpers:
    """Test logging-backed display helpers."""

    def test_warning_carries_context(self):
        """Test that keyword context reaches the record."""
        stream = StringIO()
        logger = setup_logging(level="DEBUG", log_format="json")
        logger.handlers[0].setStream(stream)

        print_warning("skipping", user_id="u9")

        entry = json.loads(stream.getvalue().splitlines()[0])
        assert entry["level"] == "WARNING"
        assert entry["user_id"] == "u9"

    def test_success_is_info(self, caplog):
        """Test that success messages log at INFO."""
        with caplog.at_level(logging.INFO, logger="mmcsvparse"):
            print_success("done")
        assert caplog.records[-1].levelno == logging.INFO
        assert caplog.records[-1].status == "success"
