"""Structured logging utilities for the Mattermost CSV converter."""

import json
import logging
import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

ROOT_LOGGER_NAME = "mmcsvparse"

# Record attributes copied into structured and detailed output when present
CONTEXT_FIELDS = (
    "user_id",
    "operation",
    "file_path",
    "api_endpoint",
    "status_code",
    "csv_line",
)


class ColoredFormatter(logging.Formatter):
    """Custom formatter with color support for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
        "RESET": "\033[0m",  # Reset
    }

    def __init__(self, *args: Any, disable_colors: bool = False, **kwargs: Any) -> None:
        """Initialize formatter with color configuration.

        Args:
            disable_colors: Whether to disable colored output
        """
        super().__init__(*args, **kwargs)
        self.disable_colors = disable_colors

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors for terminal output."""
        if (
            self.disable_colors
            or not hasattr(sys.stderr, "isatty")
            or not sys.stderr.isatty()
        ):
            return super().format(record)

        # Color a copy so other handlers see the plain level name
        original_levelname = record.levelname
        color = self.COLORS.get(record.levelname, "")
        reset = self.COLORS["RESET"]
        record.levelname = f"{color}{record.levelname}{reset}"
        try:
            return super().format(record)
        finally:
            record.levelname = original_levelname


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as structured JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for name in CONTEXT_FIELDS:
            if hasattr(record, name):
                log_entry[name] = getattr(record, name)

        return json.dumps(log_entry, default=str)


class DetailedFormatter(logging.Formatter):
    """Detailed formatter with context information."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with detailed context."""
        base_msg = super().format(record)

        context_parts = []
        if hasattr(record, "operation"):
            context_parts.append(f"op={record.operation}")
        if hasattr(record, "user_id"):
            context_parts.append(f"user={record.user_id}")
        if hasattr(record, "api_endpoint"):
            context_parts.append(f"endpoint={record.api_endpoint}")
        if hasattr(record, "status_code"):
            context_parts.append(f"status={record.status_code}")
        if hasattr(record, "csv_line"):
            context_parts.append(f"line={record.csv_line}")

        if context_parts:
            return base_msg + " [" + ", ".join(context_parts) + "]"

        return base_msg


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
    log_format: str = "console",
    disable_colors: bool = False,
) -> logging.Logger:
    """Configure logging for the application.

    All console output goes to stderr; stdout is reserved for CSV data
    when the output file cannot be created.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional log file path for JSON-lines output
        log_format: Console format (console, json, detailed)
        disable_colors: Whether to disable colored output

    Returns:
        logging.Logger: Configured package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()

    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    if log_format == "json":
        console_formatter: logging.Formatter = StructuredFormatter()
    elif log_format == "detailed":
        console_formatter = DetailedFormatter(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:  # console format (default)
        console_formatter = ColoredFormatter(
            fmt="%(asctime)s [%(levelname)s] %(message)s",
            datefmt="%Y/%m/%d %H:%M:%S",
            disable_colors=disable_colors,
        )

    console_handler.setFormatter(console_formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(log_level)

        # Always use structured logging for files
        file_handler.setFormatter(StructuredFormatter())
        root_logger.addHandler(file_handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the specified module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger: Logger under the package hierarchy
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_from_env(debug: bool = False) -> logging.Logger:
    """Configure logging from environment variables.

    Environment variables:
        MM_LOG_LEVEL: Log level (default: INFO, or DEBUG when ``debug``)
        MM_LOG_FILE: Log file path (optional)
        MM_LOG_FORMAT: Log format (console, json, detailed) (default: console)
        MM_LOG_DISABLE_COLORS: Disable colored output (default: false)

    Args:
        debug: Force DEBUG level regardless of MM_LOG_LEVEL

    Returns:
        logging.Logger: Configured package logger
    """
    level = "DEBUG" if debug else os.getenv("MM_LOG_LEVEL", "INFO")
    log_file = os.getenv("MM_LOG_FILE")
    log_format = os.getenv("MM_LOG_FORMAT", "console")
    disable_colors = os.getenv("MM_LOG_DISABLE_COLORS", "false").lower() == "true"

    return setup_logging(
        level=level,
        log_file=log_file,
        log_format=log_format,
        disable_colors=disable_colors,
    )
