"""Display helpers that route user-facing messages through logging."""

from typing import Any

from .logging_utils import get_logger

# Color constants for terminal output
RED = "\033[91m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
CYAN = "\033[96m"
RESET = "\033[0m"

_logger = get_logger(__name__)


def print_info(message: str, **context: Any) -> None:
    """Log an info message with structured context."""
    _logger.info(message, extra=context)


def print_success(message: str, **context: Any) -> None:
    """Log a success message with structured context."""
    _logger.info(message, extra={**context, "status": "success"})


def print_warning(message: str, **context: Any) -> None:
    """Log a warning message with structured context."""
    _logger.warning(message, extra=context)


def print_error(message: str, **context: Any) -> None:
    """Log an error message with structured context."""
    _logger.error(message, extra=context)


def print_debug(message: str, **context: Any) -> None:
    """Log a debug message; only shown when verbose logging is on."""
    _logger.debug(message, extra=context)
