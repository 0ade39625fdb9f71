"""Utilities module for the Mattermost CSV converter."""

from .csv_utils import CsvTableReader, CsvTableWriter, find_column_index
from .display_utils import (
    print_debug,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from .file_utils import open_output, safe_file_read, validate_input_path
from .logging_utils import configure_from_env, get_logger, setup_logging
from .url_utils import encode_user_id, secure_url_encode

__all__ = [
    # CSV
    "CsvTableReader",
    "CsvTableWriter",
    "find_column_index",
    # Files
    "open_output",
    "safe_file_read",
    "validate_input_path",
    # Display
    "print_debug",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    # Logging
    "configure_from_env",
    "get_logger",
    "setup_logging",
    # URLs
    "encode_user_id",
    "secure_url_encode",
]
