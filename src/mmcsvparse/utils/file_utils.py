"""File operation utilities for the Mattermost CSV converter."""

import os
import sys
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from mmcsvparse.core.exceptions import InputUnavailableError
from mmcsvparse.utils.display_utils import print_warning

# utf-8-sig strips a leading BOM so the first header cell matches by name
INPUT_ENCODING = "utf-8-sig"
OUTPUT_ENCODING = "utf-8"


def validate_input_path(file_path: str) -> Path:
    """Validate that a path names a readable file.

    Args:
        file_path: Path to validate

    Returns:
        Path object if valid

    Raises:
        InputUnavailableError: If the path does not name a readable file
    """
    try:
        path = Path(file_path).resolve()
    except (OSError, ValueError) as e:
        raise InputUnavailableError(
            f"Invalid file path '{file_path}'", file_path=file_path, operation="read"
        ) from e

    if not path.exists():
        raise InputUnavailableError(
            "File not found", file_path=str(path), operation="read"
        )
    if not path.is_file():
        raise InputUnavailableError(
            "Path is not a file", file_path=str(path), operation="read"
        )
    if not os.access(path, os.R_OK):
        raise InputUnavailableError(
            "Permission denied reading file", file_path=str(path), operation="read"
        )

    return path


@contextmanager
def safe_file_read(
    file_path: str, encoding: str = INPUT_ENCODING
) -> Generator[TextIO, None, None]:
    """Context manager for opening the input CSV.

    Args:
        file_path: Path to the file to read
        encoding: File encoding (default: utf-8 with optional BOM)

    Yields:
        File object for reading, opened with ``newline=""`` for the csv module

    Raises:
        InputUnavailableError: If the file cannot be opened
    """
    path = validate_input_path(file_path)

    try:
        file = open(path, encoding=encoding, newline="")
    except OSError as e:
        raise InputUnavailableError(
            "Unable to open input file",
            file_path=str(path),
            operation="read",
            details=str(e),
        ) from e

    with file:
        yield file


@contextmanager
def open_output(
    file_path: str, encoding: str = OUTPUT_ENCODING
) -> Generator[tuple[TextIO, str | None], None, None]:
    """Context manager for the output CSV with a stdout fallback.

    If the destination cannot be created the run continues on standard
    output instead of aborting. A real file is flushed and closed on exit;
    stdout is only flushed.

    Args:
        file_path: Path of the file to create
        encoding: File encoding

    Yields:
        Tuple of (stream, path actually written or None for stdout)
    """
    try:
        stream: TextIO = open(file_path, "w", encoding=encoding, newline="")
    except OSError as e:
        print_warning(
            f"Unable to create output file - writing to stdout: {e}",
            file_path=file_path,
            operation="open_output",
        )
        try:
            yield sys.stdout, None
        finally:
            sys.stdout.flush()
        return

    with stream:
        try:
            yield stream, file_path
        finally:
            stream.flush()
