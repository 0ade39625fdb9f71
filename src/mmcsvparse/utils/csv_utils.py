"""CSV reading and writing utilities for the Mattermost CSV converter."""

import csv
from collections.abc import Iterator
from typing import TextIO

from ..core.exceptions import ColumnNotFoundError, MalformedRowError, NoHeaderError


def find_column_index(header: list[str], column: str) -> int:
    """Locate a column by exact, case-sensitive name.

    Args:
        header: CSV header row
        column: Column name to look for

    Returns:
        int: Zero-based index of the first matching column

    Raises:
        ColumnNotFoundError: If no header cell equals ``column``
    """
    for index, name in enumerate(header):
        if name == column:
            return index
    raise ColumnNotFoundError(column, header=header)


class CsvTableReader:
    """Forward-only reader that hands out the header and then data rows.

    Every data row must have exactly as many cells as the header. The
    reader is a single pass over the underlying file and cannot restart.
    """

    def __init__(self, file: TextIO, file_path: str | None = None):
        self._reader = csv.reader(file, strict=True)
        self.file_path = file_path
        self.header: list[str] | None = None

    @property
    def line_num(self) -> int:
        """Number of physical lines consumed so far."""
        return self._reader.line_num

    def _next_row(self) -> list[str] | None:
        # Blank lines carry no record and are skipped
        while True:
            try:
                row = next(self._reader)
            except StopIteration:
                return None
            except (csv.Error, UnicodeDecodeError) as e:
                raise MalformedRowError(
                    "Unable to process CSV record",
                    file_path=self.file_path,
                    line=self._reader.line_num,
                    details=str(e),
                ) from e
            if row:
                return row

    def read_header(self) -> list[str]:
        """Read the first row as the header.

        Raises:
            NoHeaderError: If the input has no rows at all
            MalformedRowError: If the first row cannot be parsed
        """
        row = self._next_row()
        if row is None:
            raise NoHeaderError(
                "Unable to read header record from CSV file",
                file_path=self.file_path,
                details="input is empty",
            )
        self.header = row
        return row

    def __iter__(self) -> Iterator[list[str]]:
        header = self.header if self.header is not None else self.read_header()
        width = len(header)

        while True:
            row = self._next_row()
            if row is None:
                return
            if len(row) != width:
                raise MalformedRowError(
                    "Unable to process CSV record",
                    file_path=self.file_path,
                    line=self._reader.line_num,
                    details=f"wrong number of fields: expected {width}, got {len(row)}",
                )
            yield row


class CsvTableWriter:
    """Writes the header once, then one row at a time, flushing each."""

    def __init__(self, stream: TextIO):
        self._stream = stream
        self._writer = csv.writer(stream, lineterminator="\n")
        self._header_written = False

    def write_header(self, header: list[str]) -> None:
        if self._header_written:
            raise RuntimeError("CSV header has already been written")
        self._write(header)
        self._header_written = True

    def write_row(self, row: list[str]) -> None:
        if not self._header_written:
            raise RuntimeError("CSV header must be written before data rows")
        self._write(row)

    def _write(self, row: list[str]) -> None:
        self._writer.writerow(row)
        self._stream.flush()
