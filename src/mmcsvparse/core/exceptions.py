"""Custom exception hierarchy for the Mattermost CSV user ID converter."""


class MMCsvParseError(Exception):
    """Base exception for mm-csv-parse.

    This is the root exception class for all project-specific errors.
    All other custom exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: str | None = None):
        """Initialize the exception.

        Args:
            message: The main error message
            details: Optional additional details about the error
        """
        self.message = message
        self.details = details
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message."""
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigError(MMCsvParseError):
    """Configuration errors.

    Raised when required connection or file parameters are missing or
    invalid, such as an empty token or an unsupported HTTP scheme.
    """


class FileOperationError(MMCsvParseError):
    """File operation errors.

    Raised when file operations fail, such as reading the input CSV
    or creating the output CSV.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        operation: str | None = None,
        details: str | None = None,
    ):
        """Initialize the file operation error.

        Args:
            message: The main error message
            file_path: The file path that caused the error
            operation: The file operation that failed (read, write, etc.)
            details: Optional additional details about the error
        """
        self.file_path = file_path
        self.operation = operation
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with file context."""
        parts = [self.message]

        if self.operation:
            parts.append(f"Operation: {self.operation}")

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class InputUnavailableError(FileOperationError):
    """The input CSV file could not be opened for reading."""


class CsvFormatError(MMCsvParseError):
    """CSV structure errors.

    Raised when the input table cannot be processed because its structure
    does not match what the converter needs.
    """

    def __init__(
        self,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        details: str | None = None,
    ):
        """Initialize the CSV format error.

        Args:
            message: The main error message
            file_path: The CSV file being read
            line: 1-based line number of the offending record
            details: Optional additional details about the error
        """
        self.file_path = file_path
        self.line = line
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with CSV context."""
        parts = [self.message]

        if self.file_path:
            parts.append(f"File: {self.file_path}")

        if self.line is not None:
            parts.append(f"Line: {self.line}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class NoHeaderError(CsvFormatError):
    """The input contains no rows, so there is no header to read."""


class ColumnNotFoundError(CsvFormatError):
    """The requested user ID column is not present in the header."""

    def __init__(
        self,
        column: str,
        header: list[str] | None = None,
        file_path: str | None = None,
    ):
        """Initialize the column lookup error.

        Args:
            column: The column name that was searched for
            header: The header row that was searched
            file_path: The CSV file being read
        """
        self.column = column
        self.header = header or []
        details = (
            f"Available columns: {', '.join(self.header)}" if self.header else None
        )
        super().__init__(
            f"Unable to find column '{column}' in CSV header",
            file_path=file_path,
            line=1,
            details=details,
        )


class MalformedRowError(CsvFormatError):
    """A data row could not be parsed or has the wrong number of cells."""


class DirectoryServiceError(MMCsvParseError):
    """Mattermost API transport errors.

    Raised when the directory service cannot be reached, its response body
    cannot be read, or the body is not JSON at all. These conditions abort
    the whole run.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        endpoint: str | None = None,
        details: str | None = None,
    ):
        """Initialize the directory service error.

        Args:
            message: The main error message
            status_code: The HTTP status code, if a response was received
            endpoint: The API endpoint that failed
            details: Optional additional details about the error
        """
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with API context."""
        parts = [self.message]

        if self.status_code:
            parts.append(f"Status: {self.status_code}")

        if self.endpoint:
            parts.append(f"Endpoint: {self.endpoint}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)


class UserLookupError(MMCsvParseError):
    """A single user ID could not be resolved.

    Raised when a decoded API response lacks one of the expected identity
    fields. The affected row is skipped and the run continues.
    """

    def __init__(
        self,
        message: str,
        user_id: str | None = None,
        details: str | None = None,
    ):
        """Initialize the user lookup error.

        Args:
            message: The main error message
            user_id: The Mattermost user ID that failed to resolve
            details: Optional additional details about the error
        """
        self.user_id = user_id
        super().__init__(message, details)

    def _format_message(self) -> str:
        """Format the complete error message with user context."""
        parts = [self.message]

        if self.user_id:
            parts.append(f"User ID: {self.user_id}")

        if self.details:
            parts.append(f"Details: {self.details}")

        return " | ".join(parts)
