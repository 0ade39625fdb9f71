"""mm-csv-parse - Mattermost CSV user ID converter."""

from .core.exceptions import (
    ColumnNotFoundError,
    ConfigError,
    CsvFormatError,
    DirectoryServiceError,
    FileOperationError,
    InputUnavailableError,
    MalformedRowError,
    MMCsvParseError,
    NoHeaderError,
    UserLookupError,
)
from .models.config import EndpointDescriptor, RunConfig
from .models.user import ResolvedIdentity, RunSummary
from .operations.csv_ops import CsvUserIdPipeline, PipelineState, process_csv_file
from .operations.user_ops import check_connection, get_user_details, resolve_user

__version__ = "1.0.0"

__all__ = [
    # Exceptions
    "MMCsvParseError",
    "ConfigError",
    "FileOperationError",
    "InputUnavailableError",
    "CsvFormatError",
    "NoHeaderError",
    "ColumnNotFoundError",
    "MalformedRowError",
    "DirectoryServiceError",
    "UserLookupError",
    # Models
    "EndpointDescriptor",
    "RunConfig",
    "ResolvedIdentity",
    "RunSummary",
    # Operations
    "CsvUserIdPipeline",
    "PipelineState",
    "process_csv_file",
    "resolve_user",
    "get_user_details",
    "check_connection",
]
