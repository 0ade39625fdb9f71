"""Core functionality for the Mattermost CSV converter."""

from mmcsvparse.core.config import (
    DEFAULT_PORT,
    DEFAULT_SCHEME,
    check_env_file,
    get_env_config,
    parse_bool,
)
from mmcsvparse.core.exceptions import (
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

__all__ = [
    "DEFAULT_PORT",
    "DEFAULT_SCHEME",
    "check_env_file",
    "get_env_config",
    "parse_bool",
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
]
