"""CLI module for the Mattermost CSV converter."""

from .commands import OperationHandler
from .main import cli, main
from .validators import (
    build_endpoint,
    build_run_config,
    validate_connection_parameters,
    validate_file_parameters,
)

__all__ = [
    "OperationHandler",
    "cli",
    "main",
    "build_endpoint",
    "build_run_config",
    "validate_connection_parameters",
    "validate_file_parameters",
]
