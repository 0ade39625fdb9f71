"""Operations module for the Mattermost CSV converter."""

from .csv_ops import CsvUserIdPipeline, PipelineState, process_csv_file
from .user_ops import check_connection, get_user_details, resolve_user

__all__ = [
    # CSV pipeline
    "CsvUserIdPipeline",
    "PipelineState",
    "process_csv_file",
    # User lookups
    "check_connection",
    "get_user_details",
    "resolve_user",
]
