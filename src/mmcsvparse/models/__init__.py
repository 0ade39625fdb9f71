"""Data models for the Mattermost CSV converter."""

from mmcsvparse.models.config import SUPPORTED_SCHEMES, EndpointDescriptor, RunConfig
from mmcsvparse.models.user import REQUIRED_USER_FIELDS, ResolvedIdentity, RunSummary

__all__ = [
    # Config models
    "EndpointDescriptor",
    "RunConfig",
    "SUPPORTED_SCHEMES",
    # User models
    "ResolvedIdentity",
    "RunSummary",
    "REQUIRED_USER_FIELDS",
]
