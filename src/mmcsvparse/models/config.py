"""Configuration data models for the Mattermost CSV converter."""

from dataclasses import dataclass
from typing import Any

from ..utils.url_utils import encode_user_id

SUPPORTED_SCHEMES = ("http", "https")


@dataclass(frozen=True)
class EndpointDescriptor:
    """Connection details for one Mattermost server.

    Built once from validated configuration and never changed during a run.
    """

    scheme: str
    host: str
    port: str
    token: str

    @property
    def base_url(self) -> str:
        """Server root URL, e.g. ``https://chat.example.com:443``."""
        return f"{self.scheme}://{self.host}:{self.port}"

    def get_api_url(self, endpoint: str = "") -> str:
        """Get the REST API v4 URL for this server.

        Args:
            endpoint: API endpoint to append (optional)

        Returns:
            str: API URL
        """
        base_api_url = f"{self.base_url}/api/v4"
        if endpoint:
            endpoint = endpoint.lstrip("/")
            return f"{base_api_url}/{endpoint}"
        return base_api_url

    def user_url(self, user_id: str) -> str:
        """URL of the user resource for ``user_id``."""
        return self.get_api_url(f"users/{encode_user_id(user_id)}")

    def auth_headers(self) -> dict[str, str]:
        """Headers carrying the bearer token."""
        return {"Authorization": f"Bearer {self.token}"}

    def to_dict(self) -> dict[str, Any]:
        """Convert endpoint to dictionary format with the token redacted.

        Returns:
            Dict[str, Any]: Endpoint as dictionary
        """
        return {
            "scheme": self.scheme,
            "host": self.host,
            "port": self.port,
            "token": "***REDACTED***",
            "base_url": self.base_url,
        }


@dataclass(frozen=True)
class RunConfig:
    """Everything a single conversion run needs."""

    endpoint: EndpointDescriptor
    input_file: str
    output_file: str
    column: str
    fullname: bool = False
    debug: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary format.

        Returns:
            Dict[str, Any]: Configuration as dictionary
        """
        return {
            "endpoint": self.endpoint.to_dict(),
            "input_file": self.input_file,
            "output_file": self.output_file,
            "column": self.column,
            "fullname": self.fullname,
            "debug": self.debug,
        }
