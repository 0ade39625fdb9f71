"""Request utilities for Mattermost HTTP operations."""

from typing import Any

import requests

from ..core.config import API_TIMEOUT
from ..core.exceptions import DirectoryServiceError

USER_AGENT = "mm-csv-parse/1.0 (Mattermost CSV user ID converter)"


def make_request(
    method: str, url: str, headers: dict[str, str], **kwargs: Any
) -> requests.Response:
    """Make a single HTTP request without retries.

    The response body is read before returning, so a connection dropped
    mid-body surfaces here rather than later.

    Args:
        method: HTTP method (GET, POST, etc.)
        url: Request URL
        headers: Request headers
        **kwargs: Additional request parameters

    Returns:
        requests.Response: Response with its body loaded; any status code

    Raises:
        DirectoryServiceError: If the request cannot be sent or the body
            cannot be read
    """
    request_headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    request_headers.update(headers)

    try:
        response = requests.request(
            method, url, headers=request_headers, timeout=API_TIMEOUT, **kwargs
        )
        _ = response.content
    except requests.exceptions.RequestException as e:
        raise DirectoryServiceError(
            "Failed to query Mattermost",
            endpoint=url,
            details=str(e),
        ) from e

    return response


def get_json_response(response: requests.Response) -> Any:
    """Decode a response body as JSON.

    Args:
        response: HTTP response

    Returns:
        Any: Decoded JSON value (object, list, string, ...)

    Raises:
        DirectoryServiceError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        raise DirectoryServiceError(
            "Unable to decode Mattermost response as JSON",
            status_code=response.status_code,
            endpoint=response.url,
            details=str(e),
        ) from e
