"""Mattermost user lookup operations."""

from typing import Any

from ..core.exceptions import DirectoryServiceError, UserLookupError
from ..models.config import EndpointDescriptor
from ..models.user import ResolvedIdentity
from ..utils.display_utils import print_debug, print_warning
from ..utils.request_utils import get_json_response, make_request


def get_user_details(endpoint: EndpointDescriptor, user_id: str) -> ResolvedIdentity:
    """Fetch one user from Mattermost and decode the identity fields.

    Args:
        endpoint: Mattermost connection details
        user_id: The Mattermost user ID

    Returns:
        ResolvedIdentity: Decoded identity

    Raises:
        DirectoryServiceError: If the server cannot be reached, the body
            cannot be read, or the body is not JSON
        UserLookupError: If the JSON lacks any expected identity field
    """
    url = endpoint.user_url(user_id)
    print_debug(f"URL to call: {url}", user_id=user_id, api_endpoint=url)

    response = make_request("GET", url, endpoint.auth_headers())
    data = get_json_response(response)

    try:
        return ResolvedIdentity.from_api_data(data, user_id=user_id)
    except UserLookupError as e:
        raise UserLookupError(
            e.message,
            user_id=user_id,
            details=_with_status(e.details, response.status_code, data),
        ) from e


def _with_status(details: str | None, status_code: int, data: Any) -> str:
    parts = [details] if details else []
    parts.append(f"HTTP {status_code}")
    if isinstance(data, dict) and isinstance(data.get("message"), str):
        parts.append(data["message"])
    return "; ".join(parts)


def resolve_user(
    endpoint: EndpointDescriptor, user_id: str, want_full_name: bool = False
) -> tuple[str, bool]:
    """Translate a Mattermost user ID into a display value.

    Args:
        endpoint: Mattermost connection details
        user_id: The Mattermost user ID from the CSV
        want_full_name: Return "first last" instead of the username when
            the user has a name set

    Returns:
        tuple[str, bool]: (display value, True) on success, ("", False)
        when this user cannot be resolved

    Raises:
        DirectoryServiceError: If Mattermost itself is unreachable or
            returns something that is not JSON
    """
    if not user_id or not user_id.strip():
        print_warning("Empty user ID in record", operation="resolve_user")
        return "", False

    print_debug(
        f"Retrieving user data from Mattermost for user ID: {user_id}",
        user_id=user_id,
        operation="resolve_user",
    )

    try:
        identity = get_user_details(endpoint, user_id)
    except UserLookupError as e:
        print_warning(
            f"Error processing JSON response data for user ID {user_id}: {e.details}",
            user_id=user_id,
            operation="resolve_user",
        )
        return "", False

    print_debug(
        f"Username: {identity.username} Email: {identity.email} "
        f"Full Name: {identity.full_name}",
        user_id=user_id,
    )
    return identity.display_name(want_full_name), True


def check_connection(endpoint: EndpointDescriptor) -> dict[str, Any]:
    """Check that the server answers and accepts the token.

    Calls ``GET /api/v4/users/me``, which resolves the token's own user.

    Args:
        endpoint: Mattermost connection details

    Returns:
        Dict[str, Any]: Status information including ``success``,
        ``status_code``, ``username`` and ``details``
    """
    url = endpoint.get_api_url("users/me")
    result: dict[str, Any] = {
        "success": False,
        "base_url": endpoint.base_url,
        "status_code": None,
        "username": None,
        "details": "",
    }

    try:
        response = make_request("GET", url, endpoint.auth_headers())
        result["status_code"] = response.status_code
        data = get_json_response(response)
    except DirectoryServiceError as e:
        result["details"] = str(e)
        return result

    if response.status_code != 200:
        message = data.get("message") if isinstance(data, dict) else None
        result["details"] = message or f"Unexpected status code {response.status_code}"
        return result

    try:
        identity = ResolvedIdentity.from_api_data(data)
    except UserLookupError as e:
        result["details"] = str(e)
        return result

    result["success"] = True
    result["username"] = identity.username
    result["details"] = "Token accepted by Mattermost"
    return result
