"""URL encoding utilities for Mattermost API operations."""

from urllib.parse import quote


def secure_url_encode(value: str, context: str = "URL parameter") -> str:
    """URL encode a single path segment.

    Every reserved character, including ``/``, is percent-encoded so the
    value can never escape its path segment.

    Args:
        value: Value to encode
        context: Context description for error messages

    Returns:
        str: Encoded value

    Raises:
        ValueError: If value is empty or whitespace-only

    Example:
        >>> secure_url_encode("abc/../me", "user ID")
        'abc%2F..%2Fme'
    """
    if not value or not value.strip():
        raise ValueError(f"{context} cannot be empty")

    return quote(value, safe="")


def encode_user_id(user_id: str) -> str:
    """URL encode a Mattermost user ID.

    Args:
        user_id: Mattermost user ID to encode

    Returns:
        str: URL-encoded user ID

    Raises:
        ValueError: If user_id is empty
    """
    return secure_url_encode(user_id, "user ID")
