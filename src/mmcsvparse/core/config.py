"""Configuration utilities for Mattermost API access."""

import os

import dotenv

# Defaults used when neither the command line nor the environment supply a value
DEFAULT_PORT = "8065"
DEFAULT_SCHEME = "http"

# Request timeout in seconds; None leaves the transport default in place
API_TIMEOUT: float | None = None

ENV_URL = "MM_URL"
ENV_PORT = "MM_PORT"
ENV_SCHEME = "MM_SCHEME"
ENV_TOKEN = "MM_TOKEN"
ENV_DEBUG = "MM_DEBUG"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def check_env_file() -> None:
    """Check if .env file exists and load it."""
    env_path = ".env"
    if os.path.exists(env_path):
        dotenv.load_dotenv(env_path)


def parse_bool(value: str | bool | None, default: bool = False) -> bool:
    """Interpret an environment-style boolean value.

    Args:
        value: Raw value such as "true", "1" or "no"
        default: Value returned when nothing was supplied

    Returns:
        bool: Parsed flag
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    stripped = value.strip().lower()
    if not stripped:
        return default
    return stripped in _TRUE_VALUES


def get_env_config() -> dict[str, str | bool]:
    """Get Mattermost connection settings from environment variables.

    A ``.env`` file in the working directory is loaded first. Missing port
    and scheme fall back to their defaults; missing URL and token are
    returned as empty strings and left for validation.

    Returns:
        Dict[str, str | bool]: Keys ``url``, ``port``, ``scheme``, ``token``
        and ``debug``
    """
    check_env_file()

    return {
        "url": os.getenv(ENV_URL, ""),
        "port": os.getenv(ENV_PORT) or DEFAULT_PORT,
        "scheme": os.getenv(ENV_SCHEME) or DEFAULT_SCHEME,
        "token": os.getenv(ENV_TOKEN, ""),
        "debug": parse_bool(os.getenv(ENV_DEBUG)),
    }
