import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from mmcsvparse.models.config import EndpointDescriptor, RunConfig

ENV_VARS = (
    "MM_URL",
    "MM_PORT",
    "MM_SCHEME",
    "MM_TOKEN",
    "MM_DEBUG",
    "MM_LOG_LEVEL",
    "MM_LOG_FILE",
    "MM_LOG_FORMAT",
    "MM_LOG_DISABLE_COLORS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove Mattermost settings so the developer's shell cannot leak in."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers bound to streams that only lived for one test."""
    yield
    logger = logging.getLogger("mmcsvparse")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def endpoint():
    """A Mattermost endpoint pointing at a host that is never contacted."""
    return EndpointDescriptor(
        scheme="https", host="chat.example.com", port="8065", token="secret-token"
    )


@pytest.fixture
def make_config(endpoint, tmp_path):
    """Factory for RunConfig objects rooted in the test's tmp_path."""

    def _make(
        input_file="input.csv",
        output_file="output.csv",
        column="id",
        fullname=False,
        debug=False,
    ):
        return RunConfig(
            endpoint=endpoint,
            input_file=str(tmp_path / input_file),
            output_file=str(tmp_path / output_file),
            column=column,
            fullname=fullname,
            debug=debug,
        )

    return _make


@pytest.fixture
def write_csv(tmp_path):
    """Write raw CSV text into tmp_path and return the path as a string."""

    def _write(content, name="input.csv", encoding="utf-8"):
        path = tmp_path / name
        path.write_text(content, encoding=encoding)
        return str(path)

    return _write


@pytest.fixture
def user_payload():
    """A complete Mattermost user object."""
    return {
        "id": "u1",
        "username": "alice",
        "email": "alice@example.com",
        "first_name": "Alice",
        "last_name": "Liddell",
        "nickname": "",
        "roles": "system_user",
    }


@pytest.fixture
def mock_response():
    """Create a mock response object for requests."""
    response = MagicMock()
    response.status_code = 200
    response.url = "https://chat.example.com:8065/api/v4/users/u1"
    response.content = b"{}"
    response.json = MagicMock()
    return response


@pytest.fixture
def mock_requests(mock_response):
    """Patch the requests module used for every Mattermost call."""
    with patch("mmcsvparse.utils.request_utils.requests") as mock:
        # Keep the real exception classes so except clauses still match
        mock.exceptions = requests.exceptions
        mock.request.return_value = mock_response
        yield mock
