"""Tests for data models."""

import dataclasses

import pytest

from mmcsvparse.core.exceptions import UserLookupError
from mmcsvparse.models.config import EndpointDescriptor, RunConfig
from mmcsvparse.models.user import ResolvedIdentity, RunSummary


class TestEndpointDescriptor:
    """Test EndpointDescriptor model."""

    def test_base_url(self, endpoint):
        """Test the server root URL includes scheme, host and port."""
        assert endpoint.base_url == "https://chat.example.com:8065"

    def test_user_url(self, endpoint):
        """Test the user resource URL."""
        assert (
            endpoint.user_url("abc123")
            == "https://chat.example.com:8065/api/v4/users/abc123"
        )

    def test_user_url_encodes_identifier(self, endpoint):
        """Test that path characters in an ID cannot escape the segment."""
        assert endpoint.user_url("a/../me").endswith("/api/v4/users/a%2F..%2Fme")

    def test_get_api_url_strips_leading_slash(self, endpoint):
        """Test API URL construction with a leading slash."""
        assert endpoint.get_api_url("/users/me") == endpoint.get_api_url("users/me")
        assert endpoint.get_api_url() == "https://chat.example.com:8065/api/v4"

    def test_auth_headers(self, endpoint):
        """Test the bearer token header."""
        assert endpoint.auth_headers() == {"Authorization": "Bearer secret-token"}

    def test_to_dict_redacts_token(self, endpoint):
        """Test that the token never appears in the dictionary form."""
        data = endpoint.to_dict()
        assert data["token"] == "***REDACTED***"
        assert "secret-token" not in str(data)

    def test_is_immutable(self, endpoint):
        """Test that the endpoint cannot be changed after construction."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            endpoint.host = "other.example.com"


class TestRunConfig:
    """Test RunConfig model."""

    def test_defaults(self, endpoint):
        """Test that fullname and debug default to off."""
        config = RunConfig(
            endpoint=endpoint, input_file="in.csv", output_file="out.csv", column="id"
        )
        assert config.fullname is False
        assert config.debug is False

    def test_to_dict_redacts_token(self, endpoint):
        """Test nested redaction."""
        config = RunConfig(
            endpoint=endpoint, input_file="in.csv", output_file="out.csv", column="id"
        )
        assert "secret-token" not in str(config.to_dict())
        assert config.to_dict()["column"] == "id"


class TestResolvedIdentity:
    """Test ResolvedIdentity decoding and name selection."""

    def test_from_api_data(self, user_payload):
        """Test decoding a complete user object."""
        identity = ResolvedIdentity.from_api_data(user_payload)
        assert identity.username == "alice"
        assert identity.email == "alice@example.com"
        assert identity.first_name == "Alice"
        assert identity.last_name == "Liddell"

    @pytest.mark.parametrize("field", ["username", "email", "first_name", "last_name"])
    def test_missing_field_raises(self, user_payload, field):
        """Test that every identity field is required."""
        del user_payload[field]
        with pytest.raises(UserLookupError) as exc_info:
            ResolvedIdentity.from_api_data(user_payload, user_id="u1")
        assert field in str(exc_info.value)
        assert exc_info.value.user_id == "u1"

    def test_non_string_field_raises(self, user_payload):
        """Test that a field with the wrong JSON type counts as missing."""
        user_payload["email"] = None
        with pytest.raises(UserLookupError):
            ResolvedIdentity.from_api_data(user_payload)

    def test_non_object_body_raises(self):
        """Test that a JSON list is not an identity."""
        with pytest.raises(UserLookupError) as exc_info:
            ResolvedIdentity.from_api_data([{"username": "alice"}])
        assert "list" in str(exc_info.value)

    def test_empty_strings_are_accepted(self):
        """Test that present-but-empty names are valid."""
        identity = ResolvedIdentity.from_api_data(
            {"username": "bob", "email": "", "first_name": "", "last_name": ""}
        )
        assert identity.username == "bob"

    def test_display_name_username_mode(self, user_payload):
        """Test that username mode always returns the username."""
        identity = ResolvedIdentity.from_api_data(user_payload)
        assert identity.display_name(False) == "alice"

    def test_display_name_full_name_mode(self, user_payload):
        """Test that full name mode joins first and last name."""
        identity = ResolvedIdentity.from_api_data(user_payload)
        assert identity.display_name(True) == "Alice Liddell"

    def test_display_name_falls_back_to_username(self):
        """Test fallback when both names are empty."""
        identity = ResolvedIdentity("alice", "a@example.com", "", "")
        assert identity.display_name(True) == "alice"

    def test_display_name_whitespace_names_fall_back(self):
        """Test fallback when names are whitespace only."""
        identity = ResolvedIdentity("alice", "a@example.com", " ", "  ")
        assert identity.display_name(True) == "alice"

    def test_display_name_keeps_partial_name(self):
        """Test that a single name part is still used."""
        identity = ResolvedIdentity("alice", "a@example.com", "Alice", "")
        assert identity.display_name(True) == "Alice "


class TestRunSummary:
    """Test RunSummary counters."""

    def test_counters(self):
        """Test written and skipped bookkeeping."""
        summary = RunSummary(input_file="in.csv")
        summary.record_written()
        summary.record_written()
        summary.record_skipped("bad")

        assert summary.rows_read == 3
        assert summary.rows_written == 2
        assert summary.rows_skipped == 1
        assert summary.skipped_user_ids == ["bad"]

    def test_get_summary_stdout(self):
        """Test that a missing output path is shown as stdout."""
        summary = RunSummary(input_file="in.csv")
        assert summary.get_summary()["output_file"] == "<stdout>"
        assert summary.get_summary()["success"] is False
