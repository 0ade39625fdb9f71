"""User and run result models for the Mattermost CSV converter."""

from dataclasses import dataclass, field
from typing import Any

from ..core.exceptions import UserLookupError

REQUIRED_USER_FIELDS = ("username", "email", "first_name", "last_name")


@dataclass
class ResolvedIdentity:
    """Identity fields decoded from a Mattermost user response."""

    username: str
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_api_data(cls, data: Any, user_id: str | None = None) -> "ResolvedIdentity":
        """Create a ResolvedIdentity from a decoded API response body.

        Args:
            data: Decoded JSON body of ``GET /api/v4/users/{id}``
            user_id: The requested user ID, for error context

        Returns:
            ResolvedIdentity: Identity with all four fields populated

        Raises:
            UserLookupError: If the body is not an object or any required
                field is absent or not a string
        """
        if not isinstance(data, dict):
            raise UserLookupError(
                "Unexpected response shape",
                user_id=user_id,
                details=f"Expected a JSON object, got {type(data).__name__}",
            )

        missing = [
            name for name in REQUIRED_USER_FIELDS if not isinstance(data.get(name), str)
        ]
        if missing:
            raise UserLookupError(
                "Response is missing user fields",
                user_id=user_id,
                details=", ".join(missing),
            )

        return cls(
            username=data["username"],
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
        )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def display_name(self, want_full_name: bool = False) -> str:
        """Pick the value written back into the CSV.

        Args:
            want_full_name: Prefer "first last" over the username

        Returns:
            str: Full name when requested and non-blank, otherwise username
        """
        if want_full_name and self.full_name.strip():
            return self.full_name
        return self.username


@dataclass
class RunSummary:
    """Results of one conversion run."""

    input_file: str
    output_file: str | None = None
    rows_read: int = 0
    rows_written: int = 0
    rows_skipped: int = 0
    skipped_user_ids: list[str] = field(default_factory=list)
    success: bool = False

    def record_written(self) -> None:
        self.rows_read += 1
        self.rows_written += 1

    def record_skipped(self, user_id: str) -> None:
        self.rows_read += 1
        self.rows_skipped += 1
        self.skipped_user_ids.append(user_id)

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the run.

        Returns:
            Dict[str, Any]: Summary data
        """
        return {
            "input_file": self.input_file,
            "output_file": self.output_file or "<stdout>",
            "rows_read": self.rows_read,
            "rows_written": self.rows_written,
            "rows_skipped": self.rows_skipped,
            "success": self.success,
        }
