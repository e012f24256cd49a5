"""Password credential entity representing an application client secret."""

from dataclasses import dataclass
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class PasswordCredential:
    """A client secret registered on an application."""

    end_date_time: datetime
    key_id: str | None = None
    hint: str | None = None
    custom_key_identifier: str | None = None
    display_name: str | None = None

    def __post_init__(self) -> None:
        """Normalize the expiry instant to an aware UTC datetime."""
        if self.end_date_time.tzinfo is None:
            object.__setattr__(self, "end_date_time", self.end_date_time.replace(tzinfo=UTC))

    def expires_before(self, threshold: datetime) -> bool:
        """Check if the secret ends strictly before the given instant."""
        return self.end_date_time < threshold

    def describe(self) -> str:
        """Human-readable summary used in notification bodies."""
        return (
            f"Key ID: {self.key_id or 'unknown'}, "
            f"Hint: {self.hint or 'n/a'}, "
            f"Expires: {self.end_date_time.isoformat()}"
        )
