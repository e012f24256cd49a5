"""Lookahead window value object."""

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class LookaheadWindow:
    """Duration ahead of now within which an expiring secret is reported (in days)."""

    days: int = 30

    def __post_init__(self) -> None:
        """Validate the window is a positive number of days."""
        if self.days <= 0:
            msg = f"Lookahead window must be positive, got {self.days} days"
            raise ValueError(msg)

    @property
    def duration(self) -> timedelta:
        """Window length as a timedelta."""
        return timedelta(days=self.days)

    def threshold(self, now: datetime) -> datetime:
        """Instant before which a secret counts as expiring."""
        return now + self.duration
