"""Dispatch mode value object."""

from enum import StrEnum, auto


class DispatchMode(StrEnum):
    """Granularity of outbound notifications."""

    DIGEST = auto()
    PER_APPLICATION = auto()

    def __str__(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        match self:
            case DispatchMode.DIGEST:
                return "Digest"
            case DispatchMode.PER_APPLICATION:
                return "Per Application"
