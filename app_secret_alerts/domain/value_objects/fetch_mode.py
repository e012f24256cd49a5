"""Fetch mode value object."""

from enum import StrEnum, auto


class FetchMode(StrEnum):
    """Strategy used to retrieve applications from Entra ID."""

    BY_ID = auto()
    FILTERED = auto()

    def __str__(self) -> str:
        return self.value
