"""Evaluation outcome value object."""

from enum import StrEnum, auto


class EvaluationOutcome(StrEnum):
    """Result of evaluating a single application."""

    NO_CREDENTIALS = auto()
    NONE_EXPIRING = auto()
    NO_CONTACTABLE_OWNERS = auto()
    ALERTED = auto()

    @property
    def produces_alert(self) -> bool:
        """Check if this outcome yields an alert."""
        return self is EvaluationOutcome.ALERTED

    def __str__(self) -> str:
        return self.value
