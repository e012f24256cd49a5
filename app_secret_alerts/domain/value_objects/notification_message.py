"""Notification message value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class NotificationMessage:
    """A rendered plain-text notification ready to be mailed."""

    subject: str
    body: str
