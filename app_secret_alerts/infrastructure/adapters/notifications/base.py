"""Base mail sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.value_objects import NotificationMessage


class BaseMailSender(ABC):
    """Abstract base class for mail senders."""

    def __init__(self) -> None:
        """Initialize the mail sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def send(self, message: NotificationMessage) -> None:
        """Send the given message."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    @staticmethod
    def split_addresses(addresses: str) -> list[str]:
        """Split a comma-separated address list, dropping blanks."""
        return [addr.strip() for addr in addresses.split(",") if addr.strip()]
