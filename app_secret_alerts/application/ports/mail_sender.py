"""Port for mail sending - driven/secondary port."""

from typing import Protocol

from ...domain.value_objects import NotificationMessage


class MailSender(Protocol):
    """
    Port for delivering rendered notification messages.

    Sender and recipients are fixed by the adapter configuration.
    """

    async def send(self, message: NotificationMessage) -> None:
        """
        Send a single message.

        Args:
            message: The rendered message to deliver.

        Raises:
            NotificationError: If sending fails.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this sender is properly configured.

        Returns:
            True if the sender is ready to send messages.
        """
        ...
