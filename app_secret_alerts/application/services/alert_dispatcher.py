"""Application service dispatching alerts through a mail sender."""

import logging

from ...domain.entities import Alert
from ...domain.services import AlertRenderer
from ..exceptions import NotificationError
from ..ports import MailSender

logger = logging.getLogger(__name__)


class AlertDispatcher:
    """Render alerts and hand each resulting message to the mail sender."""

    def __init__(
        self,
        sender: MailSender,
        renderer: AlertRenderer,
        *,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the dispatcher.

        Args:
            sender: Adapter delivering messages.
            renderer: Renderer selecting digest or per-application messages.
            dry_run: If True, log messages instead of sending them.
        """
        self._sender = sender
        self._renderer = renderer
        self._dry_run = dry_run

    async def dispatch(self, alerts: list[Alert]) -> int:
        """
        Render and send alerts.

        Returns:
            Number of messages sent, or that would have been sent in dry run.

        Raises:
            NotificationError: If the sender is unconfigured or a send fails.
        """
        messages = self._renderer.render(alerts)
        if not messages:
            logger.info("No alerts to dispatch")
            return 0

        if self._dry_run:
            logger.info(
                "DRY RUN: Would send %d %s message(s)",
                len(messages),
                self._renderer.mode.display_name.lower(),
            )
            for message in messages:
                logger.info("  Subject: %s", message.subject)
                for line in message.body.splitlines():
                    logger.info("    %s", line)
            return len(messages)

        if not self._sender.is_configured():
            msg = f"{self._sender.__class__.__name__} is not configured"
            raise NotificationError(msg)

        for message in messages:
            await self._sender.send(message)
            logger.info("Notification sent via %s: %s", self._sender.__class__.__name__, message.subject)

        return len(messages)
