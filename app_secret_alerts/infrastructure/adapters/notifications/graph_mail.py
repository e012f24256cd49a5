"""Mail sender using the Microsoft Graph sendMail API."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from ....application.exceptions import NotificationError
from .base import BaseMailSender

if TYPE_CHECKING:
    from ....domain.value_objects import NotificationMessage
    from ..entra_id.auth import TokenProvider


@dataclass(frozen=True, slots=True)
class GraphMailConfig:
    """Microsoft Graph mail configuration."""

    from_address: str = ""  # Sender mailbox (app needs Mail.Send permission)
    to_addresses: str = ""  # Comma-separated recipients
    save_to_sent_items: bool = False
    timeout: float = 30.0


class GraphMailSender(BaseMailSender):
    """Send messages as a mailbox user via Microsoft Graph."""

    GRAPH_BASE_URL = "https://graph.microsoft.com/v1.0"

    def __init__(
        self,
        config: GraphMailConfig,
        token_provider: TokenProvider,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Graph mail sender."""
        super().__init__()
        self._config = config
        self._token_provider = token_provider
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if Graph mail is properly configured."""
        return bool(self._config.from_address) and bool(
            self.split_addresses(self._config.to_addresses)
        )

    async def send(self, message: NotificationMessage) -> None:
        """Send a plain-text message via Graph API."""
        try:
            token = await self._token_provider.acquire_token()
            url = f"{self.GRAPH_BASE_URL}/users/{self._config.from_address}/sendMail"
            headers = {
                "Authorization": f"Bearer {token}",
                "Content-Type": "application/json",
            }

            async with httpx.AsyncClient(
                timeout=self._config.timeout, transport=self._transport
            ) as client:
                response = await client.post(url, headers=headers, json=self.build_payload(message))
                response.raise_for_status()

        except httpx.HTTPError as e:
            msg = f"Failed to send Graph mail: {e}"
            self._logger.exception(msg)
            raise NotificationError(msg) from e

        self._logger.info("Graph mail sent to %s", self._config.to_addresses)

    def build_payload(self, message: NotificationMessage) -> dict[str, Any]:
        """Build the Graph API sendMail payload."""
        recipients = [
            {"emailAddress": {"address": addr}}
            for addr in self.split_addresses(self._config.to_addresses)
        ]

        return {
            "message": {
                "subject": message.subject,
                "body": {
                    "contentType": "Text",
                    "content": message.body,
                },
                "toRecipients": recipients,
            },
            "saveToSentItems": self._config.save_to_sent_items,
        }
