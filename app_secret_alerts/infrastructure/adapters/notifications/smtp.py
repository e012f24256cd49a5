"""Mail sender using SMTP."""

from __future__ import annotations

import smtplib
from dataclasses import dataclass
from email.mime.text import MIMEText
from typing import TYPE_CHECKING

from ....application.exceptions import NotificationError
from .base import BaseMailSender

if TYPE_CHECKING:
    from ....domain.value_objects import NotificationMessage


@dataclass(frozen=True, slots=True)
class SmtpConfig:
    """SMTP mail configuration."""

    server: str = ""
    port: int = 587
    username: str = ""
    password: str = ""
    from_address: str = ""
    to_addresses: str = ""  # Comma-separated
    use_tls: bool = True


class SmtpMailSender(BaseMailSender):
    """Send messages through an SMTP relay."""

    def __init__(self, config: SmtpConfig) -> None:
        """Initialize the SMTP sender."""
        super().__init__()
        self._config = config

    def is_configured(self) -> bool:
        """Check if SMTP is properly configured."""
        return (
            bool(self._config.server)
            and bool(self._config.from_address)
            and bool(self.split_addresses(self._config.to_addresses))
        )

    async def send(self, message: NotificationMessage) -> None:
        """Send a plain-text message."""
        recipients = self.split_addresses(self._config.to_addresses)
        try:
            with smtplib.SMTP(self._config.server, self._config.port) as server:
                if self._config.use_tls:
                    server.starttls()
                if self._config.username and self._config.password:
                    server.login(self._config.username, self._config.password)
                server.sendmail(
                    self._config.from_address, recipients, self.build_message(message).as_string()
                )
        except (smtplib.SMTPException, OSError) as e:
            msg = f"Failed to send email: {e}"
            self._logger.exception(msg)
            raise NotificationError(msg) from e

        self._logger.info("Email sent to %s", self._config.to_addresses)

    def build_message(self, message: NotificationMessage) -> MIMEText:
        """Build the MIME message."""
        mime = MIMEText(message.body, "plain")
        mime["Subject"] = message.subject
        mime["From"] = self._config.from_address
        mime["To"] = ", ".join(self.split_addresses(self._config.to_addresses))
        return mime
