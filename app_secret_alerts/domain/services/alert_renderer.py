"""Domain service rendering alerts into notification messages."""

from ..entities import Alert
from ..value_objects import DispatchMode, NotificationMessage

SUBJECT_PREFIX = "Entra ID Secrets Alert"


class AlertRenderer:
    """Render alerts as digest or per-application plain-text messages."""

    def __init__(self, mode: DispatchMode = DispatchMode.DIGEST) -> None:
        """Initialize renderer with the dispatch mode."""
        self._mode = mode

    @property
    def mode(self) -> DispatchMode:
        """Configured dispatch mode."""
        return self._mode

    def render(self, alerts: list[Alert]) -> list[NotificationMessage]:
        """Render alerts into zero or more messages."""
        if not alerts:
            return []

        match self._mode:
            case DispatchMode.DIGEST:
                return [self.render_digest(alerts)]
            case DispatchMode.PER_APPLICATION:
                return [self.render_application(alert) for alert in alerts]

    @staticmethod
    def render_digest(alerts: list[Alert]) -> NotificationMessage:
        """Flatten every alert of a run into one summary message."""
        names = ", ".join(alert.application_name for alert in alerts)
        contacts = ", ".join(
            contact for alert in alerts for contact in alert.owner_contacts
        )
        descriptions = "\n".join(
            description
            for alert in alerts
            for description in alert.expiring_credential_descriptions
        )

        body = "\n".join([
            f"Applications: {names}",
            f"Owners: {contacts}",
            "",
            "Expiring secrets:",
            descriptions,
        ])
        subject = f"{SUBJECT_PREFIX} - {len(alerts)} application(s) with expiring secrets"
        return NotificationMessage(subject=subject, body=body)

    @staticmethod
    def render_application(alert: Alert) -> NotificationMessage:
        """Render a message for a single application."""
        body = "\n".join([
            f"Application: {alert.application_name}",
            "",
            "Expiring secrets:",
            *alert.expiring_credential_descriptions,
        ])
        subject = f"{SUBJECT_PREFIX} - {alert.application_name}"
        return NotificationMessage(subject=subject, body=body)
