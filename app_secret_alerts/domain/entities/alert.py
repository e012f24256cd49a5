"""Alert produced for an application with expiring secrets."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Alert:
    """Expiring secrets of one application paired with its owner contacts."""

    application_id: str
    application_name: str
    owner_contacts: tuple[str, ...]
    expiring_credential_descriptions: tuple[str, ...]
