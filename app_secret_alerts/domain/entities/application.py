"""Application entity representing an Entra ID app registration."""

from dataclasses import dataclass, field

from .credential import PasswordCredential
from .owner import Owner

UNNAMED_APPLICATION = "No Name"


@dataclass(slots=True)
class Application:
    """An Entra ID application registration with its secrets and owners."""

    id: str
    app_id: str | None = None
    display_name: str | None = None
    password_credentials: list[PasswordCredential] = field(default_factory=list)
    owners: list[Owner] = field(default_factory=list)

    @property
    def name(self) -> str:
        """Display label, or a placeholder for unnamed registrations."""
        return self.display_name or UNNAMED_APPLICATION

    def attach_owners(self, owners: list[Owner]) -> None:
        """Replace the owner list fetched separately from the application."""
        self.owners = list(owners)
