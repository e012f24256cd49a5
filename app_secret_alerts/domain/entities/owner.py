"""Owner entity representing a directory principal responsible for an app."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Owner:
    """An owner of an application registration."""

    id: str
    display_name: str | None = None
    mail: str | None = None
    user_principal_name: str | None = None

    @property
    def contact(self) -> str | None:
        """Address to reach this owner, preferring mail over the login name."""
        return self.mail or self.user_principal_name or None

    @property
    def is_contactable(self) -> bool:
        """Check if the owner has any usable contact address."""
        return self.contact is not None
