"""Domain entities - Objects with identity and lifecycle."""

from .alert import Alert
from .application import UNNAMED_APPLICATION, Application
from .credential import PasswordCredential
from .owner import Owner

__all__ = [
    "UNNAMED_APPLICATION",
    "Alert",
    "Application",
    "Owner",
    "PasswordCredential",
]
