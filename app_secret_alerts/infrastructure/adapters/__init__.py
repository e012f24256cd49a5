"""Infrastructure adapters - Implementations of application ports."""

from .entra_id import ApplicationIdFetcher, FilteredApplicationFetcher
from .notifications import GraphMailSender, SmtpMailSender

__all__ = [
    "ApplicationIdFetcher",
    "FilteredApplicationFetcher",
    "GraphMailSender",
    "SmtpMailSender",
]
