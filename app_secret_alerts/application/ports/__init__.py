"""Application ports - Interfaces for external adapters."""

from .application_fetcher import ApplicationFetcher
from .mail_sender import MailSender

__all__ = [
    "ApplicationFetcher",
    "MailSender",
]
