"""Mail sender adapter implementations."""

from .base import BaseMailSender
from .graph_mail import GraphMailConfig, GraphMailSender
from .smtp import SmtpConfig, SmtpMailSender

__all__ = [
    "BaseMailSender",
    "GraphMailConfig",
    "GraphMailSender",
    "SmtpConfig",
    "SmtpMailSender",
]
