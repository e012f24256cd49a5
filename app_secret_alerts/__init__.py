"""Entra ID App Secret Alerts - expiring client secret notifications."""

__version__ = "1.0.0"
