"""Application use cases."""

from .check_expiring_secrets import CheckExpiringSecrets, CheckResult

__all__ = ["CheckExpiringSecrets", "CheckResult"]
