"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base exception for application errors."""


class ApplicationFetchError(ApplicationError):
    """Raised when applications or their owners cannot be retrieved."""


class NotificationError(ApplicationError):
    """Raised when notification sending fails."""
