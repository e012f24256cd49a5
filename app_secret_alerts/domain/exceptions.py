"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidRecordError(DomainError):
    """Raised when a directory record cannot form a valid entity."""
