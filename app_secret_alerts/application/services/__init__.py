"""Application services."""

from .alert_dispatcher import AlertDispatcher

__all__ = ["AlertDispatcher"]
