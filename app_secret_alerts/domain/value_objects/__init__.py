"""Domain value objects - Immutable objects defined by their attributes."""

from .dispatch_mode import DispatchMode
from .evaluation_outcome import EvaluationOutcome
from .fetch_mode import FetchMode
from .lookahead_window import LookaheadWindow
from .notification_message import NotificationMessage

__all__ = [
    "DispatchMode",
    "EvaluationOutcome",
    "FetchMode",
    "LookaheadWindow",
    "NotificationMessage",
]
