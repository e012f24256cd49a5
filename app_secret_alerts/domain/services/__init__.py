"""Domain services - Stateless operations on domain objects."""

from .alert_renderer import AlertRenderer
from .expiry_evaluator import ApplicationEvaluation, ExpiryEvaluator

__all__ = ["AlertRenderer", "ApplicationEvaluation", "ExpiryEvaluator"]
