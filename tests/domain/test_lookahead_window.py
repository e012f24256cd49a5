"""Tests for LookaheadWindow value object."""

from __future__ import annotations

from datetime import timedelta

import pytest

from app_secret_alerts.domain.value_objects import LookaheadWindow
from tests.conftest import NOW


class TestLookaheadWindow:
    """Tests for LookaheadWindow value object."""

    def test_default_window(self) -> None:
        """Default window should be 30 days."""
        assert LookaheadWindow().days == 30

    def test_threshold_is_now_plus_window(self) -> None:
        """Threshold should be the reference instant plus the window."""
        window = LookaheadWindow(days=14)
        assert window.duration == timedelta(days=14)
        assert window.threshold(NOW) == NOW + timedelta(days=14)

    def test_zero_window_invalid(self) -> None:
        """Window cannot be zero."""
        with pytest.raises(ValueError, match="Lookahead window must be positive"):
            LookaheadWindow(days=0)

    def test_negative_window_invalid(self) -> None:
        """Window cannot be negative."""
        with pytest.raises(ValueError, match="Lookahead window must be positive"):
            LookaheadWindow(days=-5)

    def test_window_is_frozen(self) -> None:
        """Window should be immutable."""
        window = LookaheadWindow()
        with pytest.raises(AttributeError):
            window.days = 10  # type: ignore[misc]
