"""Tests for AlertRenderer domain service."""

from __future__ import annotations

import pytest

from app_secret_alerts.domain.entities import Alert
from app_secret_alerts.domain.services import AlertRenderer
from app_secret_alerts.domain.value_objects import DispatchMode


@pytest.fixture
def alerts() -> list[Alert]:
    """Two alerts for different applications."""
    return [
        Alert(
            application_id="obj-foo",
            application_name="Foo",
            owner_contacts=("a@corp.com", "b@corp.com"),
            expiring_credential_descriptions=("foo secret 1", "foo secret 2"),
        ),
        Alert(
            application_id="obj-bar",
            application_name="Bar",
            owner_contacts=("c@corp.com",),
            expiring_credential_descriptions=("bar secret",),
        ),
    ]


class TestAlertRenderer:
    """Tests for AlertRenderer."""

    def test_default_mode_is_digest(self) -> None:
        """Digest should be the default mode."""
        assert AlertRenderer().mode is DispatchMode.DIGEST

    @pytest.mark.parametrize("mode", list(DispatchMode))
    def test_no_alerts_render_no_messages(self, mode: DispatchMode) -> None:
        """Nothing is rendered for an empty run."""
        assert AlertRenderer(mode).render([]) == []

    def test_digest_flattens_all_alerts(self, alerts: list[Alert]) -> None:
        """Digest joins names and contacts with commas and descriptions with newlines."""
        messages = AlertRenderer(DispatchMode.DIGEST).render(alerts)

        assert len(messages) == 1
        message = messages[0]
        assert "2 application(s)" in message.subject
        assert message.body == (
            "Applications: Foo, Bar\n"
            "Owners: a@corp.com, b@corp.com, c@corp.com\n"
            "\n"
            "Expiring secrets:\n"
            "foo secret 1\n"
            "foo secret 2\n"
            "bar secret"
        )

    def test_per_application_renders_one_message_each(self, alerts: list[Alert]) -> None:
        """Per-application mode renders one message per alert in order."""
        messages = AlertRenderer(DispatchMode.PER_APPLICATION).render(alerts)

        assert [m.subject for m in messages] == [
            "Entra ID Secrets Alert - Foo",
            "Entra ID Secrets Alert - Bar",
        ]
        assert messages[0].body == (
            "Application: Foo\n\nExpiring secrets:\nfoo secret 1\nfoo secret 2"
        )
        assert "bar secret" in messages[1].body
        assert "foo secret" not in messages[1].body
