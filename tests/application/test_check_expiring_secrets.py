"""Tests for the secret check use case and alert dispatcher."""

from __future__ import annotations

import logging

import pytest

from app_secret_alerts.application.exceptions import ApplicationFetchError, NotificationError
from app_secret_alerts.application.services import AlertDispatcher
from app_secret_alerts.application.use_cases import CheckExpiringSecrets
from app_secret_alerts.domain.entities import Alert, Application, Owner, PasswordCredential
from app_secret_alerts.domain.services import AlertRenderer, ExpiryEvaluator
from app_secret_alerts.domain.value_objects import DispatchMode, LookaheadWindow, NotificationMessage
from tests.conftest import NOW, make_application


class FakeFetcher:
    """Fetcher returning canned applications."""

    def __init__(self, applications: list[Application], error: Exception | None = None) -> None:
        self._applications = applications
        self._error = error

    async def fetch_applications(self) -> list[Application]:
        if self._error:
            raise self._error
        return self._applications


class RecordingSender:
    """Mail sender recording messages."""

    def __init__(self, *, configured: bool = True, fail: bool = False) -> None:
        self.messages: list[NotificationMessage] = []
        self._configured = configured
        self._fail = fail

    async def send(self, message: NotificationMessage) -> None:
        if self._fail:
            raise NotificationError("mailbox unavailable")
        self.messages.append(message)

    def is_configured(self) -> bool:
        return self._configured


@pytest.fixture
def alert() -> Alert:
    """A single alert."""
    return Alert(
        application_id="obj-foo",
        application_name="Foo",
        owner_contacts=("owner@corp.com",),
        expiring_credential_descriptions=("secret",),
    )


class TestAlertDispatcher:
    """Tests for AlertDispatcher."""

    @pytest.mark.asyncio
    async def test_sends_rendered_messages(self, alert: Alert) -> None:
        """Every rendered message is sent in order."""
        sender = RecordingSender()
        dispatcher = AlertDispatcher(sender, AlertRenderer(DispatchMode.PER_APPLICATION))

        sent = await dispatcher.dispatch([alert, alert])

        assert sent == 2
        assert len(sender.messages) == 2

    @pytest.mark.asyncio
    async def test_nothing_sent_without_alerts(self) -> None:
        """No alerts means no messages."""
        sender = RecordingSender(configured=False)

        assert await AlertDispatcher(sender, AlertRenderer()).dispatch([]) == 0
        assert sender.messages == []

    @pytest.mark.asyncio
    async def test_dry_run_logs_instead_of_sending(
        self, alert: Alert, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Dry run logs the message and does not send."""
        sender = RecordingSender(configured=False)
        dispatcher = AlertDispatcher(sender, AlertRenderer(), dry_run=True)

        with caplog.at_level(logging.INFO):
            sent = await dispatcher.dispatch([alert])

        assert sent == 1
        assert sender.messages == []
        assert "DRY RUN: Would send 1 digest message(s)" in caplog.text
        assert "Applications: Foo" in caplog.text

    @pytest.mark.asyncio
    async def test_unconfigured_sender_raises(self, alert: Alert) -> None:
        """Sending through an unconfigured sender is an error."""
        dispatcher = AlertDispatcher(RecordingSender(configured=False), AlertRenderer())

        with pytest.raises(NotificationError, match="not configured"):
            await dispatcher.dispatch([alert])

    @pytest.mark.asyncio
    async def test_send_failure_propagates(self, alert: Alert) -> None:
        """Send failures are not retried or swallowed."""
        dispatcher = AlertDispatcher(RecordingSender(fail=True), AlertRenderer())

        with pytest.raises(NotificationError):
            await dispatcher.dispatch([alert])


class TestCheckExpiringSecrets:
    """Tests for CheckExpiringSecrets use case."""

    @pytest.mark.asyncio
    async def test_end_to_end_digest(
        self,
        expiring_credential: PasswordCredential,
        healthy_credential: PasswordCredential,
        mail_owner: Owner,
    ) -> None:
        """Only qualifying applications reach the digest."""
        applications = [
            make_application("Foo", [expiring_credential], [mail_owner]),
            make_application("Bar", [expiring_credential], []),
            make_application("Baz", [expiring_credential, healthy_credential], [mail_owner]),
            make_application("Empty", [], [mail_owner]),
        ]
        sender = RecordingSender()
        use_case = CheckExpiringSecrets(
            fetcher=FakeFetcher(applications),
            evaluator=ExpiryEvaluator(LookaheadWindow(days=30)),
            dispatcher=AlertDispatcher(sender, AlertRenderer(DispatchMode.DIGEST)),
        )

        result = await use_case.execute(NOW)

        assert result.applications_checked == 4
        assert [a.application_name for a in result.alerts] == ["Foo", "Baz"]
        assert result.alert_count == 2
        assert result.messages_sent == 1
        assert result.dry_run is False
        body = sender.messages[0].body
        assert body.startswith("Applications: Foo, Baz\nOwners: owner@corp.com, owner@corp.com")
        assert body.count(expiring_credential.describe()) == 2
        assert healthy_credential.describe() not in body

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self) -> None:
        """Fetch errors abort the run before dispatching."""
        sender = RecordingSender()
        use_case = CheckExpiringSecrets(
            fetcher=FakeFetcher([], error=ApplicationFetchError("boom")),
            evaluator=ExpiryEvaluator(LookaheadWindow()),
            dispatcher=AlertDispatcher(sender, AlertRenderer()),
        )

        with pytest.raises(ApplicationFetchError):
            await use_case.execute(NOW)
        assert sender.messages == []
