"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from app_secret_alerts.domain.entities import Application, Owner, PasswordCredential
from app_secret_alerts.domain.value_objects import LookaheadWindow

NOW = datetime(2026, 10, 1, 12, 0, tzinfo=UTC)


class StubTokenProvider:
    """Token provider returning a fixed token without contacting Entra ID."""

    def __init__(self, token: str = "test-token") -> None:
        self.token = token
        self.calls = 0

    async def acquire_token(self) -> str:
        self.calls += 1
        return self.token


@pytest.fixture
def now() -> datetime:
    """Fixed reference instant."""
    return NOW


@pytest.fixture
def default_window() -> LookaheadWindow:
    """Default 30 day lookahead window."""
    return LookaheadWindow(days=30)


@pytest.fixture
def token_provider() -> StubTokenProvider:
    """Stub Graph token provider."""
    return StubTokenProvider()


@pytest.fixture
def expiring_credential() -> PasswordCredential:
    """A secret expiring within five days."""
    return PasswordCredential(
        end_date_time=NOW + timedelta(days=5),
        key_id="key-expiring",
        hint="abc",
    )


@pytest.fixture
def expired_credential() -> PasswordCredential:
    """A secret that has already expired."""
    return PasswordCredential(
        end_date_time=NOW - timedelta(days=3),
        key_id="key-expired",
        hint="old",
    )


@pytest.fixture
def healthy_credential() -> PasswordCredential:
    """A secret not expiring soon."""
    return PasswordCredential(
        end_date_time=NOW + timedelta(days=200),
        key_id="key-healthy",
        hint="xyz",
    )


@pytest.fixture
def mail_owner() -> Owner:
    """An owner with a mail address."""
    return Owner(id="owner-1", display_name="Owner One", mail="owner@corp.com")


@pytest.fixture
def upn_owner() -> Owner:
    """An owner reachable only by user principal name."""
    return Owner(id="owner-2", display_name="Owner Two", user_principal_name="upn@corp.com")


@pytest.fixture
def silent_owner() -> Owner:
    """An owner without any contact field."""
    return Owner(id="owner-3", display_name="Service Account")


def make_application(
    name: str | None,
    credentials: list[PasswordCredential],
    owners: list[Owner] | None = None,
    object_id: str | None = None,
) -> Application:
    """Build an application with owners attached."""
    application = Application(
        id=object_id or f"obj-{name or 'unnamed'}",
        app_id=f"app-{name or 'unnamed'}",
        display_name=name,
        password_credentials=credentials,
    )
    if owners is not None:
        application.attach_owners(owners)
    return application
