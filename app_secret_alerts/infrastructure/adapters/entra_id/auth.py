"""
MSAL token acquisition for Microsoft Graph.

Directory reads and sendMail call Graph with the same app registration and
scope, so a single provider instance backs both and one token serves the run.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import ClassVar, Protocol

import msal


@dataclass(frozen=True, slots=True)
class ClientCredentials:
    """App registration credentials used for the client credentials flow."""

    tenant_id: str
    client_id: str
    client_secret: str


class TokenProvider(Protocol):
    """Source of bearer tokens for Graph requests."""

    async def acquire_token(self) -> str:
        """Return a valid access token."""
        ...


class MsalTokenProvider:
    """
    Acquire and cache Graph tokens with the client credentials flow.

    The token is reused until five minutes before it expires. The MSAL
    client is created lazily on first use.
    """

    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    SCOPE: ClassVar[list[str]] = ["https://graph.microsoft.com/.default"]

    def __init__(self, credentials: ClientCredentials) -> None:
        """Initialize the provider."""
        self._credentials = credentials
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._msal_app: msal.ConfidentialClientApplication | None = None

    def _get_msal_app(self) -> msal.ConfidentialClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            authority = f"{self.AUTHORITY_BASE}/{self._credentials.tenant_id}"
            self._msal_app = msal.ConfidentialClientApplication(
                client_id=self._credentials.client_id,
                client_credential=self._credentials.client_secret,
                authority=authority,
            )
        return self._msal_app

    async def acquire_token(self) -> str:
        """Acquire access token using client credentials flow."""
        if self._access_token and self._token_expiry and datetime.now(UTC) < self._token_expiry:
            return self._access_token

        app = self._get_msal_app()
        result = app.acquire_token_for_client(scopes=self.SCOPE)

        if "access_token" not in result:
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire access token: {error}"
            raise RuntimeError(msg)

        self._access_token = result["access_token"]
        expires_in = result.get("expires_in", 3600)
        # Refresh 5 minutes before expiry
        self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in - 300)

        return self._access_token
