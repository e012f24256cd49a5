"""Microsoft Graph API client for Entra ID."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

import httpx

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Mapping

    from .auth import TokenProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    timeout: float = 30.0
    base_url: str = "https://graph.microsoft.com/v1.0"


class GraphClient:
    """
    Async client for Microsoft Graph API.

    Handles authentication headers and paginated requests. Requests run
    one at a time; HTTP errors propagate as ``httpx.HTTPError``.
    """

    APPLICATION_FIELDS: ClassVar[list[str]] = ["id", "appId", "displayName", "passwordCredentials"]
    OWNER_FIELDS: ClassVar[list[str]] = ["id", "displayName", "mail", "userPrincipalName"]

    def __init__(
        self,
        config: GraphClientConfig,
        token_provider: TokenProvider,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Graph client."""
        self._config = config
        self._token_provider = token_provider
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport)

    def _url(self, path: str) -> str:
        # Handle both relative and absolute URLs
        return path if path.startswith("http") else f"{self._config.base_url}{path}"

    async def _headers(self, extra: Mapping[str, str] | None = None) -> dict[str, str]:
        token = await self._token_provider.acquire_token()
        headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    async def get_json(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Issue a single GET request and decode the JSON body.

        Args:
            path: API path relative to the Graph base URL, or an absolute URL.
            params: Query string parameters.
            headers: Extra request headers.

        Returns:
            Decoded response body.
        """
        async with self._client() as client:
            response = await client.get(
                self._url(path), params=params, headers=await self._headers(headers)
            )
            response.raise_for_status()
            return response.json()

    async def iter_pages(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> AsyncGenerator[list[Any], None]:
        """
        Yield the ``value`` list of each page of a collection endpoint.

        The first request carries ``params``; following ``@odata.nextLink``
        URLs already embed the query, so they are requested as-is.
        """
        url: str | None = path
        query: Mapping[str, str] | None = params

        async with self._client() as client:
            while url:
                response = await client.get(
                    self._url(url), params=query, headers=await self._headers(headers)
                )
                response.raise_for_status()
                data = response.json()

                yield data.get("value", [])
                url = data.get("@odata.nextLink")
                query = None

    async def list_collection(
        self,
        path: str,
        params: Mapping[str, str] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> list[Any]:
        """Retrieve all items across the pages of a collection endpoint."""
        results: list[Any] = []
        async for page in self.iter_pages(path, params, headers):
            results.extend(page)
        return results

    async def get_application(self, object_id: str) -> Any:
        """Retrieve one application registration by object ID."""
        logger.debug("Fetching application %s", object_id)
        return await self.get_json(
            f"/applications/{object_id}",
            params={"$select": ",".join(self.APPLICATION_FIELDS)},
        )

    async def list_application_owners(self, object_id: str) -> list[Any]:
        """Retrieve the owners of one application registration."""
        logger.debug("Fetching owners of application %s", object_id)
        return await self.list_collection(
            f"/applications/{object_id}/owners",
            params={"$select": ",".join(self.OWNER_FIELDS)},
        )

    def iter_owned_application_pages(self) -> AsyncGenerator[list[Any], None]:
        """Yield pages of applications that have at least one owner."""
        logger.info("Fetching owned application registrations from Entra ID...")
        return self.iter_pages(
            "/applications",
            params={
                "$filter": "owners/$count ne 0",
                "$count": "true",
                "$select": ",".join(self.APPLICATION_FIELDS),
            },
            # Required by Graph for $count based filters
            headers={"ConsistencyLevel": "eventual"},
        )
