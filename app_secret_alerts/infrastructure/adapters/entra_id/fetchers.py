"""Application fetchers retrieving Entra ID app registrations with owners."""

from __future__ import annotations

import logging
from contextlib import aclosing
from typing import TYPE_CHECKING

import httpx

from ....application.exceptions import ApplicationFetchError
from .mapping import ParseFailure, parse_application, parse_owners

if TYPE_CHECKING:
    from ....domain.entities import Application
    from .graph_client import GraphClient

logger = logging.getLogger(__name__)


def parse_id_list(raw: str) -> list[str]:
    """Split a comma-separated ID list, trimming entries and dropping blanks."""
    return [part.strip() for part in raw.split(",") if part.strip()]


class ApplicationIdFetcher:
    """
    Fetch an explicit list of applications by object ID.

    Implements the ApplicationFetcher port. IDs are caller-vetted, so any
    failure for a single ID aborts the whole fetch.
    """

    def __init__(self, client: GraphClient, application_ids: list[str]) -> None:
        """
        Initialize the fetcher.

        Args:
            client: Graph API client.
            application_ids: Object IDs in the order results should follow.
        """
        self._client = client
        self._application_ids = list(application_ids)

    async def fetch_applications(self) -> list[Application]:
        """
        Retrieve each configured application and attach its owners.

        Raises:
            ApplicationFetchError: If any request or record mapping fails.
        """
        logger.info("Found %d application IDs", len(self._application_ids))
        applications: list[Application] = []

        for object_id in self._application_ids:
            try:
                raw_app = await self._client.get_application(object_id)
                raw_owners = await self._client.list_application_owners(object_id)
            except httpx.HTTPError as e:
                msg = f"Failed to retrieve application {object_id}: {e}"
                logger.exception(msg)
                raise ApplicationFetchError(msg) from e

            app_result = parse_application(raw_app)
            if isinstance(app_result, ParseFailure):
                msg = f"Malformed application {object_id}: {app_result.reason}"
                raise ApplicationFetchError(msg)

            owners_result = parse_owners(raw_owners)
            if isinstance(owners_result, ParseFailure):
                msg = f"Malformed owners of application {object_id}: {owners_result.reason}"
                raise ApplicationFetchError(msg)

            application = app_result.value
            application.attach_owners(owners_result.value)
            applications.append(application)

        return applications


class FilteredApplicationFetcher:
    """
    Fetch every application with at least one owner via a filtered query.

    Implements the ApplicationFetcher port. Server data is treated as
    noisy: a malformed application or owner list drops only that
    application. Request errors still abort the fetch.
    """

    def __init__(self, client: GraphClient) -> None:
        """Initialize the fetcher."""
        self._client = client

    async def fetch_applications(self) -> list[Application]:
        """
        Retrieve all owned applications page by page and attach owners.

        Raises:
            ApplicationFetchError: If a request fails.
        """
        applications: list[Application] = []
        skipped = 0

        try:
            async with aclosing(self._client.iter_owned_application_pages()) as pages:
                async for page in pages:
                    for raw_app in page:
                        application = await self._hydrate(raw_app)
                        if application is None:
                            skipped += 1
                        else:
                            applications.append(application)
        except httpx.HTTPError as e:
            msg = f"Failed to retrieve applications from Entra ID: {e}"
            logger.exception(msg)
            raise ApplicationFetchError(msg) from e

        logger.info(
            "Retrieved %d owned application registrations (%d skipped)",
            len(applications),
            skipped,
        )
        return applications

    async def _hydrate(self, raw_app: object) -> Application | None:
        """Map one raw record and attach its owners, or None to skip it."""
        app_result = parse_application(raw_app)
        if isinstance(app_result, ParseFailure):
            logger.warning("Skipping malformed application %s", app_result)
            return None

        application = app_result.value
        raw_owners = await self._client.list_application_owners(application.id)
        owners_result = parse_owners(raw_owners)
        if isinstance(owners_result, ParseFailure):
            logger.warning(
                "Skipping application %s with malformed owners: %s",
                application.name,
                owners_result.reason,
            )
            return None

        application.attach_owners(owners_result.value)
        return application
