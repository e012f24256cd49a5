"""Port for application retrieval - driven/secondary port."""

from typing import Protocol

from ...domain.entities import Application


class ApplicationFetcher(Protocol):
    """
    Port for retrieving applications to evaluate.

    Implementations differ in how they select applications but all return
    records with their owners already attached.
    """

    async def fetch_applications(self) -> list[Application]:
        """
        Retrieve applications with owners attached.

        Returns:
            Applications in retrieval order.

        Raises:
            ApplicationFetchError: If retrieval fails.
        """
        ...
