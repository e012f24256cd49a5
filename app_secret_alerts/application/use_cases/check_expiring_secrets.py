"""Use case for checking and reporting expiring application secrets."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from ...domain.entities import Alert
from ...domain.services import ExpiryEvaluator
from ..ports import ApplicationFetcher
from ..services import AlertDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the secret check use case."""

    applications_checked: int
    alerts: list[Alert]
    messages_sent: int
    dry_run: bool

    @property
    def alert_count(self) -> int:
        """Number of applications that qualified for notification."""
        return len(self.alerts)


class CheckExpiringSecrets:
    """
    Use case for checking expiring secrets and notifying about them.

    Fetches every application first, evaluates them, then dispatches the
    resulting alerts. Any error from fetching or dispatching propagates.
    """

    def __init__(
        self,
        fetcher: ApplicationFetcher,
        evaluator: ExpiryEvaluator,
        dispatcher: AlertDispatcher,
        *,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            fetcher: Adapter retrieving applications with owners attached.
            evaluator: Domain service producing alerts.
            dispatcher: Service rendering and sending alerts.
            dry_run: Reported on the result; the dispatcher honours it.
        """
        self._fetcher = fetcher
        self._evaluator = evaluator
        self._dispatcher = dispatcher
        self._dry_run = dry_run

    async def execute(self, now: datetime | None = None) -> CheckResult:
        """
        Execute the secret check use case.

        Args:
            now: Reference instant, defaults to the current UTC time.

        Returns:
            CheckResult with the alerts and dispatch count.
        """
        now = now or datetime.now(UTC)
        logger.info(
            "Starting secret expiration check (window: %d days)...",
            self._evaluator.window.days,
        )

        applications = await self._fetcher.fetch_applications()
        logger.info("Retrieved %d applications", len(applications))

        alerts = self._evaluator.evaluate(applications, now)
        logger.info("Evaluation complete: %d application(s) require notification", len(alerts))

        sent = await self._dispatcher.dispatch(alerts)

        return CheckResult(
            applications_checked=len(applications),
            alerts=alerts,
            messages_sent=sent,
            dry_run=self._dry_run,
        )
