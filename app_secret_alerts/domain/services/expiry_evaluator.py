"""Domain service for evaluating application secrets against a lookahead window."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ..entities import Alert
from ..value_objects import EvaluationOutcome, LookaheadWindow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from ..entities import Application

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ApplicationEvaluation:
    """Outcome of evaluating one application, with its alert if any."""

    outcome: EvaluationOutcome
    alert: Alert | None = None


class ExpiryEvaluator:
    """
    Domain service deciding which applications warrant an alert.

    An application qualifies only when it has at least one secret ending
    before ``now + window`` and at least one owner with a contact address.
    Secrets that already expired satisfy the same test and are reported
    alongside those expiring soon.
    """

    def __init__(self, window: LookaheadWindow) -> None:
        """Initialize evaluator with the lookahead window."""
        self._window = window

    @property
    def window(self) -> LookaheadWindow:
        """Lookahead window used for evaluation."""
        return self._window

    def evaluate(
        self,
        applications: Iterable[Application],
        now: datetime | None = None,
    ) -> list[Alert]:
        """
        Evaluate applications and build alerts in input order.

        Args:
            applications: Applications with owners already attached.
            now: Reference instant, defaults to the current UTC time.

        Returns:
            One alert per qualifying application.
        """
        now = now or datetime.now(UTC)
        alerts: list[Alert] = []

        for application in applications:
            evaluation = self.evaluate_application(application, now)
            if evaluation.outcome.produces_alert and evaluation.alert is not None:
                alerts.append(evaluation.alert)

        return alerts

    def evaluate_application(self, application: Application, now: datetime) -> ApplicationEvaluation:
        """Evaluate a single application at the given instant."""
        if now.tzinfo is None:
            now = now.replace(tzinfo=UTC)

        if not application.password_credentials:
            logger.info("Application %s has no password credentials", application.name)
            return ApplicationEvaluation(EvaluationOutcome.NO_CREDENTIALS)

        threshold = self._window.threshold(now)
        descriptions = tuple(
            credential.describe()
            for credential in application.password_credentials
            if credential.expires_before(threshold)
        )

        if not descriptions:
            logger.info(
                "Application %s has no secrets expiring within %d days",
                application.name,
                self._window.days,
            )
            return ApplicationEvaluation(EvaluationOutcome.NONE_EXPIRING)

        contacts: list[str] = []
        for owner in application.owners:
            if owner.contact is None:
                logger.info(
                    "Owner %s of %s has no contact info",
                    owner.display_name or owner.id,
                    application.name,
                )
                continue
            contacts.append(owner.contact)

        if not contacts:
            logger.info(
                "Application %s has %d expiring secret(s) but no contactable owners",
                application.name,
                len(descriptions),
            )
            return ApplicationEvaluation(EvaluationOutcome.NO_CONTACTABLE_OWNERS)

        logger.info(
            "Application %s has %d expiring secret(s), owners: %s",
            application.name,
            len(descriptions),
            ", ".join(contacts),
        )
        alert = Alert(
            application_id=application.id,
            application_name=application.name,
            owner_contacts=tuple(contacts),
            expiring_credential_descriptions=descriptions,
        )
        return ApplicationEvaluation(EvaluationOutcome.ALERTED, alert)
