#!/usr/bin/env python3
"""
Entra ID App Secret Alerts

Composition root and application entry point.
Wires together all layers following hexagonal architecture principles.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

from . import __version__
from .application.services import AlertDispatcher
from .application.use_cases import CheckExpiringSecrets
from .domain.services import AlertRenderer, ExpiryEvaluator
from .domain.value_objects import FetchMode
from .infrastructure.adapters.entra_id import (
    ApplicationIdFetcher,
    FilteredApplicationFetcher,
    GraphClient,
    MsalTokenProvider,
)
from .infrastructure.adapters.notifications import GraphMailSender, SmtpMailSender
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.ports import ApplicationFetcher, MailSender
    from .application.use_cases import CheckResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


class ApplicationContainer:
    """
    Dependency injection container.

    Responsible for creating and wiring all application components.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize container with settings."""
        self._settings = settings
        self._token_provider = MsalTokenProvider(settings.client_credentials)

    def create_graph_client(self) -> GraphClient:
        """Create the Graph API client."""
        return GraphClient(self._settings.graph_config, self._token_provider)

    def create_application_fetcher(self) -> ApplicationFetcher:
        """Create the fetcher for the configured fetch mode."""
        client = self.create_graph_client()
        match self._settings.fetch_strategy:
            case FetchMode.BY_ID:
                return ApplicationIdFetcher(client, self._settings.application_ids)
            case FetchMode.FILTERED:
                return FilteredApplicationFetcher(client)

    def create_mail_sender(self) -> MailSender:
        """Create the mail sender for the configured transport."""
        if self._settings.mail_transport.lower() == "smtp":
            return SmtpMailSender(self._settings.smtp_config)
        return GraphMailSender(self._settings.graph_mail_config, self._token_provider)

    def create_dispatcher(self) -> AlertDispatcher:
        """Create the alert dispatcher."""
        sender = self.create_mail_sender()
        logger.info(
            "Dispatching %s notifications via %s",
            self._settings.dispatch_strategy.display_name.lower(),
            sender.__class__.__name__,
        )
        return AlertDispatcher(
            sender,
            AlertRenderer(self._settings.dispatch_strategy),
            dry_run=self._settings.dry_run,
        )

    def create_check_use_case(self) -> CheckExpiringSecrets:
        """Create the main use case with all dependencies."""
        return CheckExpiringSecrets(
            fetcher=self.create_application_fetcher(),
            evaluator=ExpiryEvaluator(self._settings.window),
            dispatcher=self.create_dispatcher(),
            dry_run=self._settings.dry_run,
        )


class Application:
    """
    Main application orchestrator.

    Runs a single check pass and reports the outcome.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize application with settings."""
        self._settings = settings
        self._container = ApplicationContainer(settings)

    async def run_once(self) -> CheckResult:
        """Execute a single secret check."""
        use_case = self._container.create_check_use_case()
        return await use_case.execute()

    async def run(self) -> int:
        """
        Run one check pass.

        Returns:
            Exit code (0 for success).
        """
        logger.info(
            "Running single check (fetch mode: %s, dry run: %s)",
            self._settings.fetch_strategy,
            self._settings.dry_run,
        )
        result = await self.run_once()
        logger.info(
            "Check complete: %d applications checked, %d alerts, %d messages sent",
            result.applications_checked,
            result.alert_count,
            result.messages_sent,
        )
        return 0


async def async_main() -> int:
    """Async entry point."""
    logger.info("Entra ID App Secret Alerts %s starting...", __version__)

    try:
        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 1

    try:
        app = Application(settings)
        return await app.run()

    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    exit_code = asyncio.run(async_main())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
