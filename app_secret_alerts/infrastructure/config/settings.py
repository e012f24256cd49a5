"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from dotenv import load_dotenv

from ...domain.value_objects import DispatchMode, FetchMode, LookaheadWindow
from ..adapters.entra_id.auth import ClientCredentials
from ..adapters.entra_id.fetchers import parse_id_list
from ..adapters.entra_id.graph_client import GraphClientConfig
from ..adapters.notifications.graph_mail import GraphMailConfig
from ..adapters.notifications.smtp import SmtpConfig

MAIL_TRANSPORTS = ("graph", "smtp")


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    return int(os.environ.get(key, str(default)))


def _env_float(key: str, default: float) -> float:
    """Get float from environment variable."""
    return float(os.environ.get(key, str(default)))


def _env_str(key: str, default: str = "") -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass(frozen=True)
class Settings:
    """Application settings container, read once at startup."""

    # Azure/Entra ID
    azure_tenant_id: str = field(default_factory=lambda: _env_str("AZURE_TENANT_ID"))
    azure_client_id: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_ID"))
    azure_client_secret: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_SECRET"))
    graph_timeout: float = field(default_factory=lambda: _env_float("GRAPH_TIMEOUT", 30.0))

    # Fetching and evaluation
    fetch_mode: str = field(default_factory=lambda: _env_str("FETCH_MODE", "filtered"))
    application_ids_raw: str = field(default_factory=lambda: _env_str("APPLICATION"))
    lookahead_days: int = field(default_factory=lambda: _env_int("LOOKAHEAD_DAYS", 30))

    # Run configuration
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    dry_run: bool = field(default_factory=lambda: _env_bool("DRY_RUN"))

    # Mail settings
    dispatch_mode: str = field(default_factory=lambda: _env_str("DISPATCH_MODE", "digest"))
    mail_transport: str = field(default_factory=lambda: _env_str("MAIL_TRANSPORT", "graph"))
    mail_from: str = field(default_factory=lambda: _env_str("MAIL_FROM"))
    mail_to: str = field(default_factory=lambda: _env_str("MAIL_TO"))
    mail_save_to_sent: bool = field(default_factory=lambda: _env_bool("MAIL_SAVE_TO_SENT"))

    # SMTP settings
    smtp_server: str = field(default_factory=lambda: _env_str("SMTP_SERVER"))
    smtp_port: int = field(default_factory=lambda: _env_int("SMTP_PORT", 587))
    smtp_username: str = field(default_factory=lambda: _env_str("SMTP_USERNAME"))
    smtp_password: str = field(default_factory=lambda: _env_str("SMTP_PASSWORD"))
    smtp_use_tls: bool = field(default_factory=lambda: _env_bool("SMTP_USE_TLS", default=True))

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.azure_tenant_id:
            missing.append("AZURE_TENANT_ID")
        if not self.azure_client_id:
            missing.append("AZURE_CLIENT_ID")
        if not self.azure_client_secret:
            missing.append("AZURE_CLIENT_SECRET")
        if self.fetch_mode.lower() == FetchMode.BY_ID and not self.application_ids:
            missing.append("APPLICATION")
        if not self.dry_run:
            if not self.mail_from:
                missing.append("MAIL_FROM")
            if not self.mail_to:
                missing.append("MAIL_TO")
            if self.mail_transport.lower() == "smtp" and not self.smtp_server:
                missing.append("SMTP_SERVER")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ValueError(msg)

        if self.mail_transport.lower() not in MAIL_TRANSPORTS:
            msg = f"Invalid MAIL_TRANSPORT: {self.mail_transport} (use 'graph' or 'smtp')"
            raise ValueError(msg)

        # Raise ValueError on invalid values
        _ = self.fetch_strategy, self.dispatch_strategy, self.window

    @cached_property
    def application_ids(self) -> list[str]:
        """Application object IDs for explicit-ID fetching."""
        return parse_id_list(self.application_ids_raw)

    @cached_property
    def fetch_strategy(self) -> FetchMode:
        """Get the application fetch mode."""
        try:
            return FetchMode(self.fetch_mode.lower())
        except ValueError:
            msg = f"Invalid FETCH_MODE: {self.fetch_mode} (use 'by_id' or 'filtered')"
            raise ValueError(msg) from None

    @cached_property
    def dispatch_strategy(self) -> DispatchMode:
        """Get the notification dispatch mode."""
        try:
            return DispatchMode(self.dispatch_mode.lower())
        except ValueError:
            msg = f"Invalid DISPATCH_MODE: {self.dispatch_mode} (use 'digest' or 'per_application')"
            raise ValueError(msg) from None

    @cached_property
    def window(self) -> LookaheadWindow:
        """Get the lookahead window."""
        return LookaheadWindow(days=self.lookahead_days)

    @cached_property
    def client_credentials(self) -> ClientCredentials:
        """Get the app registration credentials used for Graph."""
        return ClientCredentials(
            tenant_id=self.azure_tenant_id,
            client_id=self.azure_client_id,
            client_secret=self.azure_client_secret,
        )

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(timeout=self.graph_timeout)

    @cached_property
    def graph_mail_config(self) -> GraphMailConfig:
        """Get Graph mail configuration."""
        return GraphMailConfig(
            from_address=self.mail_from,
            to_addresses=self.mail_to,
            save_to_sent_items=self.mail_save_to_sent,
            timeout=self.graph_timeout,
        )

    @cached_property
    def smtp_config(self) -> SmtpConfig:
        """Get SMTP configuration."""
        return SmtpConfig(
            server=self.smtp_server,
            port=self.smtp_port,
            username=self.smtp_username,
            password=self.smtp_password,
            from_address=self.mail_from,
            to_addresses=self.mail_to,
            use_tls=self.smtp_use_tls,
        )


def load_settings() -> Settings:
    """Load and validate settings from environment and an optional .env file."""
    load_dotenv()
    settings = Settings()
    settings.validate()
    return settings
