"""Application settings loaded from environment variables."""

import os
from dataclasses import dataclass, field
from functools import cached_property

from croniter import croniter

from ...application.exceptions import ConfigurationError
from ...domain.exceptions import InvalidScheduleError
from ...domain.value_objects import DEFAULT_WARNING_DAYS, WarningSchedule
from ..adapters.entra_id.graph_client import GraphClientConfig
from ..adapters.notifications.teams import TeamsConfig

DEFAULT_SCHEDULE_DAYS = ",".join(str(d) for d in DEFAULT_WARNING_DAYS)


def _env_bool(key: str, default: bool = False) -> bool:
    """Get boolean from environment variable."""
    return os.environ.get(key, str(default)).lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Get integer from environment variable."""
    raw = os.environ.get(key, str(default))
    try:
        return int(raw)
    except ValueError as e:
        msg = f"{key} must be an integer, got {raw!r}"
        raise ConfigurationError(msg) from e


def _env_str(key: str, default: str = "", *fallbacks: str) -> str:
    """Get string from the first environment variable that is set."""
    for name in (key, *fallbacks):
        value = os.environ.get(name)
        if value:
            return value
    return default


@dataclass
class Settings:
    """Application settings container."""

    # Azure/Entra ID (unprefixed names are accepted for existing deployments)
    azure_tenant_id: str = field(default_factory=lambda: _env_str("AZURE_TENANT_ID", "", "TENANT_ID"))
    azure_client_id: str = field(default_factory=lambda: _env_str("AZURE_CLIENT_ID", "", "CLIENT_ID"))
    azure_client_secret: str = field(
        default_factory=lambda: _env_str("AZURE_CLIENT_SECRET", "", "CLIENT_SECRET")
    )

    # Warning schedule
    warning_schedule_days: str = field(
        default_factory=lambda: _env_str("WARNING_SCHEDULE_DAYS", DEFAULT_SCHEDULE_DAYS)
    )

    # Run configuration
    run_mode: str = field(default_factory=lambda: _env_str("RUN_MODE", "once"))
    cron_schedule: str = field(default_factory=lambda: _env_str("CRON_SCHEDULE", "0 8 * * *"))
    past_due_tolerance_seconds: int = field(
        default_factory=lambda: _env_int("PAST_DUE_TOLERANCE_SECONDS", 60)
    )
    log_level: str = field(default_factory=lambda: _env_str("LOG_LEVEL", "INFO"))
    dry_run: bool = field(default_factory=lambda: _env_bool("DRY_RUN"))
    http_timeout_seconds: int = field(default_factory=lambda: _env_int("HTTP_TIMEOUT_SECONDS", 30))

    # Teams settings
    teams_webhook_url: str = field(
        default_factory=lambda: _env_str("TEAMS_WEBHOOK_URL", "", "TEAMS_WEBHOOK")
    )
    teams_enabled: bool = field(
        default_factory=lambda: _env_bool(
            "TEAMS_ENABLED",
            default=bool(_env_str("TEAMS_WEBHOOK_URL", "", "TEAMS_WEBHOOK")),
        )
    )

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.azure_tenant_id:
            missing.append("AZURE_TENANT_ID")
        if not self.azure_client_id:
            missing.append("AZURE_CLIENT_ID")
        if not self.azure_client_secret:
            missing.append("AZURE_CLIENT_SECRET")

        if missing:
            msg = f"Missing required environment variables: {', '.join(missing)}"
            raise ConfigurationError(msg)

        if not croniter.is_valid(self.cron_schedule):
            msg = f"CRON_SCHEDULE is not a valid cron expression: {self.cron_schedule!r}"
            raise ConfigurationError(msg)

        # Parse eagerly so a bad schedule fails at start-up
        _ = self.schedule

    @cached_property
    def schedule(self) -> WarningSchedule:
        """Get the warning schedule."""
        try:
            return WarningSchedule.parse(self.warning_schedule_days)
        except InvalidScheduleError as e:
            raise ConfigurationError(f"WARNING_SCHEDULE_DAYS: {e}") from e

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(
            tenant_id=self.azure_tenant_id,
            client_id=self.azure_client_id,
            client_secret=self.azure_client_secret,
            timeout=float(self.http_timeout_seconds),
        )

    @cached_property
    def teams_config(self) -> TeamsConfig:
        """Get Teams configuration."""
        return TeamsConfig(
            enabled=self.teams_enabled,
            webhook_url=self.teams_webhook_url,
            timeout=float(self.http_timeout_seconds),
        )


def load_settings() -> Settings:
    """Load and validate settings from environment."""
    settings = Settings()
    settings.validate()
    return settings
