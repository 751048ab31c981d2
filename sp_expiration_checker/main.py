#!/usr/bin/env python3
"""
Service Principal Expiration Checker

Composition root and entry point. Builds the Entra ID repository and the
Teams sender from settings, then checks credentials once or on a cron
schedule.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from croniter import croniter

from .application.exceptions import ConfigurationError
from .application.use_cases import CheckExpiringCredentials, TimerInfo
from .infrastructure.adapters import EntraIdApplicationRepository, TeamsNotificationSender
from .infrastructure.config import Settings, load_settings

if TYPE_CHECKING:
    from .application.use_cases import CheckResult

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(UTC)


def build_check(settings: Settings) -> CheckExpiringCredentials:
    """Wire the credential check to the Entra ID directory and Teams."""
    teams = TeamsNotificationSender(settings.teams_config)
    if not teams.is_configured():
        logger.warning("Teams webhook is not configured, due credentials will not be posted")

    return CheckExpiringCredentials(
        application_repository=EntraIdApplicationRepository(settings.graph_config),
        notification_senders=[teams],
        schedule=settings.schedule,
        dry_run=settings.dry_run,
    )


def timer_for(scheduled_for: datetime, woke_at: datetime, tolerance: timedelta) -> TimerInfo:
    """Describe a cron invocation; it is past due when it woke later than ``tolerance``."""
    return TimerInfo(is_past_due=woke_at - scheduled_for > tolerance, scheduled_for=scheduled_for)


class Application:
    """Runs the credential check in the configured mode."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def run_once(self, timer: TimerInfo | None = None) -> CheckResult:
        """Execute a single credential check."""
        return await build_check(self._settings).execute(timer)

    async def run_scheduled(self) -> None:
        """Check at start-up, then at every time matched by ``CRON_SCHEDULE``."""
        tolerance = timedelta(seconds=self._settings.past_due_tolerance_seconds)
        logger.info("Starting scheduled mode with cron: %s", self._settings.cron_schedule)

        logger.info("Running initial check on startup...")
        await self.run_once()

        cron = croniter(self._settings.cron_schedule, utcnow())
        while True:
            scheduled_for = cron.get_next(datetime)
            if scheduled_for.tzinfo is None:
                scheduled_for = scheduled_for.replace(tzinfo=UTC)

            delay = (scheduled_for - utcnow()).total_seconds()
            if delay > 0:
                logger.info("Next check scheduled for %s", scheduled_for.isoformat())
                await asyncio.sleep(delay)

            await self.run_once(timer_for(scheduled_for, utcnow(), tolerance))

    async def run(self) -> int:
        """
        Run the application based on configured mode.

        Returns:
            Exit code (0 for success, 1 for failure).
        """
        match self._settings.run_mode.lower():
            case "once":
                logger.info("Running in single-execution mode")
                result = await self.run_once()
                return 0 if result.success else 1

            case "scheduled":
                await self.run_scheduled()
                return 0

            case _:
                logger.error("Invalid RUN_MODE: %s (use 'once' or 'scheduled')", self._settings.run_mode)
                return 1


async def async_main() -> int:
    """Async entry point."""
    try:
        logger.info("Service Principal Expiration Checker starting...")

        settings = load_settings()
        logging.getLogger().setLevel(settings.log_level.upper())

        return await Application(settings).run()

    except ConfigurationError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        return 0
    except Exception:
        logger.exception("Unexpected error")
        return 1


def main() -> None:
    """Main entry point."""
    sys.exit(asyncio.run(async_main()))


if __name__ == "__main__":
    main()
