"""Use case for checking and reporting expiring credentials."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime

from ...domain.entities import ExpiringApplication
from ...domain.services import scan_all
from ...domain.value_objects import DEFAULT_SCHEDULE, WarningSchedule
from ..exceptions import DirectoryFetchError
from ..ports import ApplicationRepository, NotificationSender

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TimerInfo:
    """What the scheduler knows about the invocation that triggered a run."""

    is_past_due: bool = False
    scheduled_for: datetime | None = None


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Result of the credential check use case."""

    checked_at: datetime
    applications_scanned: int = 0
    expiring: list[ExpiringApplication] = field(default_factory=list)
    notifications_sent: int = 0
    notifications_failed: int = 0
    dry_run: bool = False
    error: str | None = None

    @property
    def success(self) -> bool:
        """Check if the operation was successful."""
        return self.error is None and self.notifications_failed == 0

    def get_summary(self) -> str:
        """Generate a human-readable summary of the run."""
        if self.error is not None:
            return f"Check failed: {self.error}"
        if not self.expiring:
            return f"No credentials due for a warning across {self.applications_scanned} applications"
        return (
            f"{len(self.expiring)} credentials due for a warning across "
            f"{self.applications_scanned} applications"
        )


class CheckExpiringCredentials:
    """
    Use case for checking expiring credentials and sending notifications.

    This is the main application service that orchestrates the domain
    logic and infrastructure adapters: fetch applications, scan them
    against the warning schedule and notify once per due credential.
    """

    def __init__(
        self,
        application_repository: ApplicationRepository,
        notification_senders: list[NotificationSender],
        schedule: WarningSchedule = DEFAULT_SCHEDULE,
        *,
        dry_run: bool = False,
    ) -> None:
        """
        Initialize the use case.

        Args:
            application_repository: Adapter for reading the directory.
            notification_senders: List of notification adapters.
            schedule: Day offsets on which warnings are due.
            dry_run: If True, don't actually send notifications.
        """
        self._repository = application_repository
        self._senders = [s for s in notification_senders if s.is_configured()]
        self._schedule = schedule
        self._dry_run = dry_run

    async def execute(
        self,
        timer: TimerInfo | None = None,
        *,
        now: datetime | None = None,
    ) -> CheckResult:
        """
        Execute the credential check use case.

        Args:
            timer: Trigger information from the scheduler, if any.
            now: Reference time for the scan, defaults to the current time.

        Returns:
            CheckResult with the due credentials and notification counts.
        """
        if timer is not None and timer.is_past_due:
            logger.warning("Timer function is running late! (scheduled for %s)", timer.scheduled_for)

        now = now or datetime.now(UTC)
        logger.info("Starting credential expiration check...")

        try:
            applications = await self._repository.fetch_applications()
        except DirectoryFetchError as e:
            logger.error("Credential check aborted: %s", e)
            return CheckResult(checked_at=now, dry_run=self._dry_run, error=str(e))

        logger.info("Retrieved %d applications", len(applications))

        expiring = scan_all(applications, now, self._schedule)

        sent = 0
        failed = 0

        if not expiring:
            logger.info("No credentials require notification")
        elif self._dry_run:
            logger.info("DRY RUN: Would send notifications for %d credentials", len(expiring))
            self._log_dry_run(expiring)
        elif not self._senders:
            logger.warning("No notification senders configured")
        else:
            sent, failed = await self._send_notifications(expiring)

        result = CheckResult(
            checked_at=now,
            applications_scanned=len(applications),
            expiring=expiring,
            notifications_sent=sent,
            notifications_failed=failed,
            dry_run=self._dry_run,
        )
        logger.info("Check complete: %s", result.get_summary())
        return result

    async def _send_notifications(self, expiring: list[ExpiringApplication]) -> tuple[int, int]:
        """Fire every notification concurrently; each delivery is independent."""
        outcomes = await asyncio.gather(
            *(
                self._notify(sender, item)
                for item in expiring
                for sender in self._senders
            )
        )
        sent = sum(1 for ok in outcomes if ok)
        return sent, len(outcomes) - sent

    async def _notify(self, sender: NotificationSender, item: ExpiringApplication) -> bool:
        """Deliver one notification, never letting a failure escape."""
        name = sender.__class__.__name__
        try:
            if await sender.notify(item):
                logger.info("Notification for %s (%s) sent via %s", item.display_name, item.key_id, name)
                return True
            logger.warning("Notification for %s (%s) failed via %s", item.display_name, item.key_id, name)
        except Exception:
            logger.exception("Error sending notification via %s", name)
        return False

    def _log_dry_run(self, expiring: list[ExpiringApplication]) -> None:
        """Log due credentials in dry run mode."""
        for item in expiring:
            logger.info(
                "  %s (%s): %s %s expires in %d days at %s",
                item.display_name,
                item.id,
                item.key_type,
                item.key_id,
                item.days_to_expire,
                item.end_date_time,
            )
