"""Scan application credentials for upcoming expirations."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from ..entities import Application, ExpiringApplication
from ..value_objects import DEFAULT_SCHEDULE, WarningSchedule
from .expiry_classifier import days_to_expire

logger = logging.getLogger(__name__)


def scan_application(
    app: Application,
    now: datetime,
    schedule: WarningSchedule = DEFAULT_SCHEDULE,
) -> list[ExpiringApplication]:
    """
    Find the credentials of one application that are due for a warning.

    Key credentials are scanned before password credentials, each list in
    directory order.
    """
    if not app.has_credentials:
        return []

    expiring: list[ExpiringApplication] = []
    for credential in app.credentials:
        days = days_to_expire(now, credential.expires_at, schedule)
        if days < 0:
            continue

        logger.debug(
            "%s credential %s of %s expires in %d days",
            credential.kind,
            credential.key_id,
            app.display_name,
            days,
        )
        expiring.append(
            ExpiringApplication(
                id=app.id,
                display_name=app.display_name,
                key_id=credential.key_id,
                key_type=credential.key_type_label,
                days_to_expire=days,
                end_date_time=credential.end_date_time or "",
            )
        )
    return expiring


def scan_all(
    apps: Iterable[Application],
    now: datetime,
    schedule: WarningSchedule = DEFAULT_SCHEDULE,
) -> list[ExpiringApplication]:
    """Scan every application, keeping input order."""
    expiring: list[ExpiringApplication] = []
    for app in apps:
        expiring.extend(scan_application(app, now, schedule))
    return expiring
