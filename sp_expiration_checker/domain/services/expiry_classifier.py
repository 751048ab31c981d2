"""Decide whether a credential expiry falls on the warning schedule."""

from datetime import UTC, date, datetime

from ..value_objects import DEFAULT_SCHEDULE, WarningSchedule

NOT_DUE = -1


def truncate_to_day(value: datetime) -> date:
    """UTC calendar day of ``value``; naive datetimes are taken as UTC."""
    aware = value if value.tzinfo else value.replace(tzinfo=UTC)
    return aware.astimezone(UTC).date()


def days_to_expire(
    now: datetime,
    expiry: datetime | None,
    schedule: WarningSchedule = DEFAULT_SCHEDULE,
) -> int:
    """
    Whole days until ``expiry`` when that count is on the warning schedule.

    Time of day is ignored on both sides. Returns -1 when there is no
    expiry, when it is already past, or when the day count is not on
    the schedule.

    Args:
        now: Reference point of the current run.
        expiry: Credential end date, or None when the directory has none.
        schedule: Day offsets on which a warning is due.

    Returns:
        The matching day offset, or -1.
    """
    if expiry is None:
        return NOT_DUE

    delta = (truncate_to_day(expiry) - truncate_to_day(now)).days
    return schedule.match(delta)
