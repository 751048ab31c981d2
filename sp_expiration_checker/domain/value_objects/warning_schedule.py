"""Warning schedule value object."""

from dataclasses import dataclass
from typing import Self

from ..exceptions import InvalidScheduleError

DEFAULT_WARNING_DAYS: tuple[int, ...] = (0, 1, 2, 3, 5, 7, 10, 14, 20, 25, 30)


@dataclass(frozen=True, slots=True)
class WarningSchedule:
    """
    Day offsets before expiry on which a warning is due.

    Matching is exact: a credential expiring in 4 days is not due while
    5 is on the schedule. With a daily run every offset is hit exactly once.
    """

    days: tuple[int, ...] = DEFAULT_WARNING_DAYS

    def __post_init__(self) -> None:
        """Validate offsets and store them ascending."""
        days = tuple(self.days)
        if not days:
            msg = "Warning schedule must contain at least one day offset"
            raise InvalidScheduleError(msg)
        if any(d < 0 for d in days):
            msg = f"Warning schedule offsets must be non-negative: {days}"
            raise InvalidScheduleError(msg)
        if len(set(days)) != len(days):
            msg = f"Warning schedule offsets must be unique: {days}"
            raise InvalidScheduleError(msg)
        object.__setattr__(self, "days", tuple(sorted(days)))

    def match(self, days: int) -> int:
        """Return ``days`` if it is on the schedule, else -1."""
        return days if days in self.days else -1

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build a schedule from a comma separated list such as ``"0,1,7"``."""
        try:
            days = tuple(int(part) for part in raw.split(",") if part.strip())
        except ValueError as e:
            msg = f"Invalid warning schedule {raw!r}: {e}"
            raise InvalidScheduleError(msg) from e
        return cls(days=days)


DEFAULT_SCHEDULE = WarningSchedule()
