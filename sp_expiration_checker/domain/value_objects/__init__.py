"""Domain value objects - Immutable objects defined by their attributes."""

from .credential_kind import PASSWORD_KEY_TYPE, CredentialKind
from .warning_schedule import DEFAULT_SCHEDULE, DEFAULT_WARNING_DAYS, WarningSchedule

__all__ = [
    "DEFAULT_SCHEDULE",
    "DEFAULT_WARNING_DAYS",
    "PASSWORD_KEY_TYPE",
    "CredentialKind",
    "WarningSchedule",
]
