"""Application use cases."""

from .check_expiring_credentials import CheckExpiringCredentials, CheckResult, TimerInfo

__all__ = [
    "CheckExpiringCredentials",
    "CheckResult",
    "TimerInfo",
]
