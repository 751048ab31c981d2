"""Domain services - Stateless operations on domain objects."""

from .credential_scanner import scan_all, scan_application
from .expiry_classifier import NOT_DUE, days_to_expire, truncate_to_day

__all__ = [
    "NOT_DUE",
    "days_to_expire",
    "scan_all",
    "scan_application",
    "truncate_to_day",
]
