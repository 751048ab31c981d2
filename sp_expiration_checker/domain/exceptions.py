"""Domain exceptions."""


class DomainError(Exception):
    """Base exception for domain errors."""


class InvalidScheduleError(DomainError, ValueError):
    """Raised when a warning schedule is invalid."""
