"""Infrastructure adapters - Implementations of application ports."""

from .entra_id import EntraIdApplicationRepository
from .notifications import TeamsNotificationSender

__all__ = [
    "EntraIdApplicationRepository",
    "TeamsNotificationSender",
]
