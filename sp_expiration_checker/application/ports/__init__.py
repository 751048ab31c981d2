"""Application ports - Interfaces for external adapters."""

from .application_repository import ApplicationRepository
from .notification_sender import NotificationSender

__all__ = [
    "ApplicationRepository",
    "NotificationSender",
]
