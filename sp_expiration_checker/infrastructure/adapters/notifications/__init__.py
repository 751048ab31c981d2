"""Notification sender adapter implementations."""

from .base import BaseNotificationSender
from .teams import TeamsConfig, TeamsNotificationSender

__all__ = [
    "BaseNotificationSender",
    "TeamsConfig",
    "TeamsNotificationSender",
]
