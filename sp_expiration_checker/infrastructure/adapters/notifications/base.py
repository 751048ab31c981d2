"""Base notification sender with common functionality."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ....domain.entities import ExpiringApplication


class BaseNotificationSender(ABC):
    """Abstract base class for notification senders."""

    def __init__(self) -> None:
        """Initialize the notification sender."""
        self._logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    async def notify(self, expiring: ExpiringApplication) -> bool:
        """Send a notification for one expiring credential."""
        ...

    @abstractmethod
    def is_configured(self) -> bool:
        """Check if the sender is properly configured."""
        ...

    @staticmethod
    def describe_days(days: int) -> str:
        """Human-readable remaining time for a warning title."""
        if days == 0:
            return "today"
        if days == 1:
            return "in 1 day"
        return f"in {days} days"
