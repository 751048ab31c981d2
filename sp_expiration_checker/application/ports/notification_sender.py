"""Port for notification sending - driven/secondary port."""

from typing import Protocol

from ...domain.entities import ExpiringApplication


class NotificationSender(Protocol):
    """
    Port for sending notifications.

    This is a driven (secondary) port that defines how the application
    sends one expiration warning to an external system.
    """

    async def notify(self, expiring: ExpiringApplication) -> bool:
        """
        Deliver a warning for a single expiring credential.

        Args:
            expiring: The credential due for a warning.

        Returns:
            True if the notification was delivered. Failures are logged
            and reported as False rather than raised.
        """
        ...

    def is_configured(self) -> bool:
        """
        Check if this notification sender is properly configured.

        Returns:
            True if the sender is ready to send notifications.
        """
        ...
