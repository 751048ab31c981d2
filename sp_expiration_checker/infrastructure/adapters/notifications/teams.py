"""Microsoft Teams notification sender."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from .base import BaseNotificationSender

if TYPE_CHECKING:
    from ....domain.entities import ExpiringApplication


@dataclass(frozen=True, slots=True)
class TeamsConfig:
    """Teams notification configuration."""

    enabled: bool = False
    webhook_url: str = ""
    timeout: float = 30.0


class TeamsNotificationSender(BaseNotificationSender):
    """Send one MessageCard per expiring credential to a Teams incoming webhook."""

    SUMMARY = "Service Principal Expiration Warning!"
    THEME_COLOR = "0078D7"

    def __init__(
        self,
        config: TeamsConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Teams sender."""
        super().__init__()
        self._config = config
        self._transport = transport

    def is_configured(self) -> bool:
        """Check if Teams is properly configured."""
        return self._config.enabled and bool(self._config.webhook_url)

    async def notify(self, expiring: ExpiringApplication) -> bool:
        """Post a MessageCard for the credential; failures are logged, not raised."""
        if not self.is_configured():
            self._logger.warning("Teams sender not configured")
            return False

        try:
            card = self.build_message_card(expiring)

            async with httpx.AsyncClient(timeout=self._config.timeout, transport=self._transport) as client:
                response = await client.post(
                    self._config.webhook_url,
                    json=card,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()

            self._logger.info("%d - %s", response.status_code, response.reason_phrase)
            return True

        except Exception as e:
            self._logger.error(
                "Something went wrong sending the warning for %s (%s): %s",
                expiring.display_name,
                expiring.key_id,
                e,
            )
            return False

    def build_message_card(self, expiring: ExpiringApplication) -> dict[str, Any]:
        """Build the legacy MessageCard payload understood by Teams connectors."""
        facts = [
            {"name": "Application Name", "value": expiring.display_name},
            {"name": "Application ID", "value": expiring.id},
            {"name": "Key Type", "value": expiring.key_type},
            {"name": "Key ID", "value": expiring.key_id},
            {"name": "Expires at", "value": expiring.end_date_time},
        ]

        return {
            "@type": "MessageCard",
            "@context": "http://schema.org/extensions",
            "summary": self.SUMMARY,
            "themeColor": self.THEME_COLOR,
            "sections": [
                {
                    "activityTitle": (
                        f"Service Principal Expires {self.describe_days(expiring.days_to_expire)}!"
                    ),
                    "facts": facts,
                }
            ],
        }
