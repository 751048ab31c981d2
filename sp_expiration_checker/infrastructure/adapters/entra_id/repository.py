"""Entra ID application repository implementation."""

from __future__ import annotations

import logging
import re
from datetime import UTC, datetime
from typing import Any

import httpx

from ....application.exceptions import DirectoryFetchError
from ....domain.entities import Application, Credential
from ....domain.value_objects import CredentialKind
from .graph_client import GraphClient, GraphClientConfig
from .token_provider import MsalTokenProvider, TokenProvider

logger = logging.getLogger(__name__)

_FRACTION = re.compile(r"\.(\d{6})\d+")


class EntraIdApplicationRepository:
    """
    Application repository implementation using Microsoft Graph API.

    Implements the ApplicationRepository port for Entra ID.
    """

    def __init__(
        self,
        config: GraphClientConfig,
        *,
        token_provider: TokenProvider | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the repository.

        Args:
            config: Configuration for the Graph API client.
            token_provider: Overrides the MSAL client credentials provider.
            transport: Optional httpx transport for the Graph client.
        """
        provider = token_provider or MsalTokenProvider(
            tenant_id=config.tenant_id,
            client_id=config.client_id,
            client_secret=config.client_secret,
        )
        self._client = GraphClient(provider, timeout=config.timeout, transport=transport)

    async def fetch_applications(self) -> list[Application]:
        """
        Retrieve all application registrations with their credentials.

        Returns:
            List of applications in directory order.

        Raises:
            DirectoryFetchError: If retrieval or authentication fails.
        """
        try:
            raw_applications = await self._client.get_applications()
            applications = [self._map_application(raw) for raw in raw_applications]
        except DirectoryFetchError as e:
            logger.error("Failed to retrieve applications from Entra ID: %s", e)
            raise
        except Exception as e:
            msg = f"Failed to retrieve applications from Entra ID: {e}"
            logger.exception(msg)
            raise DirectoryFetchError(msg) from e

        credential_count = sum(len(app.credentials) for app in applications)
        logger.info(
            "Retrieved %d credentials from %d app registrations",
            credential_count,
            len(applications),
        )
        return applications

    def _map_application(self, raw: dict[str, Any]) -> Application:
        """Map raw Graph API application data to domain entity."""
        app_name = raw.get("displayName") or "Unknown"
        key_credentials = tuple(
            self._map_credential(cred, CredentialKind.KEY, app_name)
            for cred in raw.get("keyCredentials") or []
        )
        password_credentials = tuple(
            self._map_credential(cred, CredentialKind.PASSWORD, app_name)
            for cred in raw.get("passwordCredentials") or []
        )
        return Application(
            id=raw.get("id", ""),
            display_name=app_name,
            key_credentials=key_credentials,
            password_credentials=password_credentials,
        )

    def _map_credential(
        self,
        raw: dict[str, Any],
        kind: CredentialKind,
        app_name: str,
    ) -> Credential:
        """
        Map raw Graph API credential data to domain entity.

        The end date string is kept verbatim for display; the parsed value
        is None when it is missing or unreadable.
        """
        expiry_str = raw.get("endDateTime")
        if not expiry_str:
            logger.warning(
                "Credential %s in %s has no expiry date",
                raw.get("keyId", "unknown"),
                app_name,
            )

        return Credential(
            key_id=raw.get("keyId", ""),
            kind=kind,
            end_date_time=expiry_str,
            expires_at=self._parse_datetime(expiry_str) if expiry_str else None,
            key_type=raw.get("type"),
            display_name=raw.get("displayName"),
            start_date_time=raw.get("startDateTime"),
        )

    @staticmethod
    def _parse_datetime(dt_string: str) -> datetime | None:
        """Parse ISO datetime string to datetime object."""
        try:
            # Graph uses a trailing Z and up to seven fractional digits
            normalized = _FRACTION.sub(r".\1", dt_string.replace("Z", "+00:00"))
            dt = datetime.fromisoformat(normalized)
            return dt if dt.tzinfo else dt.replace(tzinfo=UTC)
        except ValueError:
            logger.warning("Failed to parse datetime: %s", dt_string)
            return None
