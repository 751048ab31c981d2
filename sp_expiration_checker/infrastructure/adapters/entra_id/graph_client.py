"""Microsoft Graph API client for Entra ID."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

import httpx

from .token_provider import TokenProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GraphClientConfig:
    """Configuration for Microsoft Graph API client."""

    tenant_id: str
    client_id: str
    client_secret: str
    timeout: float = 30.0


class GraphClient:
    """
    Async client for Microsoft Graph API.

    Attaches a bearer token to each request and follows paginated results.
    """

    GRAPH_BASE_URL: ClassVar[str] = "https://graph.microsoft.com/v1.0"
    APPLICATION_FIELDS: ClassVar[tuple[str, ...]] = (
        "id",
        "displayName",
        "keyCredentials",
        "passwordCredentials",
    )

    def __init__(
        self,
        token_provider: TokenProvider,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the Graph client."""
        self._token_provider = token_provider
        self._timeout = timeout
        self._transport = transport

    async def get_applications(self) -> list[dict[str, Any]]:
        """
        Retrieve all application registrations.

        Only the fields needed to check credential expiry are selected.

        Returns:
            List of application dictionaries from Graph API.
        """
        logger.info("Fetching application registrations from Entra ID...")
        select = ",".join(self.APPLICATION_FIELDS)
        applications = await self._get_all_pages(f"/applications?$select={select}")
        logger.info("Found %d application registrations", len(applications))
        return applications

    async def _get_all_pages(self, endpoint: str) -> list[dict[str, Any]]:
        """
        Retrieve all pages from a paginated Graph API endpoint.

        Args:
            endpoint: The API endpoint path.

        Returns:
            Combined list of all results across pages.
        """
        results: list[dict[str, Any]] = []
        url: str | None = endpoint

        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            while url:
                token = await self._token_provider()
                headers = {
                    "Authorization": f"Bearer {token}",
                    "Content-Type": "application/json",
                }

                # nextLink values are absolute
                full_url = url if url.startswith("http") else f"{self.GRAPH_BASE_URL}{url}"

                response = await client.get(full_url, headers=headers)
                response.raise_for_status()
                data = response.json()

                results.extend(data.get("value", []))
                url = data.get("@odata.nextLink")

        return results
