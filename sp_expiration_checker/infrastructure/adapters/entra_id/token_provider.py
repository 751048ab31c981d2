"""Bearer token acquisition for Microsoft Graph."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import ClassVar

import msal

from ....application.exceptions import TokenAcquisitionError

logger = logging.getLogger(__name__)

# Async callable returning a bearer token, raising TokenAcquisitionError on failure.
TokenProvider = Callable[[], Awaitable[str]]


class MsalTokenProvider:
    """
    Token provider using the MSAL client credentials flow.

    Tokens are cached and refreshed five minutes before they expire.
    """

    AUTHORITY_BASE: ClassVar[str] = "https://login.microsoftonline.com"
    SCOPE: ClassVar[list[str]] = ["https://graph.microsoft.com/.default"]
    REFRESH_MARGIN: ClassVar[timedelta] = timedelta(minutes=5)

    def __init__(self, *, tenant_id: str, client_id: str, client_secret: str) -> None:
        """Initialize the provider with a service identity."""
        self._tenant_id = tenant_id
        self._client_id = client_id
        self._client_secret = client_secret
        self._access_token: str | None = None
        self._token_expiry: datetime | None = None
        self._msal_app: msal.ConfidentialClientApplication | None = None

    @property
    def authority(self) -> str:
        """Token authority for the configured tenant."""
        return f"{self.AUTHORITY_BASE}/{self._tenant_id}"

    def _get_msal_app(self) -> msal.ConfidentialClientApplication:
        """Get or create MSAL application instance."""
        if self._msal_app is None:
            self._msal_app = msal.ConfidentialClientApplication(
                client_id=self._client_id,
                client_credential=self._client_secret,
                authority=self.authority,
            )
        return self._msal_app

    async def __call__(self) -> str:
        """Return a valid access token, acquiring a new one when needed."""
        if self._access_token and self._token_expiry and datetime.now(UTC) < self._token_expiry:
            return self._access_token

        try:
            app = self._get_msal_app()
            result = await asyncio.to_thread(app.acquire_token_for_client, scopes=self.SCOPE)
        except Exception as e:
            msg = f"Failed to acquire access token: {e}"
            raise TokenAcquisitionError(msg) from e

        if "access_token" not in result:
            error = result.get("error_description", result.get("error", "Unknown error"))
            msg = f"Failed to acquire access token: {error}"
            raise TokenAcquisitionError(msg)

        self._access_token = result["access_token"]
        expires_in = int(result.get("expires_in", 3600))
        self._token_expiry = datetime.now(UTC) + timedelta(seconds=expires_in) - self.REFRESH_MARGIN
        logger.debug("Acquired Graph access token valid for %d seconds", expires_in)

        return self._access_token
