"""Entra ID adapter - directory access through Microsoft Graph."""

from .graph_client import GraphClient, GraphClientConfig
from .repository import EntraIdApplicationRepository
from .token_provider import MsalTokenProvider, TokenProvider

__all__ = [
    "EntraIdApplicationRepository",
    "GraphClient",
    "GraphClientConfig",
    "MsalTokenProvider",
    "TokenProvider",
]
