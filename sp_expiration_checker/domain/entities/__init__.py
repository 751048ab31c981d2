"""Domain entities - Objects with identity and lifecycle."""

from .application import Application
from .credential import Credential
from .expiring_application import ExpiringApplication

__all__ = [
    "Application",
    "Credential",
    "ExpiringApplication",
]
