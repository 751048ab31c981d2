"""Credential kind value object."""

from enum import StrEnum, auto

# Label used for credentials the directory returns without a type tag.
PASSWORD_KEY_TYPE = "Password"


class CredentialKind(StrEnum):
    """Which credential list of an application a credential belongs to."""

    KEY = auto()
    PASSWORD = auto()

    def __str__(self) -> str:
        return self.value
