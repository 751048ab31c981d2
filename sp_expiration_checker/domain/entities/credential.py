"""Credential entity representing a key (certificate) or password secret."""

from dataclasses import dataclass
from datetime import datetime

from ..value_objects import PASSWORD_KEY_TYPE, CredentialKind


@dataclass(frozen=True, slots=True)
class Credential:
    """A credential snapshot belonging to an application registration."""

    key_id: str
    kind: CredentialKind
    end_date_time: str | None
    expires_at: datetime | None
    key_type: str | None = None
    display_name: str | None = None
    start_date_time: str | None = None

    @property
    def key_type_label(self) -> str:
        """Type shown in notifications; untyped credentials are passwords."""
        return self.key_type or PASSWORD_KEY_TYPE
