"""Application entity representing an Entra ID app registration."""

from dataclasses import dataclass, field

from .credential import Credential


@dataclass(frozen=True, slots=True)
class Application:
    """An Entra ID application registration and its credentials."""

    id: str
    display_name: str
    key_credentials: tuple[Credential, ...] = field(default_factory=tuple)
    password_credentials: tuple[Credential, ...] = field(default_factory=tuple)

    @property
    def has_credentials(self) -> bool:
        """Check if the application holds any key or password credential."""
        return bool(self.key_credentials or self.password_credentials)

    @property
    def credentials(self) -> tuple[Credential, ...]:
        """Key credentials followed by password credentials, in directory order."""
        return self.key_credentials + self.password_credentials
