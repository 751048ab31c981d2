"""Tests for domain entities."""

from __future__ import annotations

import pytest

from sp_expiration_checker.domain.entities import Application, Credential
from sp_expiration_checker.domain.value_objects import CredentialKind


class TestCredential:
    """Tests for Credential entity."""

    def test_key_type_label_defaults_to_password(self) -> None:
        """Credentials without a type are shown as passwords."""
        credential = Credential(
            key_id="k",
            kind=CredentialKind.PASSWORD,
            end_date_time=None,
            expires_at=None,
        )
        assert credential.key_type_label == "Password"

    def test_key_type_label_uses_type(self) -> None:
        """Typed credentials keep the directory's type."""
        credential = Credential(
            key_id="k",
            kind=CredentialKind.KEY,
            end_date_time=None,
            expires_at=None,
            key_type="Symmetric",
        )
        assert credential.key_type_label == "Symmetric"

    def test_credential_is_frozen(self) -> None:
        """Credentials are immutable snapshots."""
        credential = Credential(key_id="k", kind=CredentialKind.KEY, end_date_time=None, expires_at=None)
        with pytest.raises(AttributeError):
            credential.key_id = "other"  # type: ignore[misc]


class TestApplication:
    """Tests for Application entity."""

    def test_credentials_keys_first(self, application: Application) -> None:
        """Keys come before passwords."""
        kinds = [c.kind for c in application.credentials]
        assert kinds == [CredentialKind.KEY, CredentialKind.KEY, CredentialKind.PASSWORD]

    def test_has_credentials(self, application: Application) -> None:
        """Applications report whether they hold any credential."""
        assert application.has_credentials is True
        assert Application(id="a", display_name="Empty").has_credentials is False
