"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from sp_expiration_checker.domain.entities import Application, Credential
from sp_expiration_checker.domain.value_objects import CredentialKind

CredentialFactory = Callable[..., Credential]


def _graph_timestamp(value: datetime) -> str:
    """Format a datetime the way Graph returns endDateTime."""
    return value.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


@pytest.fixture
def now() -> datetime:
    """A fixed mid-afternoon reference time for a run."""
    return datetime(2024, 3, 10, 15, 30, tzinfo=UTC)


@pytest.fixture
def make_credential(now: datetime) -> CredentialFactory:
    """Factory for credentials expiring a given number of days after ``now``."""

    def factory(
        days: float | None,
        *,
        kind: CredentialKind = CredentialKind.KEY,
        key_type: str | None = "AsymmetricX509Cert",
        key_id: str | None = None,
    ) -> Credential:
        if kind is CredentialKind.PASSWORD:
            key_type = None
        expires_at = None if days is None else now + timedelta(days=days)
        return Credential(
            key_id=key_id or str(uuid4()),
            kind=kind,
            end_date_time=None if expires_at is None else _graph_timestamp(expires_at),
            expires_at=expires_at,
            key_type=key_type,
        )

    return factory


@pytest.fixture
def expiring_key(make_credential: CredentialFactory) -> Credential:
    """A certificate expiring in exactly 7 days."""
    return make_credential(7, key_id="key-7")


@pytest.fixture
def expiring_password(make_credential: CredentialFactory) -> Credential:
    """A password secret expiring in exactly 10 days."""
    return make_credential(10, kind=CredentialKind.PASSWORD, key_id="secret-10")


@pytest.fixture
def healthy_key(make_credential: CredentialFactory) -> Credential:
    """A certificate expiring in 4 days, which is not on the schedule."""
    return make_credential(4, key_id="key-4")


@pytest.fixture
def application(
    expiring_key: Credential,
    healthy_key: Credential,
    expiring_password: Credential,
) -> Application:
    """An application with two keys and one password."""
    return Application(
        id="11111111-1111-1111-1111-111111111111",
        display_name="Payroll API",
        key_credentials=(expiring_key, healthy_key),
        password_credentials=(expiring_password,),
    )
