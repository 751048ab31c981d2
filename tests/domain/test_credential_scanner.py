"""Tests for the credential scanner."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

import pytest

from sp_expiration_checker.domain.entities import Application, Credential, ExpiringApplication
from sp_expiration_checker.domain.services import scan_all, scan_application
from sp_expiration_checker.domain.value_objects import CredentialKind, WarningSchedule

CredentialFactory = Callable[..., Credential]


class TestScanApplication:
    """Tests for scan_application."""

    def test_only_scheduled_credentials_are_reported(
        self, application: Application, now: datetime
    ) -> None:
        """The credential expiring in 4 days is skipped."""
        expiring = scan_application(application, now)
        assert [e.key_id for e in expiring] == ["key-7", "secret-10"]
        assert [e.days_to_expire for e in expiring] == [7, 10]

    def test_record_fields(self, application: Application, expiring_key: Credential, now: datetime) -> None:
        """Records combine the application identity with the credential."""
        record = scan_application(application, now)[0]
        assert record == ExpiringApplication(
            id=application.id,
            display_name="Payroll API",
            key_id="key-7",
            key_type="AsymmetricX509Cert",
            days_to_expire=7,
            end_date_time=expiring_key.end_date_time,
        )

    def test_password_without_type_is_labelled_password(
        self, application: Application, now: datetime
    ) -> None:
        """Password credentials carry no type tag."""
        record = scan_application(application, now)[-1]
        assert record.key_type == "Password"

    def test_due_credentials_are_logged_with_their_kind(
        self, application: Application, now: datetime, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Each due credential is logged with the list it came from."""
        with caplog.at_level(logging.DEBUG, logger="sp_expiration_checker.domain.services.credential_scanner"):
            scan_application(application, now)

        assert "key credential key-7 of Payroll API expires in 7 days" in caplog.text
        assert "password credential secret-10 of Payroll API expires in 10 days" in caplog.text

    def test_keys_scanned_before_passwords_in_order(
        self, make_credential: CredentialFactory, now: datetime
    ) -> None:
        """Keys [A, B] and passwords [C] are reported as A, B, C."""
        app = Application(
            id="app",
            display_name="Ordered",
            key_credentials=(make_credential(30, key_id="A"), make_credential(0, key_id="B")),
            password_credentials=(make_credential(1, kind=CredentialKind.PASSWORD, key_id="C"),),
        )
        assert [e.key_id for e in scan_application(app, now)] == ["A", "B", "C"]

    def test_empty_application(self, now: datetime) -> None:
        """Applications without credentials produce no records."""
        assert scan_application(Application(id="empty", display_name="Empty"), now) == []

    def test_expired_and_undated_credentials_are_skipped(
        self, make_credential: CredentialFactory, now: datetime
    ) -> None:
        """Negative and missing expiries never produce records."""
        app = Application(
            id="app",
            display_name="Old",
            key_credentials=(make_credential(-3), make_credential(None)),
        )
        assert scan_application(app, now) == []

    def test_custom_schedule(self, application: Application, now: datetime) -> None:
        """A schedule with only 4 days reports the otherwise healthy key."""
        expiring = scan_application(application, now, WarningSchedule(days=(4,)))
        assert [e.key_id for e in expiring] == ["key-4"]


class TestScanAll:
    """Tests for scan_all."""

    def test_concatenates_in_application_order(
        self, make_credential: CredentialFactory, now: datetime
    ) -> None:
        """Results follow input application order."""
        first = Application(id="1", display_name="First", key_credentials=(make_credential(2, key_id="x"),))
        empty = Application(id="2", display_name="Empty")
        second = Application(
            id="3",
            display_name="Second",
            password_credentials=(make_credential(5, kind=CredentialKind.PASSWORD, key_id="y"),),
        )
        expiring = scan_all([first, empty, second], now)
        assert [(e.display_name, e.key_id) for e in expiring] == [("First", "x"), ("Second", "y")]

    def test_no_applications(self, now: datetime) -> None:
        """An empty directory produces no records."""
        assert scan_all([], now) == []

    def test_scan_is_repeatable(self, application: Application, now: datetime) -> None:
        """Same snapshot and same time give identical results."""
        assert scan_all([application], now) == scan_all([application], now)
