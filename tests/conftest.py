"""Shared fixtures for the notification service tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest

# Ensure the project root (which contains the ``notification_service`` package) is importable
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from notification_service.application.events import NotificationEventHandlers
from notification_service.domain.entities import Booking, Program, UserContact
from notification_service.infrastructure.notification_store import InMemoryNotificationStore


class RecordingSender:
    """Notification sender that remembers every message instead of sending it."""

    def __init__(self) -> None:
        self.emails: list[tuple[str, str, str]] = []
        self.sms: list[tuple[str, str]] = []

    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        self.emails.append((recipient, subject, body))
        return True

    def send_sms(self, recipient: str, message: str) -> bool:
        self.sms.append((recipient, message))
        return True


class StubResolver:
    """Contact lookup backed by dictionaries; unknown ids resolve to ``None``."""

    def __init__(
        self,
        users: dict[str, UserContact] | None = None,
        programs: dict[str, Program] | None = None,
        bookings: dict[str, Booking] | None = None,
    ) -> None:
        self.users = users or {}
        self.programs = programs or {}
        self.bookings = bookings or {}
        self.calls: list[tuple[str, Any]] = []

    def get_user_contact(self, user_id: Any) -> UserContact | None:
        self.calls.append(("user", user_id))
        return self.users.get(str(user_id))

    def get_program_details(self, program_id: Any) -> Program | None:
        self.calls.append(("program", program_id))
        return self.programs.get(str(program_id))

    def get_booking_details(self, booking_id: Any) -> Booking | None:
        self.calls.append(("booking", booking_id))
        return self.bookings.get(str(booking_id))


@pytest.fixture()
def store() -> InMemoryNotificationStore:
    return InMemoryNotificationStore()


@pytest.fixture()
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture()
def resolver() -> StubResolver:
    return StubResolver(
        users={
            "u1": UserContact(id="u1", first_name="Ana", email="ana@example.com"),
        },
        programs={"p1": Program(id="p1", name="Strength Block")},
        bookings={"b9": Booking(id="b9", booking_date="2025-02-01", start_time="09:00")},
    )


@pytest.fixture()
def handlers(store, resolver, sender) -> NotificationEventHandlers:
    return NotificationEventHandlers(
        store=store,
        resolver=resolver,
        sender=sender,
        fallback_email_domain="fitsync.com",
    )
