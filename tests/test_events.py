"""Tests for typed event payload parsing."""

from __future__ import annotations

import pytest

from notification_service.domain.entities import (
    EVENT_PAYLOADS,
    BookingCancelled,
    EventType,
    MilestoneReached,
    parse_event,
)
from notification_service.domain.exceptions import InvalidEventPayloadError


def test_every_event_type_has_a_payload_class() -> None:
    assert set(EVENT_PAYLOADS) == set(EventType)
    for event_type, payload_cls in EVENT_PAYLOADS.items():
        assert payload_cls.event_type is event_type


def test_optional_fields_default_to_none() -> None:
    event = parse_event(EventType.BOOKING_CANCELLED, {"booking_id": "b1", "client_id": 7})

    assert isinstance(event, BookingCancelled)
    assert event.reason is None
    assert event.recipient_id == "7"


@pytest.mark.parametrize(
    ("payload", "missing"),
    [
        ({}, ["booking_id", "client_id", "booking_date", "start_time"]),
        (
            {"booking_id": "b1", "client_id": "", "booking_date": "d", "start_time": None},
            ["client_id", "start_time"],
        ),
    ],
)
def test_missing_required_fields_are_reported(payload, missing) -> None:
    with pytest.raises(InvalidEventPayloadError) as exc_info:
        parse_event(EventType.BOOKING_CREATED, payload)

    assert exc_info.value.missing == missing
    assert exc_info.value.event_name == "booking.created"


def test_non_mapping_payload_is_rejected() -> None:
    with pytest.raises(InvalidEventPayloadError):
        parse_event(EventType.PROGRAM_COMPLETED, ["program_id"])  # type: ignore[arg-type]


def test_milestone_keeps_raw_payload() -> None:
    payload = {"client_id": "u1", "milestone_type": "streak", "days": 30}

    event = parse_event(EventType.MILESTONE_REACHED, payload)

    assert isinstance(event, MilestoneReached)
    assert event.raw == payload
    assert event.raw is not payload


def test_event_type_from_name() -> None:
    assert EventType.from_name("program.assigned") is EventType.PROGRAM_ASSIGNED
    assert EventType.from_name("program.deleted") is None
