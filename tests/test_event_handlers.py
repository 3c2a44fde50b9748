"""Tests for the per-event notification handlers."""

from __future__ import annotations

from notification_service.domain.entities import (
    AchievementEarned,
    BookingCancelled,
    BookingCompleted,
    BookingCreated,
    MilestoneReached,
    NotificationCategory,
    NotificationType,
    ProgramAssigned,
    ProgramCompleted,
)


def test_booking_created_stores_confirmation(handlers, store, sender) -> None:
    event = BookingCreated.from_payload(
        {
            "booking_id": "b1",
            "client_id": "u1",
            "booking_date": "2025-01-15",
            "start_time": "10:00",
        }
    )

    notification = handlers.handle_booking_created(event)

    assert store.list("u1") == [notification]
    assert notification.type is NotificationType.BOOKING_CONFIRMATION
    assert notification.category is NotificationCategory.BOOKING_CONFIRMATION
    assert notification.title == "Booking Confirmed"
    assert "2025-01-15" in notification.message
    assert "10:00" in notification.message
    assert notification.metadata == {
        "booking_id": "b1",
        "booking_date": "2025-01-15",
        "start_time": "10:00",
    }
    assert sender.emails == [
        (
            "client-u1@fitsync.com",
            "Booking Confirmation",
            "Your booking for 2025-01-15 at 10:00 has been confirmed. Booking ID: b1",
        )
    ]


def test_booking_cancelled_without_reason_keeps_trailing_space(
    handlers, store, sender
) -> None:
    event = BookingCancelled.from_payload({"booking_id": "b1", "client_id": "u1"})

    notification = handlers.handle_booking_cancelled(event)

    assert notification.message == "Your booking has been cancelled. "
    assert "Reason:" not in notification.message
    assert notification.type is NotificationType.BOOKING_CANCELLATION
    assert notification.category is NotificationCategory.BOOKING_REMINDER
    assert notification.metadata == {"booking_id": "b1"}
    assert sender.emails[0][2] == "Your booking has been cancelled. "


def test_booking_cancelled_with_reason(handlers, sender) -> None:
    event = BookingCancelled.from_payload(
        {"booking_id": "b1", "client_id": "u1", "reason": "Schedule conflict"}
    )

    notification = handlers.handle_booking_cancelled(event)

    assert notification.message == "Your booking has been cancelled. Schedule conflict"
    assert sender.emails[0][2] == (
        "Your booking has been cancelled. Reason: Schedule conflict"
    )


def test_booking_completed_uses_resolved_contact(handlers, store, sender) -> None:
    event = BookingCompleted.from_payload(
        {"booking_id": "b1", "client_id": "u1", "workout_date": "2025-01-20"}
    )

    notification = handlers.handle_booking_completed(event)

    assert notification is not None
    assert notification.type is NotificationType.BOOKING_COMPLETED
    assert notification.category is NotificationCategory.BOOKING_CONFIRMATION
    assert notification.message == (
        "Your training session on 2025-01-20 is complete. Log your workout!"
    )
    assert notification.metadata == {"booking_id": "b1"}
    recipient, subject, body = sender.emails[0]
    assert recipient == "ana@example.com"
    assert subject == "Session Completed"
    assert body.startswith("Hi Ana,")


def test_booking_completed_falls_back_to_booking_date(handlers, resolver) -> None:
    event = BookingCompleted.from_payload({"booking_id": "b9", "client_id": "u1"})

    notification = handlers.handle_booking_completed(event)

    assert notification is not None
    assert "2025-02-01" in notification.message
    assert ("booking", "b9") in resolver.calls


def test_program_assigned_uses_program_name(handlers, store) -> None:
    event = ProgramAssigned.from_payload(
        {
            "program_id": "p1",
            "client_id": "u1",
            "workout_plan_id": "w1",
            "diet_plan_id": "d1",
        }
    )

    notification = handlers.handle_program_assigned(event)

    assert notification is not None
    assert notification.title == "New Program Assigned"
    assert notification.message == "Your trainer assigned you: Strength Block"
    assert notification.metadata == {
        "program_id": "p1",
        "workout_plan_id": "w1",
        "diet_plan_id": "d1",
    }


def test_program_assigned_falls_back_when_program_lookup_fails(
    handlers, store, sender
) -> None:
    event = ProgramAssigned.from_payload({"program_id": "unknown", "client_id": "u1"})

    notification = handlers.handle_program_assigned(event)

    assert notification is not None
    assert "Training Program" in notification.message
    assert notification.metadata == {
        "program_id": "unknown",
        "workout_plan_id": None,
        "diet_plan_id": None,
    }
    assert "Training Program" in sender.emails[0][2]


def test_program_completed(handlers) -> None:
    event = ProgramCompleted.from_payload({"program_id": "p1", "client_id": "u1"})

    notification = handlers.handle_program_completed(event)

    assert notification is not None
    assert notification.type is NotificationType.PROGRAM_COMPLETED
    assert notification.category is NotificationCategory.PROGRAM_ASSIGNED
    assert notification.title == "Program Completed!"
    assert notification.metadata == {"program_id": "p1"}


def test_achievement_earned(handlers, sender) -> None:
    event = AchievementEarned.from_payload(
        {
            "achievement_id": "a1",
            "client_id": "u1",
            "title": "First Workout",
            "type": "workout_count",
            "description": "You logged your first workout",
        }
    )

    notification = handlers.handle_achievement_earned(event)

    assert notification is not None
    assert notification.message == "Congratulations! You've earned: First Workout"
    assert notification.metadata == {"achievement_id": "a1", "type": "workout_count"}
    assert "You logged your first workout" in sender.emails[0][2]


def test_achievement_for_unknown_client_has_no_side_effects(
    handlers, store, sender, caplog
) -> None:
    event = AchievementEarned.from_payload(
        {"achievement_id": "a1", "client_id": "ghost", "title": "First Workout"}
    )

    with caplog.at_level("ERROR"):
        result = handlers.handle_achievement_earned(event)

    assert result is None
    assert store.list("ghost") == []
    assert sender.emails == []
    assert "Could not fetch client ghost" in caplog.text


def test_milestone_metadata_is_entire_payload(handlers) -> None:
    payload = {
        "client_id": "u1",
        "milestone_type": "weight_loss",
        "achieved_value": 5,
        "previous_value": 2,
        "unit": "kg",
    }

    notification = handlers.handle_milestone_reached(MilestoneReached.from_payload(payload))

    assert notification is not None
    assert notification.type is NotificationType.MILESTONE
    assert notification.category is NotificationCategory.ACHIEVEMENT
    assert notification.message == "You've reached: weight_loss"
    assert notification.metadata == payload


def test_handlers_needing_contact_abort_for_unknown_client(handlers, store, sender) -> None:
    events = [
        (handlers.handle_booking_completed, BookingCompleted.from_payload(
            {"booking_id": "b1", "client_id": "ghost"}
        )),
        (handlers.handle_program_assigned, ProgramAssigned.from_payload(
            {"program_id": "p1", "client_id": "ghost"}
        )),
        (handlers.handle_program_completed, ProgramCompleted.from_payload(
            {"program_id": "p1", "client_id": "ghost"}
        )),
        (handlers.handle_milestone_reached, MilestoneReached.from_payload(
            {"client_id": "ghost", "milestone_type": "streak"}
        )),
    ]

    for handle, event in events:
        assert handle(event) is None

    assert store.list("ghost") == []
    assert sender.emails == []
