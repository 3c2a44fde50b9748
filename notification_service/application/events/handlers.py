"""Event handlers that turn domain events into user notifications."""

from __future__ import annotations

import logging
from typing import Any, Protocol

from notification_service.domain.entities import (
    AchievementEarned,
    Booking,
    BookingCancelled,
    BookingCompleted,
    BookingCreated,
    EventType,
    MilestoneReached,
    Notification,
    NotificationCategory,
    NotificationDraft,
    NotificationType,
    Program,
    ProgramAssigned,
    ProgramCompleted,
    UserContact,
)
from notification_service.infrastructure.email import NotificationSender
from notification_service.infrastructure.notification_store import (
    InMemoryNotificationStore,
)

logger = logging.getLogger(__name__)

DEFAULT_PROGRAM_NAME = "Training Program"


class ContactLookup(Protocol):
    """Subset of :class:`ContactResolver` used by the handlers."""

    def get_user_contact(self, user_id: Any) -> UserContact | None:
        ...

    def get_program_details(self, program_id: Any) -> Program | None:
        ...

    def get_booking_details(self, booking_id: Any) -> Booking | None:
        ...


class NotificationEventHandlers:
    """One handler per :class:`EventType`.

    Each handler sends an email through the injected sender and appends an
    in-app notification to the store. Handlers that need the client's contact
    return ``None`` without side effects when it cannot be resolved.
    """

    def __init__(
        self,
        *,
        store: InMemoryNotificationStore,
        resolver: ContactLookup,
        sender: NotificationSender,
        fallback_email_domain: str = "fitsync.com",
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._sender = sender
        self._fallback_email_domain = fallback_email_domain

    def as_mapping(self) -> dict[EventType, Any]:
        """Return the dispatch table for every event type."""

        return {
            EventType.BOOKING_CREATED: self.handle_booking_created,
            EventType.BOOKING_CANCELLED: self.handle_booking_cancelled,
            EventType.BOOKING_COMPLETED: self.handle_booking_completed,
            EventType.PROGRAM_ASSIGNED: self.handle_program_assigned,
            EventType.PROGRAM_COMPLETED: self.handle_program_completed,
            EventType.ACHIEVEMENT_EARNED: self.handle_achievement_earned,
            EventType.MILESTONE_REACHED: self.handle_milestone_reached,
        }

    def handle_booking_created(self, event: BookingCreated) -> Notification:
        self._sender.send_email(
            self._fallback_address(event.client_id),
            "Booking Confirmation",
            f"Your booking for {event.booking_date} at {event.start_time} has been "
            f"confirmed. Booking ID: {event.booking_id}",
        )
        notification = self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.BOOKING_CONFIRMATION,
                category=NotificationCategory.BOOKING_CONFIRMATION,
                title="Booking Confirmed",
                message=(
                    f"Your session on {event.booking_date} at {event.start_time} "
                    "has been booked successfully."
                ),
                metadata={
                    "booking_id": event.booking_id,
                    "booking_date": event.booking_date,
                    "start_time": event.start_time,
                },
            ),
        )
        logger.info("Booking confirmation sent to client %s", event.client_id)
        return notification

    def handle_booking_cancelled(self, event: BookingCancelled) -> Notification:
        reason = event.reason or ""
        email_reason = f"Reason: {reason}" if reason else ""
        self._sender.send_email(
            self._fallback_address(event.client_id),
            "Booking Cancelled",
            f"Your booking has been cancelled. {email_reason}",
        )
        return self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.BOOKING_CANCELLATION,
                category=NotificationCategory.BOOKING_REMINDER,
                title="Booking Cancelled",
                message=f"Your booking has been cancelled. {reason}",
                metadata={"booking_id": event.booking_id},
            ),
        )

    def handle_booking_completed(self, event: BookingCompleted) -> Notification | None:
        client = self._resolve_client(event.client_id, "session completion")
        if client is None:
            return None

        workout_date = event.workout_date
        if workout_date is None:
            booking = self._resolver.get_booking_details(event.booking_id)
            if booking is not None:
                workout_date = booking.booking_date

        self._sender.send_email(
            client.email,
            "Session Completed",
            f"Hi {client.first_name},\n\nYour training session on {workout_date} has been "
            "marked as complete.\n\nYou can now log your workout details and track your "
            "progress!",
        )
        return self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.BOOKING_COMPLETED,
                category=NotificationCategory.BOOKING_CONFIRMATION,
                title="Session Completed",
                message=f"Your training session on {workout_date} is complete. Log your workout!",
                metadata={"booking_id": event.booking_id},
            ),
        )

    def handle_program_assigned(self, event: ProgramAssigned) -> Notification | None:
        client = self._resolve_client(event.client_id, "program notification")
        if client is None:
            return None

        program = self._resolver.get_program_details(event.program_id)
        program_name = (program.name if program else None) or DEFAULT_PROGRAM_NAME

        self._sender.send_email(
            client.email,
            "New Training Program Assigned",
            f"Hi {client.first_name},\n\nYour trainer has assigned you a new program: "
            f"{program_name}\n\nLog in to view your program details and get started!",
        )
        notification = self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.PROGRAM_ASSIGNED,
                category=NotificationCategory.PROGRAM_ASSIGNED,
                title="New Program Assigned",
                message=f"Your trainer assigned you: {program_name}",
                metadata={
                    "program_id": event.program_id,
                    "workout_plan_id": event.workout_plan_id,
                    "diet_plan_id": event.diet_plan_id,
                },
            ),
        )
        logger.info("Program assignment notification sent to client %s", event.client_id)
        return notification

    def handle_program_completed(self, event: ProgramCompleted) -> Notification | None:
        client = self._resolve_client(event.client_id, "program completion")
        if client is None:
            return None

        self._sender.send_email(
            client.email,
            "Program Completed!",
            f"Congratulations {client.first_name}!\n\nYou've successfully completed your "
            "training program!\n\nGreat work on finishing your program. Keep up the momentum!",
        )
        return self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.PROGRAM_COMPLETED,
                category=NotificationCategory.PROGRAM_ASSIGNED,
                title="Program Completed!",
                message="Congratulations on completing your training program!",
                metadata={"program_id": event.program_id},
            ),
        )

    def handle_achievement_earned(self, event: AchievementEarned) -> Notification | None:
        client = self._resolve_client(event.client_id, "achievement notification")
        if client is None:
            return None

        self._sender.send_email(
            client.email,
            "🎉 Achievement Unlocked!",
            f"Congratulations {client.first_name}!\n\nYou've earned a new achievement: "
            f"{event.title}\n\n{event.description or ''}\n\nKeep up the great work!",
        )
        return self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.ACHIEVEMENT,
                category=NotificationCategory.ACHIEVEMENT,
                title="Achievement Unlocked!",
                message=f"Congratulations! You've earned: {event.title}",
                metadata={"achievement_id": event.achievement_id, "type": event.type},
            ),
        )

    def handle_milestone_reached(self, event: MilestoneReached) -> Notification | None:
        client = self._resolve_client(event.client_id, "milestone notification")
        if client is None:
            return None

        self._sender.send_email(
            client.email,
            "🎯 Milestone Achieved!",
            f"Congratulations {client.first_name}!\n\nYou've reached a new milestone:\n"
            f"{event.milestone_type}: {event.achieved_value}\n\n"
            f"Progress from: {event.previous_value} → {event.achieved_value}\n\n"
            "Keep up the amazing work!",
        )
        return self._store.append(
            event.recipient_id,
            NotificationDraft(
                type=NotificationType.MILESTONE,
                category=NotificationCategory.ACHIEVEMENT,
                title="Milestone Achieved!",
                message=f"You've reached: {event.milestone_type}",
                metadata=dict(event.raw),
            ),
        )

    def _resolve_client(self, client_id: Any, purpose: str) -> UserContact | None:
        client = self._resolver.get_user_contact(client_id)
        if client is None:
            logger.error("Could not fetch client %s for %s", client_id, purpose)
        return client

    def _fallback_address(self, client_id: Any) -> str:
        return f"client-{client_id}@{self._fallback_email_domain}"


__all__ = ["ContactLookup", "DEFAULT_PROGRAM_NAME", "NotificationEventHandlers"]
