"""Domain entities exposed by the application."""

from .contacts import Booking, Program, UserContact
from .events import (
    EVENT_PAYLOADS,
    AchievementEarned,
    BookingCancelled,
    BookingCompleted,
    BookingCreated,
    DomainEvent,
    EventType,
    MilestoneReached,
    ProgramAssigned,
    ProgramCompleted,
    parse_event,
)
from .notification import (
    Notification,
    NotificationCategory,
    NotificationDraft,
    NotificationType,
)

__all__ = [
    "AchievementEarned",
    "Booking",
    "BookingCancelled",
    "BookingCompleted",
    "BookingCreated",
    "DomainEvent",
    "EVENT_PAYLOADS",
    "EventType",
    "MilestoneReached",
    "Notification",
    "NotificationCategory",
    "NotificationDraft",
    "NotificationType",
    "Program",
    "ProgramAssigned",
    "ProgramCompleted",
    "UserContact",
    "parse_event",
]
