"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any


class NotificationType(str, Enum):
    """Originating event of a notification."""

    BOOKING_CONFIRMATION = "booking_confirmation"
    BOOKING_CANCELLATION = "booking_cancellation"
    BOOKING_COMPLETED = "booking_completed"
    PROGRAM_ASSIGNED = "program_assigned"
    PROGRAM_COMPLETED = "program_completed"
    ACHIEVEMENT = "achievement"
    MILESTONE = "milestone"


class NotificationCategory(str, Enum):
    """Coarse grouping used by clients to filter notifications."""

    BOOKING_CONFIRMATION = "booking_confirmation"
    BOOKING_REMINDER = "booking_reminder"
    PROGRAM_ASSIGNED = "program_assigned"
    ACHIEVEMENT = "achievement"


@dataclass
class NotificationDraft:
    """Content produced by an event handler before it is stored."""

    type: NotificationType
    category: NotificationCategory
    title: str
    message: str
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class Notification:
    """Information message delivered to a specific user."""

    id: str
    user_id: str
    type: NotificationType
    category: NotificationCategory
    title: str
    message: str
    created_at: datetime
    metadata: dict[str, Any] = field(default_factory=dict)
    read_at: datetime | None = None

    def mark_read(self, when: datetime) -> None:
        """Record ``when`` as the read time unless it was already read."""

        if self.read_at is None:
            self.read_at = when


__all__ = [
    "Notification",
    "NotificationCategory",
    "NotificationDraft",
    "NotificationType",
]
