"""Errors raised by the domain and application layers."""

from __future__ import annotations


class NotificationNotFoundError(LookupError):
    """Raised when a notification id does not exist in a user's list."""

    def __init__(self, user_id: str, notification_id: str) -> None:
        super().__init__(f"Notification {notification_id} not found for user {user_id}")
        self.user_id = user_id
        self.notification_id = notification_id


class InvalidEventPayloadError(ValueError):
    """Raised when an inbound event lacks the fields its handler needs."""

    def __init__(self, event_name: str, missing: list[str]) -> None:
        fields = ", ".join(missing)
        super().__init__(f"Event '{event_name}' is missing required fields: {fields}")
        self.event_name = event_name
        self.missing = missing


__all__ = ["InvalidEventPayloadError", "NotificationNotFoundError"]
