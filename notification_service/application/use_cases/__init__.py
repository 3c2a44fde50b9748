"""Aggregate application use cases."""

from .notifications import (
    count_unread_notifications,
    delete_notification,
    list_notifications,
    mark_notification_read,
)

__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
]
