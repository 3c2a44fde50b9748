"""Use cases for reading and managing stored notifications."""

from .count_unread_notifications import count_unread_notifications
from .delete_notification import delete_notification
from .list_notifications import list_notifications
from .mark_notification_read import mark_notification_read

__all__ = [
    "count_unread_notifications",
    "delete_notification",
    "list_notifications",
    "mark_notification_read",
]
