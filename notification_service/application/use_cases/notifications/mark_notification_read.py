"""Use case for marking a notification as read."""

from notification_service.domain.entities import Notification
from notification_service.infrastructure.notification_store import InMemoryNotificationStore


def mark_notification_read(
    store: InMemoryNotificationStore, user_id: str, notification_id: str
) -> Notification:
    """Mark the notification as read, raising ``NotificationNotFoundError`` if absent."""

    return store.mark_read(user_id, notification_id)
