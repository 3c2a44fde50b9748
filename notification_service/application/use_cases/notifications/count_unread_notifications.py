"""Use case for counting unread notifications."""

from notification_service.infrastructure.notification_store import InMemoryNotificationStore


def count_unread_notifications(store: InMemoryNotificationStore, user_id: str) -> int:
    return store.unread_count(user_id)
