"""Use case for listing a user's notifications."""

from notification_service.domain.entities import Notification
from notification_service.infrastructure.notification_store import InMemoryNotificationStore


def list_notifications(store: InMemoryNotificationStore, user_id: str) -> list[Notification]:
    """Return the notifications of ``user_id`` in the order they were created."""

    return store.list(user_id)
