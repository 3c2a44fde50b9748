"""Use case for deleting a notification."""

import logging

from notification_service.infrastructure.notification_store import InMemoryNotificationStore

logger = logging.getLogger(__name__)


def delete_notification(
    store: InMemoryNotificationStore, user_id: str, notification_id: str
) -> None:
    """Delete the specified notification from the user's list."""

    store.delete(user_id, notification_id)
    logger.info("Deleted notification %s for user %s", notification_id, user_id)
