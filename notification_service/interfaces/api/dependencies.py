"""FastAPI dependency utilities."""

from fastapi import Query, Request

from notification_service.infrastructure.notification_store import InMemoryNotificationStore
from notification_service.interfaces.api.errors import MissingUserIdError


def get_store(request: Request) -> InMemoryNotificationStore:
    """Return the notification store owned by the running application."""

    return request.app.state.notification_store


def require_user_id(
    user_id: str | None = Query(default=None, description="Owner of the notifications"),
) -> str:
    """Return the ``user_id`` query parameter or fail with ``MISSING_USER_ID``."""

    if user_id is None or not user_id.strip():
        raise MissingUserIdError()
    return user_id
