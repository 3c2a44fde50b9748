"""Endpoints to read and manage a user's in-app notifications."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from notification_service.application.use_cases.notifications import (
    count_unread_notifications,
    delete_notification as delete_notification_uc,
    list_notifications as list_notifications_uc,
    mark_notification_read,
)
from notification_service.domain.entities import Notification
from notification_service.infrastructure.notification_store import InMemoryNotificationStore
from notification_service.interfaces.api.dependencies import get_store, require_user_id
from notification_service.interfaces.api.schemas import (
    ErrorResponse,
    MessageResponse,
    NotificationListResponse,
    NotificationRead,
    NotificationResponse,
    UnreadCountRead,
    UnreadCountResponse,
)

router = APIRouter(prefix="/api/notifications", tags=["notifications"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing user_id"},
    404: {"model": ErrorResponse, "description": "Notification not found"},
}


def _to_read_model(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification)


@router.get(
    "",
    response_model=NotificationListResponse,
    responses={400: _ERROR_RESPONSES[400]},
)
def list_notifications(
    user_id: str = Depends(require_user_id),
    store: InMemoryNotificationStore = Depends(get_store),
) -> NotificationListResponse:
    """Return every notification of ``user_id``, oldest first."""

    notifications = list_notifications_uc(store, user_id)
    return NotificationListResponse(data=[_to_read_model(n) for n in notifications])


@router.get(
    "/unread/count",
    response_model=UnreadCountResponse,
    responses={400: _ERROR_RESPONSES[400]},
)
def unread_count(
    user_id: str = Depends(require_user_id),
    store: InMemoryNotificationStore = Depends(get_store),
) -> UnreadCountResponse:
    count = count_unread_notifications(store, user_id)
    return UnreadCountResponse(data=UnreadCountRead(count=count))


@router.put(
    "/{notification_id}/read",
    response_model=NotificationResponse,
    responses=_ERROR_RESPONSES,
)
def read_notification(
    notification_id: str,
    user_id: str = Depends(require_user_id),
    store: InMemoryNotificationStore = Depends(get_store),
) -> NotificationResponse:
    """Mark the notification as read and return it."""

    notification = mark_notification_read(store, user_id, notification_id)
    return NotificationResponse(data=_to_read_model(notification))


@router.delete(
    "/{notification_id}",
    response_model=MessageResponse,
    responses=_ERROR_RESPONSES,
)
def delete_notification(
    notification_id: str,
    user_id: str = Depends(require_user_id),
    store: InMemoryNotificationStore = Depends(get_store),
) -> MessageResponse:
    delete_notification_uc(store, user_id, notification_id)
    return MessageResponse(message="Notification deleted")
