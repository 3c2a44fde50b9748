from .envelope import (
    ErrorDetail,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    NotificationListResponse,
    NotificationResponse,
    UnreadCountResponse,
)
from .notification import NotificationRead, UnreadCountRead

__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationRead",
    "NotificationResponse",
    "UnreadCountRead",
    "UnreadCountResponse",
]
