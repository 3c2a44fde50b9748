"""Response envelope shared by every endpoint."""

from __future__ import annotations

from pydantic import BaseModel

from .notification import NotificationRead, UnreadCountRead


class ErrorDetail(BaseModel):
    code: str
    message: str
    timestamp: str | None = None


class ErrorResponse(BaseModel):
    """Body returned for any failed request."""

    success: bool = False
    error: ErrorDetail


class NotificationListResponse(BaseModel):
    success: bool = True
    data: list[NotificationRead]


class NotificationResponse(BaseModel):
    success: bool = True
    data: NotificationRead


class UnreadCountResponse(BaseModel):
    success: bool = True
    data: UnreadCountRead


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class HealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str


__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
    "NotificationListResponse",
    "NotificationResponse",
    "UnreadCountResponse",
]
