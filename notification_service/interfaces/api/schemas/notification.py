"""Pydantic models describing notification payloads."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from notification_service.domain.entities import NotificationCategory, NotificationType


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    type: NotificationType
    category: NotificationCategory
    title: str
    message: str
    metadata: dict[str, Any] = Field(default_factory=dict)
    read_at: datetime | None = None
    created_at: datetime


class UnreadCountRead(BaseModel):
    count: int


__all__ = ["NotificationRead", "UnreadCountRead"]
