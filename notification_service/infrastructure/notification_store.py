"""In-memory storage for notification entities."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from datetime import datetime, tzinfo

from notification_service.domain.entities import Notification, NotificationDraft
from notification_service.domain.exceptions import NotificationNotFoundError
from notification_service.utils import now_in_app_timezone


class InMemoryNotificationStore:
    """Provide CRUD operations for :class:`Notification` objects.

    Records are kept per user in insertion order and live only as long as the
    process. Every operation takes the store lock, so handlers running on the
    event listener thread and API requests served from the threadpool never
    interleave on the same list.
    """

    def __init__(
        self,
        *,
        clock: Callable[[], float] = time.time,
        tz: tzinfo | None = None,
    ) -> None:
        self._notifications: dict[str, list[Notification]] = {}
        self._lock = threading.RLock()
        self._clock = clock
        self._tz = tz
        self._last_id = 0

    def append(self, user_id: str, draft: NotificationDraft) -> Notification:
        with self._lock:
            notification = Notification(
                id=self._next_id(),
                user_id=user_id,
                type=draft.type,
                category=draft.category,
                title=draft.title,
                message=draft.message,
                metadata=dict(draft.metadata),
                created_at=self._now(),
                read_at=None,
            )
            self._notifications.setdefault(user_id, []).append(notification)
            return notification

    def list(self, user_id: str) -> list[Notification]:
        with self._lock:
            return list(self._notifications.get(user_id, ()))

    def find_by_id(self, user_id: str, notification_id: str) -> Notification | None:
        with self._lock:
            for notification in self._notifications.get(user_id, ()):
                if notification.id == notification_id:
                    return notification
        return None

    def mark_read(self, user_id: str, notification_id: str) -> Notification:
        """Set ``read_at`` on the stored record and return it."""

        with self._lock:
            notification = self.find_by_id(user_id, notification_id)
            if notification is None:
                raise NotificationNotFoundError(user_id, notification_id)
            notification.mark_read(self._now())
            return notification

    def delete(self, user_id: str, notification_id: str) -> None:
        with self._lock:
            notifications = self._notifications.get(user_id, [])
            for index, notification in enumerate(notifications):
                if notification.id == notification_id:
                    del notifications[index]
                    return
        raise NotificationNotFoundError(user_id, notification_id)

    def unread_count(self, user_id: str) -> int:
        with self._lock:
            return sum(
                1
                for notification in self._notifications.get(user_id, ())
                if notification.read_at is None
            )

    def clear(self) -> None:
        """Drop every stored notification."""

        with self._lock:
            self._notifications.clear()

    def _now(self) -> datetime:
        if self._tz is None:
            return now_in_app_timezone()
        return datetime.now(tz=self._tz)

    def _next_id(self) -> str:
        # Millisecond timestamps, bumped when two appends share a millisecond.
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return str(candidate)


__all__ = ["InMemoryNotificationStore"]
