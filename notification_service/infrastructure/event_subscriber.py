"""Redis pub/sub listener feeding domain events to the dispatcher."""

from __future__ import annotations

import logging
from typing import Any

import redis

from notification_service.application.events import EventDispatcher

logger = logging.getLogger(__name__)


class RedisEventSubscriber:
    """Subscribe to one channel per event type and dispatch every message.

    Messages are handled one at a time on a background thread, in the order
    Redis delivers them.
    """

    def __init__(
        self,
        redis_url: str,
        dispatcher: EventDispatcher,
        *,
        client: Any = None,
        poll_interval: float = 0.1,
    ) -> None:
        self._dispatcher = dispatcher
        self._client = client or redis.Redis.from_url(redis_url)
        self._poll_interval = poll_interval
        self._pubsub: Any = None
        self._thread: Any = None

    @property
    def running(self) -> bool:
        return self._thread is not None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._pubsub = self._client.pubsub(ignore_subscribe_messages=True)
        self._pubsub.subscribe(
            **{name: self.handle_message for name in self._dispatcher.event_names}
        )
        self._thread = self._pubsub.run_in_thread(
            sleep_time=self._poll_interval, daemon=True
        )
        logger.info("Subscribed to all Redis event channels")

    def stop(self) -> None:
        if self._thread is None:
            return
        self._thread.stop()
        self._thread = None
        self._pubsub.close()
        self._pubsub = None
        self._client.close()
        logger.info("Redis subscriber closed")

    def handle_message(self, message: dict[str, Any]) -> None:
        """Dispatch one pub/sub ``message`` to its handler."""

        if message.get("type") != "message":
            return
        self._dispatcher.dispatch_raw(message["channel"], message["data"])


__all__ = ["RedisEventSubscriber"]
