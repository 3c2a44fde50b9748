"""Route inbound events to the handler registered for their name."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Callable

from notification_service.domain.entities import DomainEvent, EventType, parse_event
from notification_service.domain.exceptions import InvalidEventPayloadError

logger = logging.getLogger(__name__)

EventHandler = Callable[[Any], Any]


class EventDispatcher:
    """Invoke exactly one handler per inbound event.

    The mapping must cover every :class:`EventType`. Unknown event names and
    payloads missing required fields are logged and dropped, and an exception
    raised by a handler never reaches the caller, so one bad event cannot stop
    the delivery of the next one.
    """

    def __init__(self, handlers: Mapping[EventType, EventHandler]) -> None:
        missing = [event_type.value for event_type in EventType if event_type not in handlers]
        if missing:
            raise ValueError(f"No handler registered for events: {', '.join(missing)}")
        self._handlers: dict[EventType, EventHandler] = dict(handlers)

    @property
    def event_names(self) -> list[str]:
        return [event_type.value for event_type in self._handlers]

    def dispatch(self, event_name: str, payload: Any) -> bool:
        """Handle ``payload`` for ``event_name``; return ``True`` if a handler ran."""

        event_type = EventType.from_name(event_name)
        if event_type is None:
            logger.warning("Ignoring unrecognized event '%s'", event_name)
            return False

        logger.info("Handling %s event: %s", event_type.value, payload)
        try:
            event: DomainEvent = parse_event(event_type, payload)
        except InvalidEventPayloadError as exc:
            logger.warning("Dropping %s event: %s", event_type.value, exc)
            return False

        try:
            self._handlers[event_type](event)
        except Exception:
            logger.exception("Handler for %s event failed", event_type.value)
            return False
        return True

    def dispatch_raw(self, event_name: str | bytes, raw: str | bytes) -> bool:
        """Decode a JSON message as received from the transport and dispatch it."""

        if isinstance(event_name, bytes):
            event_name = event_name.decode("utf-8", errors="replace")
        try:
            payload = json.loads(raw)
        except (TypeError, ValueError) as exc:
            logger.warning("Dropping %s event with malformed payload: %s", event_name, exc)
            return False
        return self.dispatch(event_name, payload)


def build_dispatcher(handlers: Any) -> EventDispatcher:
    """Create a dispatcher from an object exposing ``as_mapping()``."""

    return EventDispatcher(handlers.as_mapping())


__all__ = ["EventDispatcher", "EventHandler", "build_dispatcher"]
