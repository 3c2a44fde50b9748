"""Event handling: dispatch table and per-event notification handlers."""

from .dispatcher import EventDispatcher, EventHandler, build_dispatcher
from .handlers import DEFAULT_PROGRAM_NAME, ContactLookup, NotificationEventHandlers

__all__ = [
    "ContactLookup",
    "DEFAULT_PROGRAM_NAME",
    "EventDispatcher",
    "EventHandler",
    "NotificationEventHandlers",
    "build_dispatcher",
]
