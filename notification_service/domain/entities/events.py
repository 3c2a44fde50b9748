"""Typed payloads for the domain events consumed by the service."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import MISSING, dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, TypeVar, Union

from notification_service.domain.exceptions import InvalidEventPayloadError


class EventType(str, Enum):
    """Event names, which double as the pub/sub channel names."""

    BOOKING_CREATED = "booking.created"
    BOOKING_CANCELLED = "booking.cancelled"
    BOOKING_COMPLETED = "booking.completed"
    PROGRAM_ASSIGNED = "program.assigned"
    PROGRAM_COMPLETED = "program.completed"
    ACHIEVEMENT_EARNED = "achievement.earned"
    MILESTONE_REACHED = "milestone.reached"

    @classmethod
    def from_name(cls, name: str) -> "EventType | None":
        """Return the member named ``name`` or ``None`` when unknown."""

        try:
            return cls(name)
        except ValueError:
            return None


_E = TypeVar("_E", bound="_EventPayload")


@dataclass(frozen=True)
class _EventPayload:
    """Base class providing construction from an untyped mapping.

    Fields declared without a default are required: a missing, ``None`` or
    empty-string value raises :class:`InvalidEventPayloadError`.
    """

    event_type: ClassVar[EventType]

    @classmethod
    def from_payload(cls: type[_E], payload: Mapping[str, Any]) -> _E:
        values: dict[str, Any] = {}
        missing: list[str] = []
        for item in fields(cls):
            if item.name == "raw":
                values["raw"] = dict(payload)
                continue
            value = payload.get(item.name)
            required = item.default is MISSING and item.default_factory is MISSING
            if required and value in (None, ""):
                missing.append(item.name)
                continue
            if value is not None:
                values[item.name] = value
        if missing:
            raise InvalidEventPayloadError(cls.event_type.value, missing)
        return cls(**values)

    @property
    def recipient_id(self) -> str:
        """Identifier of the user that receives the notification."""

        return str(getattr(self, "client_id"))


@dataclass(frozen=True)
class BookingCreated(_EventPayload):
    event_type: ClassVar[EventType] = EventType.BOOKING_CREATED

    booking_id: Any
    client_id: Any
    booking_date: Any
    start_time: Any
    trainer_id: Any = None


@dataclass(frozen=True)
class BookingCancelled(_EventPayload):
    event_type: ClassVar[EventType] = EventType.BOOKING_CANCELLED

    booking_id: Any
    client_id: Any
    reason: str | None = None
    trainer_id: Any = None


@dataclass(frozen=True)
class BookingCompleted(_EventPayload):
    event_type: ClassVar[EventType] = EventType.BOOKING_COMPLETED

    booking_id: Any
    client_id: Any
    trainer_id: Any = None
    workout_date: Any = None


@dataclass(frozen=True)
class ProgramAssigned(_EventPayload):
    event_type: ClassVar[EventType] = EventType.PROGRAM_ASSIGNED

    program_id: Any
    client_id: Any
    trainer_id: Any = None
    workout_plan_id: Any = None
    diet_plan_id: Any = None


@dataclass(frozen=True)
class ProgramCompleted(_EventPayload):
    event_type: ClassVar[EventType] = EventType.PROGRAM_COMPLETED

    program_id: Any
    client_id: Any
    trainer_id: Any = None


@dataclass(frozen=True)
class AchievementEarned(_EventPayload):
    event_type: ClassVar[EventType] = EventType.ACHIEVEMENT_EARNED

    achievement_id: Any
    client_id: Any
    title: str
    type: Any = None
    description: str | None = None


@dataclass(frozen=True)
class MilestoneReached(_EventPayload):
    """Milestone events keep the raw payload; it becomes the notification metadata."""

    event_type: ClassVar[EventType] = EventType.MILESTONE_REACHED

    client_id: Any
    milestone_type: str
    achieved_value: Any = None
    previous_value: Any = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


DomainEvent = Union[
    BookingCreated,
    BookingCancelled,
    BookingCompleted,
    ProgramAssigned,
    ProgramCompleted,
    AchievementEarned,
    MilestoneReached,
]

EVENT_PAYLOADS: dict[EventType, type[_EventPayload]] = {
    EventType.BOOKING_CREATED: BookingCreated,
    EventType.BOOKING_CANCELLED: BookingCancelled,
    EventType.BOOKING_COMPLETED: BookingCompleted,
    EventType.PROGRAM_ASSIGNED: ProgramAssigned,
    EventType.PROGRAM_COMPLETED: ProgramCompleted,
    EventType.ACHIEVEMENT_EARNED: AchievementEarned,
    EventType.MILESTONE_REACHED: MilestoneReached,
}


def parse_event(event_type: EventType, payload: Mapping[str, Any]) -> DomainEvent:
    """Build the typed payload for ``event_type`` from an untyped mapping."""

    if not isinstance(payload, Mapping):
        raise InvalidEventPayloadError(event_type.value, ["<payload>"])
    return EVENT_PAYLOADS[event_type].from_payload(payload)  # type: ignore[return-value]


__all__ = [
    "AchievementEarned",
    "BookingCancelled",
    "BookingCompleted",
    "BookingCreated",
    "DomainEvent",
    "EVENT_PAYLOADS",
    "EventType",
    "MilestoneReached",
    "ProgramAssigned",
    "ProgramCompleted",
    "parse_event",
]
