"""Records returned by the collaborator services."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _optional_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value)
    return text or None


@dataclass
class UserContact:
    """Contact details of a platform user."""

    id: str
    first_name: str
    email: str
    last_name: str | None = None
    role: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "UserContact":
        known = {"id", "first_name", "email", "last_name", "role"}
        return cls(
            id=str(payload.get("id", "")),
            first_name=str(payload.get("first_name") or ""),
            email=str(payload.get("email") or ""),
            last_name=_optional_str(payload.get("last_name")),
            role=_optional_str(payload.get("role")),
            extra={key: value for key, value in payload.items() if key not in known},
        )


@dataclass
class Program:
    """Training program summary."""

    id: str
    name: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Program":
        return cls(
            id=str(payload.get("id", "")),
            name=_optional_str(payload.get("name")),
            extra={
                key: value for key, value in payload.items() if key not in {"id", "name"}
            },
        )


@dataclass
class Booking:
    """Scheduled training session."""

    id: str
    booking_date: str | None = None
    start_time: str | None = None
    status: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "Booking":
        known = {"id", "booking_date", "start_time", "status"}
        return cls(
            id=str(payload.get("id", "")),
            booking_date=_optional_str(payload.get("booking_date")),
            start_time=_optional_str(payload.get("start_time")),
            status=_optional_str(payload.get("status")),
            extra={key: value for key, value in payload.items() if key not in known},
        )


__all__ = ["Booking", "Program", "UserContact"]
