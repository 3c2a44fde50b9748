"""HTTP client for the user, training and schedule services."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any, Callable, TypeVar

import requests

from notification_service.config import Settings
from notification_service.domain.entities import Booking, Program, UserContact

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0

_T = TypeVar("_T")


class ContactResolver:
    """Translate identifiers into the details needed to build notifications.

    Every lookup degrades failures (timeouts, connection errors, non-2xx
    responses, malformed bodies) to ``None`` or an empty list after logging
    them. No call is retried.
    """

    def __init__(
        self,
        *,
        user_service_url: str,
        training_service_url: str,
        schedule_service_url: str,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._user_service_url = user_service_url.rstrip("/")
        self._training_service_url = training_service_url.rstrip("/")
        self._schedule_service_url = schedule_service_url.rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()

    @classmethod
    def from_settings(cls, settings: Settings) -> "ContactResolver":
        return cls(
            user_service_url=settings.user_service_url,
            training_service_url=settings.training_service_url,
            schedule_service_url=settings.schedule_service_url,
            timeout=settings.service_timeout_seconds,
        )

    def get_user_contact(self, user_id: Any) -> UserContact | None:
        data = self._request_data(
            "GET", f"{self._user_service_url}/api/users/{user_id}", f"user {user_id}"
        )
        return _build(UserContact.from_payload, data)

    def get_users_batch(self, user_ids: Iterable[Any]) -> list[UserContact]:
        """Return the contacts the user service knows about.

        The result may hold fewer entries than ``user_ids``; callers must not
        assume a one-to-one match.
        """

        unique_ids = sorted({str(user_id) for user_id in user_ids})
        if not unique_ids:
            return []
        data = self._request_data(
            "POST",
            f"{self._user_service_url}/api/users/batch",
            "users batch",
            json={"user_ids": unique_ids},
        )
        if not isinstance(data, list):
            if data is not None:
                logger.error("Unexpected users batch payload: %r", data)
            return []
        return [UserContact.from_payload(item) for item in data if isinstance(item, dict)]

    def get_program_details(self, program_id: Any) -> Program | None:
        data = self._request_data(
            "GET",
            f"{self._training_service_url}/api/programs/{program_id}",
            f"program {program_id}",
        )
        return _build(Program.from_payload, data)

    def get_booking_details(self, booking_id: Any) -> Booking | None:
        data = self._request_data(
            "GET",
            f"{self._schedule_service_url}/api/bookings/{booking_id}",
            f"booking {booking_id}",
        )
        return _build(Booking.from_payload, data)

    def close(self) -> None:
        self._session.close()

    def _request_data(
        self, method: str, url: str, description: str, **kwargs: Any
    ) -> Any:
        """Return the ``data`` entry of the JSON response, or ``None`` on failure."""

        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
            response.raise_for_status()
            body = response.json()
        except requests.RequestException as exc:
            logger.error("Error fetching %s: %s", description, exc)
            return None
        except ValueError as exc:
            logger.error("Error decoding %s response: %s", description, exc)
            return None

        if not isinstance(body, dict):
            logger.error("Unexpected %s response body: %r", description, body)
            return None
        return body.get("data")


def _build(factory: Callable[[dict[str, Any]], _T], data: Any) -> _T | None:
    if not isinstance(data, dict):
        return None
    return factory(data)


__all__ = ["ContactResolver", "DEFAULT_TIMEOUT_SECONDS"]
