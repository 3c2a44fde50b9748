"""Translate exceptions into the JSON error envelope."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from notification_service.domain.exceptions import NotificationNotFoundError
from notification_service.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error surfaced to HTTP callers with a stable ``code``."""

    def __init__(self, status_code: int, code: str, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message


class MissingUserIdError(ApiError):
    def __init__(self) -> None:
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            "MISSING_USER_ID",
            "user_id query parameter required",
        )


# Any method/path pair without a route is reported as an unknown endpoint.
_UNMATCHED_ROUTE_STATUSES = frozenset(
    {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}
)


def error_response(
    status_code: int,
    code: str,
    message: str,
    *,
    with_timestamp: bool = False,
    tz: tzinfo | None = None,
) -> JSONResponse:
    error: dict[str, str] = {"code": code, "message": message}
    if with_timestamp:
        timestamp = datetime.now(tz=tz) if tz is not None else now_in_app_timezone()
        error["timestamp"] = timestamp.isoformat()
    return JSONResponse(status_code=status_code, content={"success": False, "error": error})


def _request_timezone(request: Request) -> tzinfo | None:
    return getattr(request.app.state, "timezone", None)


async def _handle_api_error(request: Request, exc: ApiError) -> JSONResponse:
    return error_response(exc.status_code, exc.code, exc.message)


async def _handle_not_found(request: Request, exc: NotificationNotFoundError) -> JSONResponse:
    return error_response(status.HTTP_404_NOT_FOUND, "NOT_FOUND", "Notification not found")


async def _handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    tz = _request_timezone(request)
    if exc.status_code in _UNMATCHED_ROUTE_STATUSES:
        return error_response(
            status.HTTP_404_NOT_FOUND,
            "NOT_FOUND",
            "Endpoint not found",
            with_timestamp=True,
            tz=tz,
        )
    return error_response(
        exc.status_code, "HTTP_ERROR", str(exc.detail), with_timestamp=True, tz=tz
    )


async def _handle_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred",
        with_timestamp=True,
        tz=_request_timezone(request),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on ``app``."""

    app.add_exception_handler(ApiError, _handle_api_error)
    app.add_exception_handler(NotificationNotFoundError, _handle_not_found)
    app.add_exception_handler(StarletteHTTPException, _handle_http_exception)
    app.add_exception_handler(Exception, _handle_unexpected)


__all__ = [
    "ApiError",
    "MissingUserIdError",
    "error_response",
    "register_exception_handlers",
]
