"""Outbound notification transports (email and SMS)."""

from __future__ import annotations

import html
import json
import logging
from typing import Any, Protocol

from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from notification_service.config import Settings

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    """Capability used by event handlers to reach a user outside the app."""

    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        ...

    def send_sms(self, recipient: str, message: str) -> bool:
        ...


class LoggingNotificationSender:
    """Stand-in transport that only logs what would have been sent."""

    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        logger.info("[MOCK EMAIL] To: %s, Subject: %s", recipient, subject)
        logger.info("[MOCK EMAIL] Body: %s", body)
        return True

    def send_sms(self, recipient: str, message: str) -> bool:
        logger.info("[MOCK SMS] To: %s, Message: %s", recipient, message)
        return True


def _extract_sendgrid_error_details(body: Any) -> str | None:
    """Return a human readable description for a SendGrid error payload."""

    if body in (None, ""):
        return None

    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError:
            return None

    if isinstance(body, str):
        body = body.strip()
        if not body:
            return None
        try:
            parsed = json.loads(body)
        except json.JSONDecodeError:
            return body
    else:
        parsed = body

    if isinstance(parsed, dict):
        errors = parsed.get("errors")
        if isinstance(errors, list):
            messages: list[str] = []
            for item in errors:
                if not isinstance(item, dict):
                    continue
                message = item.get("message")
                help_link = item.get("help")
                if message and help_link:
                    messages.append(f"{message} (help: {help_link})")
                elif message:
                    messages.append(str(message))
            if messages:
                return "; ".join(messages)
        try:
            return json.dumps(parsed)
        except (TypeError, ValueError):
            return None

    if isinstance(parsed, list):
        return "; ".join(str(item) for item in parsed)

    return None


def _log_sendgrid_exception(exc: Exception) -> None:
    """Log a SendGrid API error with helpful troubleshooting details."""

    status_code = getattr(exc, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(exc, "body", None))

    if status_code and details:
        logger.error("SendGrid API request failed with status %s: %s", status_code, details)
    elif status_code:
        logger.error("SendGrid API request failed with status %s", status_code)
    elif details:
        logger.error("SendGrid API request failed: %s", details)
    else:
        logger.exception("Error sending email via SendGrid: %s", exc)


def _log_unsuccessful_response(response: Any) -> None:
    """Log details from an unsuccessful SendGrid response object."""

    status_code = getattr(response, "status_code", None)
    details = _extract_sendgrid_error_details(getattr(response, "body", None))

    if details:
        logger.error("SendGrid API responded with status %s: %s", status_code, details)
    else:
        logger.error("SendGrid API responded with status %s", status_code)


def _plain_text_to_html(body: str) -> str:
    paragraphs = [part for part in body.split("\n\n") if part.strip()]
    return "".join(
        "<p>{}</p>".format(html.escape(part).replace("\n", "<br>")) for part in paragraphs
    )


class SendGridNotificationSender:
    """Deliver emails through the SendGrid REST API.

    SMS has no real transport yet and is only logged.
    """

    def __init__(self, api_key: str, sender: str) -> None:
        self._api_key = api_key
        self._sender = sender

    def send_email(self, recipient: str, subject: str, body: str) -> bool:
        message = Mail(
            from_email=self._sender,
            to_emails=recipient,
            subject=subject,
            plain_text_content=body,
            html_content=_plain_text_to_html(body),
        )

        try:
            client = SendGridAPIClient(self._api_key)
            response = client.send(message)
        except Exception as exc:  # pragma: no cover - network failures depend on environment
            _log_sendgrid_exception(exc)
            return False

        status_code = getattr(response, "status_code", None)
        if not isinstance(status_code, int) or not 200 <= status_code < 300:
            _log_unsuccessful_response(response)
            return False

        logger.info("Email '%s' sent to %s", subject, recipient)
        return True

    def send_sms(self, recipient: str, message: str) -> bool:
        logger.info("[MOCK SMS] To: %s, Message: %s", recipient, message)
        return True


def build_notification_sender(settings: Settings) -> NotificationSender:
    """Return the SendGrid sender when configured, the logging stand-in otherwise."""

    if settings.sendgrid_api_key and settings.sendgrid_sender:
        return SendGridNotificationSender(settings.sendgrid_api_key, settings.sendgrid_sender)
    logger.info("SendGrid configuration incomplete; emails will only be logged")
    return LoggingNotificationSender()


__all__ = [
    "LoggingNotificationSender",
    "NotificationSender",
    "SendGridNotificationSender",
    "build_notification_sender",
]
