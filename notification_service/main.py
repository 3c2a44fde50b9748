"""FastAPI application factory wiring the event pipeline and the HTTP API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from notification_service.application.events import (
    ContactLookup,
    NotificationEventHandlers,
    build_dispatcher,
)
from notification_service.config import Settings, get_settings
from notification_service.infrastructure.contact_resolver import ContactResolver
from notification_service.infrastructure.email import (
    NotificationSender,
    build_notification_sender,
)
from notification_service.infrastructure.event_subscriber import RedisEventSubscriber
from notification_service.infrastructure.notification_store import InMemoryNotificationStore
from notification_service.interfaces.api.errors import register_exception_handlers
from notification_service.interfaces.api.routes import register_routes
from notification_service.utils import resolve_app_timezone

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    *,
    store: InMemoryNotificationStore | None = None,
    resolver: ContactLookup | None = None,
    sender: NotificationSender | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Collaborators default to the production implementations built from
    ``settings``; tests pass their own.
    """

    settings = settings or get_settings()
    app_timezone = resolve_app_timezone(settings.app_timezone)
    if store is None:
        store = InMemoryNotificationStore(tz=app_timezone)
    owns_resolver = resolver is None
    if resolver is None:
        resolver = ContactResolver.from_settings(settings)
    if sender is None:
        sender = build_notification_sender(settings)

    handlers = NotificationEventHandlers(
        store=store,
        resolver=resolver,
        sender=sender,
        fallback_email_domain=settings.fallback_email_domain,
    )
    dispatcher = build_dispatcher(handlers)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Start the event subscriber on startup and release resources on shutdown."""

        subscriber: RedisEventSubscriber | None = None
        if settings.redis_url:
            subscriber = RedisEventSubscriber(settings.redis_url, dispatcher)
            subscriber.start()
        else:
            logger.info("REDIS_URL not configured; event subscription disabled")
        logger.info(
            "%s running on port %s (%s)",
            settings.service_name,
            settings.port,
            settings.environment,
        )
        yield
        if subscriber is not None:
            subscriber.stop()
        if owns_resolver and isinstance(resolver, ContactResolver):
            resolver.close()

    app = FastAPI(title=settings.service_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.timezone = app_timezone
    app.state.notification_store = store
    app.state.event_dispatcher = dispatcher

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    register_exception_handlers(app)
    register_routes(app)
    return app


__all__ = ["create_app"]
