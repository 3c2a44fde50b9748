"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING, extra="ignore"
    )

    service_name: str = Field(
        default="notification-service",
        description="Name reported by the health check endpoint",
        min_length=1,
    )
    environment: str = Field(
        default="development",
        description="Deployment environment label used in startup logs",
    )
    port: int = Field(default=3005, description="Port the HTTP server listens on", gt=0)
    log_level: str = Field(default="INFO", description="Root logging level")
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used for notification timestamps",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        description="Origins allowed to call the HTTP API",
    )
    user_service_url: str = Field(
        default="http://localhost:3001",
        description="Base URL of the user service",
        min_length=1,
    )
    training_service_url: str = Field(
        default="http://localhost:3002",
        description="Base URL of the training (programs) service",
        min_length=1,
    )
    schedule_service_url: str = Field(
        default="http://localhost:8003",
        description="Base URL of the schedule (bookings) service",
        min_length=1,
    )
    service_timeout_seconds: float = Field(
        default=5.0,
        description="Timeout applied to every outbound call to a collaborator service",
        gt=0,
    )
    redis_url: str | None = Field(
        default=None,
        description="Redis URL used to subscribe to domain events; disabled when unset",
    )
    fallback_email_domain: str = Field(
        default="fitsync.com",
        description="Domain used to address clients whose contact was not resolved",
        min_length=1,
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending notification emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of notification emails",
        min_length=3,
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
