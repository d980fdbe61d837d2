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

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing JWT tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    password_hash_rounds: int = Field(
        default=310_000,
        description="Number of pbkdf2_sha256 rounds used to hash passwords",
        ge=1_000,
    )
    app_timezone: str = Field(
        default="UTC",
        description="Timezone used to store and compare event timestamps",
    )
    session_cookie_name: str = Field(
        default="session_token",
        description="Name of the HTTP-only cookie carrying the session token",
        min_length=1,
    )
    session_cookie_secure: bool = Field(
        default=False,
        description="Whether the session cookie is only sent over HTTPS",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
    activity_poll_interval_seconds: float = Field(
        default=10.0,
        description="Seconds between two refreshes of the activity dashboard",
        gt=0,
    )
    activity_request_timeout_seconds: float = Field(
        default=8.0,
        description="Timeout applied to each activity dashboard request",
        gt=0,
    )
    log_level: str = Field(
        default="INFO",
        description="Log level applied to the application logger",
    )

    @model_validator(mode="after")
    def _validate_activity_polling(self) -> "Settings":
        if self.activity_request_timeout_seconds > self.activity_poll_interval_seconds:
            raise ValueError(
                "ACTIVITY_REQUEST_TIMEOUT_SECONDS must not exceed "
                "ACTIVITY_POLL_INTERVAL_SECONDS"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
