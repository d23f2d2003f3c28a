"""
Configuration and startup security checks for the message wall.

Settings are read from environment variables (and a local `.env`) with
pydantic-settings. `ensure_secure_config_on_startup` refuses to boot a
production-like deployment with obviously broken or insecure settings, while
development stays permissive.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal
from urllib.parse import urlparse

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

StorageProvider = Literal["digitalocean", "googledrive", "supabase"]

# Contract maximum for uploads; the env var may lower but never raise it.
IMAGE_CONTRACT_MAX_BYTES = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Message wall settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Environment
    ENVIRONMENT: str = "development"
    EVENT_TITLE: str = "Message Wall"
    PUBLIC_BASE_URL: str = ""

    # Monitoring
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Message store (Redis)
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_MAX_CONNECTIONS: int = 20
    MESSAGES_KEY: str = "messages"

    # Object storage
    STORAGE_PROVIDER: StorageProvider = "digitalocean"
    MAX_IMAGE_BYTES: int = IMAGE_CONTRACT_MAX_BYTES

    DO_SPACES_ENDPOINT: str = ""
    DO_SPACES_KEY: str = ""
    DO_SPACES_SECRET: str = ""
    DO_SPACES_BUCKET: str = ""
    DO_SPACES_REGION: str = ""

    GOOGLE_DRIVE_FOLDER_ID: str = ""
    GOOGLE_SERVICE_ACCOUNT_FILE: str = ""

    SUPABASE_URL: str = ""
    SUPABASE_SERVICE_ROLE_KEY: str = ""
    SUPABASE_STORAGE_BUCKET: str = "wall"

    # Display
    DISPLAY_REFRESH_SECONDS: float = 30.0
    DISPLAY_ROTATION_SECONDS: float = 6.0
    DISPLAY_POLL_SECONDS: float = 1.0
    DISPLAY_FEED_URL: str = ""

    @field_validator("STORAGE_PROVIDER", mode="before")
    @classmethod
    def _normalize_provider(cls, v: object) -> object:
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("MAX_IMAGE_BYTES")
    @classmethod
    def _clamp_image_bytes(cls, v: int) -> int:
        if v <= 0:
            return IMAGE_CONTRACT_MAX_BYTES
        return min(v, IMAGE_CONTRACT_MAX_BYTES)

    @field_validator("DISPLAY_REFRESH_SECONDS", "DISPLAY_ROTATION_SECONDS", "DISPLAY_POLL_SECONDS")
    @classmethod
    def _positive_interval(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("display intervals must be positive")
        return v

    @property
    def is_prod_like(self) -> bool:
        return (self.ENVIRONMENT or "").lower() in {"prod", "production", "stage", "staging"}

    def provider_configured(self) -> bool:
        """Return True when the active storage provider has its credentials."""
        if self.STORAGE_PROVIDER == "digitalocean":
            return all(
                (self.DO_SPACES_ENDPOINT, self.DO_SPACES_KEY, self.DO_SPACES_SECRET, self.DO_SPACES_BUCKET)
            )
        if self.STORAGE_PROVIDER == "googledrive":
            return bool(self.GOOGLE_DRIVE_FOLDER_ID and self.GOOGLE_SERVICE_ACCOUNT_FILE)
        return bool(self.SUPABASE_URL and self.SUPABASE_SERVICE_ROLE_KEY and self.SUPABASE_STORAGE_BUCKET)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def ensure_secure_config_on_startup(settings: Settings) -> None:
    """Fail fast on broken production configuration.

    Intent: Abort process startup when obviously insecure or incomplete
    settings are detected in production/staging. Development remains
    permissive for convenience.

    Checks:
    - The selected storage provider must have its credentials configured.
    - REDIS_URL must not point at localhost.
    - DISPLAY_FEED_URL, when set, must use https.
    """
    if not settings.is_prod_like:
        return  # dev/test remain permissive

    # 1) Storage provider credentials
    if not settings.provider_configured():
        raise SystemExit(
            f"Refusing to start: storage provider '{settings.STORAGE_PROVIDER}' is not fully configured in production."
        )

    # 2) Redis must be a real shared instance
    host = (urlparse(settings.REDIS_URL).hostname or "").lower()
    if host in {"", "localhost", "127.0.0.1"}:
        raise SystemExit("Refusing to start: REDIS_URL points at localhost in production.")

    # 3) Remote feed for the display must use HTTPS
    feed_url = settings.DISPLAY_FEED_URL.strip().lower()
    if feed_url.startswith("http://"):
        raise SystemExit("Refusing to start: DISPLAY_FEED_URL must use https in production (got http).")


__all__ = ["Settings", "StorageProvider", "get_settings", "ensure_secure_config_on_startup"]
