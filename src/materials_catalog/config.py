"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

ONE_WEEK_SECONDS = 60 * 60 * 24 * 7
ONE_YEAR_SECONDS = 60 * 60 * 24 * 365
FIVE_MIB = 5 * 1024 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    storage_bucket: str | None = None
    session_secret: str
    session_cookie_name: str = "catalog_session"
    session_max_age_seconds: int = ONE_WEEK_SECONDS
    signed_url_expires_seconds: int = ONE_YEAR_SECONDS
    max_upload_bytes: int = FIVE_MIB
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
