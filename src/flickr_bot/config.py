"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    flickr_api_key: str
    flickr_api_url: str = "https://api.flickr.com/services/rest/"
    flickr_page_size: int = 100
    log_level: str = "INFO"
    microsoft_app_id: str | None = None
    microsoft_app_password: str | None = None
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3978
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
