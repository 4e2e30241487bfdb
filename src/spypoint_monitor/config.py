"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from spypoint_monitor.adapters.spypoint_client import DEFAULT_BASE_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    spypoint_username: str
    spypoint_password: str
    spypoint_base_url: str = DEFAULT_BASE_URL
    http_timeout_seconds: float = 15
    camera_cache_ttl_seconds: int = 300
    default_photo_limit: int = 50
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
