"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    dairy_api_base_url: str
    request_timeout_seconds: float = 10.0
    timezone: str = "UTC"
    log_level: str = "INFO"
    window_days: int = 7
    chart_height: float = 300.0
    chart_min_scale: float = 10.0
    chart_axis_reserve: float = 32.0
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def normalize_base_url(raw: str) -> str:
    """Strip whitespace and trailing slashes from the backend base URL."""
    return raw.strip().rstrip("/")
