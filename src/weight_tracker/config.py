"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from weight_tracker.domain.weights import DateRange, Unit

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    weight_api_url: str = "http://localhost:8080/api/v1"
    weight_api_timeout_seconds: float = 10.0
    default_unit: Unit = Unit.IMPERIAL
    default_range: DateRange = DateRange.LAST_MONTH
    timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
