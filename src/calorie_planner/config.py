"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from calorie_planner.services.metabolism import (
    DEFAULT_TARGET_CALORIES,
    SURPLUS_CALORIES,
)

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    api_token: str
    surplus_calories: int = SURPLUS_CALORIES
    default_target_calories: int = DEFAULT_TARGET_CALORIES
    day_timezone: str = "UTC"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
