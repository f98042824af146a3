# src/gym_traffic/utils/config.py
"""
Application settings.

Read from the environment (prefix GYM_) and an optional .env file.
The object is handed to the service explicitly; nothing reads it globally.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="GYM_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    timezone: str = "America/Chicago"
    default_facility: str = "activity-center"
    outlook_hours: int = Field(default=12, gt=0, le=24)

    # Weekly classification thresholds (capacity %)
    light_week_pct: int = 40
    busy_week_pct: int = 70


def load_config(**overrides) -> AppConfig:
    """Build settings from env/.env, with keyword overrides taking precedence."""
    return AppConfig(**overrides)
