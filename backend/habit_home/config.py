"""
Application Settings

Environment-driven configuration for the Habit Home placement service.
Values can be overridden with ``HABIT_HOME_*`` environment variables or a
local ``.env`` file.
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service configuration."""

    model_config = SettingsConfigDict(
        env_prefix="HABIT_HOME_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "Habit Home Placement API"
    app_version: str = "0.1.0"
    api_prefix: str = "/api/v1"
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    debug: bool = False
    log_level: str = "INFO"

    # Surface filtering
    eye_level_m: float = Field(default=1.524, gt=0, description="5 ft, highest usable surface")
    surface_thickness_m: float = Field(default=0.02, ge=0, description="Placement indicator thickness")

    # Slider position used when a request carries no bias
    default_bias: float = Field(default=7.0, ge=0, le=10)


@lru_cache
def get_settings() -> Settings:
    """Return the cached application settings."""
    return Settings()
