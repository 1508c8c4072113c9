"""Configuration management for Castle Builder."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CASTLE_",
    )

    # Declaration defaults
    default_keep_name: str = Field(default="keep", min_length=1)
    default_hall_color: str = Field(default="white")

    # Logging
    log_level: str = Field(default="WARNING", description="DEBUG, INFO, WARNING or ERROR")
    log_json: bool = Field(default=False, description="Emit JSON log lines instead of console output")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
