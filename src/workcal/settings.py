"""Configuration management using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``WORKCAL_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORKCAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage roots
    config_dir: Path = Path("config")
    cache_dir: Path = Path("cache")

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None
