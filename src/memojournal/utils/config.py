"""Application configuration using pydantic-settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_data_dir() -> Path:
    return Path.home() / "MeetNote"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        data_dir: Directory holding one sub-directory per journal entry
        log_level: Minimum log level name (e.g. "DEBUG", "INFO")
        log_json: Render log events as JSON instead of console output
    """

    data_dir: Path = Field(default_factory=_default_data_dir)
    log_level: str = "INFO"
    log_json: bool = False

    model_config = SettingsConfigDict(
        env_prefix="MEMOJOURNAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings.

    Returns:
        Settings instance loaded from environment

    Note:
        Settings are cached for performance. Use get_settings.cache_clear()
        to reload settings in tests.
    """
    return Settings()


def get_data_dir() -> Path:
    """Get the configured data directory with ``~`` expanded."""
    return get_settings().data_dir.expanduser()
