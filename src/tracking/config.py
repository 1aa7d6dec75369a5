"""Configuration management for runtrack."""

import logging
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models.units import UnitSystem
from .sources import LocationOptions

logger = logging.getLogger(__name__)

DEFAULT_STORE_PATH = Path.home() / ".config" / "runtrack" / "runs.json"


def find_env_file() -> Path | None:
    """Find .env file at git root (project root)."""
    # Search up for git root and use .env there
    current = Path.cwd()
    for parent in [current, *current.parents]:
        if (parent / ".git").exists():
            env_file = parent / ".env"
            if env_file.exists():
                return env_file
            break
    # Fallback to current directory
    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env
    return None


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every field can be set as RUNTRACK_<FIELD_NAME>, either in the
    environment or in a .env file at the project root.
    """

    model_config = SettingsConfigDict(
        env_prefix="RUNTRACK_",
        env_file=find_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Location fix requirements
    high_accuracy: bool = Field(
        default=True,
        description="Request high accuracy fixes from the location source",
    )
    location_timeout_millis: int = Field(
        default=5000,
        description="How long the location source may take to produce a fix",
        gt=0,
    )
    max_cached_age_millis: int = Field(
        default=0,
        description="Oldest cached fix accepted; 0 demands fresh fixes",
        ge=0,
    )

    # Run store
    store_path: Path = Field(
        default=DEFAULT_STORE_PATH,
        description="JSON file holding the local run log",
    )

    # Display
    unit_system: UnitSystem = Field(
        default=UnitSystem.METRIC,
        description="Units used when printing distances, paces and speeds",
    )
    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )

    @property
    def location_options(self) -> LocationOptions:
        """Fix requirements handed to the location source on subscribe."""
        return LocationOptions(
            high_accuracy=self.high_accuracy,
            timeout_millis=self.location_timeout_millis,
            max_cached_age_millis=self.max_cached_age_millis,
        )


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern).

    Returns:
        Settings instance with all configuration
    """
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug(f"Loaded settings: store_path={_settings.store_path}")
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
