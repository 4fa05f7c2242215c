"""deltoid configuration using pydantic-settings.

Settings are strongly typed and can be overridden through ``DELTOID_``
prefixed environment variables or a .env file.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_prefix="DELTOID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Upper bound on grid cells scanned by a single point enumeration
    MAX_ENCLOSED_POINTS: int = Field(default=1_000_000, gt=0)


# Singleton instance for import convenience
settings = Settings()
