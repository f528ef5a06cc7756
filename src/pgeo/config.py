"""pgeo configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: Literal["console", "json"] = "console"

    # Interactive console
    MAX_INPUT_ATTEMPTS: int = Field(default=3, ge=1)  # tries per coordinate prompt

    # Output
    DISPLAY_PRECISION: int = Field(default=4, ge=0, le=15)  # decimals in results


# Singleton instance for import convenience
settings = Settings()
