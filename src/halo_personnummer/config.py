"""
Personnummer configuration management using pydantic-settings.

Process-wide defaults, overridable per call through ParseOptions.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PERSONNUMMER_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PERSONNUMMER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Parsing defaults
    allow_coordination_number: bool = Field(
        default=True,
        description="Accept coordination numbers (samordningsnummer) unless overridden",
    )

    # Application Settings
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level


# Global settings instance
settings = Settings()
