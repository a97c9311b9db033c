"""Library configuration via Pydantic Settings.

Configuration is loaded from ``PLUS_CODES_``-prefixed environment variables
or a ``.env`` file. Only runtime concerns live here; the code format
constants are fixed in ``plus_codes.lib.olc.alphabet``.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PLUS_CODES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_dir: str | None = Field(
        default=None,
        description="Directory for log files (enables file logging with 24h rotation when set)",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        if v.upper() not in _LOG_LEVELS:
            msg = f"Invalid log_level: must be one of {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return v.upper()

    # Environment
    environment: str = Field(
        default="production",
        description="Deployment environment name (e.g. production, dev, staging)",
    )


def get_settings() -> Settings:
    """Create and return library settings."""
    return Settings()
