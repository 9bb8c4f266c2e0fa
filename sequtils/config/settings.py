"""Configuration management using Pydantic Settings.

Settings are loaded from environment variables prefixed with ``SEQUTILS_``
and from an optional ``.env`` file. Nested groups use ``__`` as delimiter:

- SEQUTILS_LOGGING__CONSOLE_LEVEL=debug
- SEQUTILS_LOGGING__LOG_FILE=logs/sequtils.log
"""

from pathlib import Path

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Standard loguru severity names, lowest first
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class LoggingConfig(BaseModel):
    """Logging configuration for console and file output."""

    console_level: str = "INFO"
    file_level: str = "DEBUG"
    log_file: Path | None = None  # No file sink unless set

    @field_validator("console_level", "file_level", mode="before")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        """Upper-case a level name and reject names loguru doesn't know."""
        level = str(value).strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level {value!r}, expected one of {', '.join(LOG_LEVELS)}"
            )
        return level


class Settings(BaseSettings):
    """Library settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_prefix="SEQUTILS_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingConfig = LoggingConfig()


def get_settings() -> Settings:
    """Build a fresh Settings instance from the current environment.

    Nothing is loaded at import time; only setup_loguru_logger reads settings.
    """
    return Settings()

