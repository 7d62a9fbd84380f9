"""
Request logger settings module.

Manages logger configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggerSettings(BaseSettings):
    """Request logger settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="REQUEST_LOGGER_",
        extra="ignore",
    )

    # Prepend X-Forwarded-For to request lines
    log_ip: bool = False

    # Destination of request lines: stdout or loguru
    writer: Literal["console", "loguru"] = "console"

    # None = auto-detect from the terminal
    colors: Optional[bool] = None

    # JSON bodies above this size are not inspected for a message
    max_body_bytes: int = 65536

    # Level for the logger's own diagnostics
    log_level: str = "INFO"


@lru_cache
def get_settings() -> LoggerSettings:
    """Get cached settings instance."""
    return LoggerSettings()
