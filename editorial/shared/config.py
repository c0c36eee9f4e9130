"""Shared configuration for the editorial package."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class LoggingSettings(BaseSettings):
    """Logging settings."""

    model_config = {"env_prefix": "EDITORIAL_LOG_", "case_sensitive": False}

    level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    json_format: bool = Field(
        default=False,
        description="Render log entries as JSON instead of console output",
    )
    service_name: str = Field(
        default="editorial",
        description="Service name bound to every log entry",
    )


@lru_cache
def get_logging_settings() -> LoggingSettings:
    """Get cached logging settings."""
    return LoggingSettings()
