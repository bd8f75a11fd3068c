"""12-factor configuration adapter using environment variables."""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from webrtc_presence.domain.models.presence_keys import DEFAULT_PREFIX


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Redis connection
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL for the shared presence store",
    )
    redis_socket_timeout: float = Field(
        default=5.0, description="Timeout for Redis commands in seconds"
    )
    redis_connect_timeout: float = Field(
        default=5.0, description="Timeout for establishing a Redis connection in seconds"
    )

    # Presence keys
    # Blank values fall back to the default namespace when keys are derived
    presence_prefix: str = Field(
        default=DEFAULT_PREFIX,
        description="Namespace prefix isolating this deployment's presence keys",
    )

    log_level: str = Field(default="INFO", description="Logging level for the CLI")

    @field_validator("redis_socket_timeout", "redis_connect_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("Redis timeouts must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        level: int = getattr(logging, self.log_level)
        return level
