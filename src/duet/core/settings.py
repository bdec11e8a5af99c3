"""Application settings and configuration.

This module defines all configuration options for the Duet message service.
Settings are loaded from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Duet", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Backing ordered collection: Redis sorted sets, or an in-process
    # collection for development and tests.
    store_backend: Literal["redis", "memory"] = Field(
        default="redis",
        alias="DUET_STORE_BACKEND",
    )

    # Redis configuration
    redis_url: str = Field(default="redis://localhost:6379/0", alias="REDIS_URL")
    redis_socket_timeout_seconds: float = Field(
        default=1.0,
        alias="REDIS_SOCKET_TIMEOUT_SECONDS",
    )
    redis_connect_timeout_seconds: float = Field(
        default=1.0,
        alias="REDIS_CONNECT_TIMEOUT_SECONDS",
    )
    redis_ping_on_startup: bool = Field(default=True, alias="REDIS_PING_ON_STARTUP")

    # Pagination defaults applied to pull requests that omit a limit
    default_pull_limit: int = Field(default=10, alias="DEFAULT_PULL_LIMIT")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def redis_options(self) -> dict[str, float]:
        """Return the timeout options passed to the Redis connection pool.

        Returns:
            Keyword arguments for ``redis.ConnectionPool.from_url``
        """
        return {
            "socket_timeout": self.redis_socket_timeout_seconds,
            "socket_connect_timeout": self.redis_connect_timeout_seconds,
        }


settings = Settings()
