#!/usr/bin/env python3
"""
Centralized Configuration Module using Pydantic Settings

This module provides type-safe, environment-based configuration for every
cache backend of the facade. All configuration is centralized here to ensure
consistency across modules.

Architectural Decision: Pydantic Settings for type safety and validation
- Environment variable loading with .env support
- Type validation at startup (fail fast on misconfiguration)
- Section views hand plain connection dicts to the backend adapters,
  which re-validate them with the ConnectionValidator
- Easy testing with override mechanisms
"""

import os
import tempfile
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cache_facade.core.config.constants import (
    DEFAULT_MEMCACHE_PORT,
    DEFAULT_REDIS_PORT,
    DEFAULT_SOCKET_TIMEOUT,
    DEFAULT_TIMEOUT,
    ExecutionMode,
)


def default_shared_directory() -> str:
    """
    Pick the directory backing the shared store.

    /dev/shm is memory-backed on Linux, which keeps the shared store as fast
    as a local map. Elsewhere the system temp directory is used.
    """
    if os.path.isdir("/dev/shm"):
        return "/dev/shm/cache_facade"
    return os.path.join(tempfile.gettempdir(), "cache_facade")


class CacheSettings(BaseSettings):
    """
    Behaviour shared by every backend.

    STAGE-CACHE.0: Facade defaults
    """

    CACHE_DEFAULT_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime (1 hour)")
    CACHE_EXECUTION_MODE: ExecutionMode = Field(
        default=ExecutionMode.INTERACTIVE,
        description="interactive processes trust the runtime cache, batch processes do not"
    )

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class MemcacheSettings(BaseSettings):
    """
    Legacy memcache daemon connection.

    STAGE-CACHE.1: Single connection, plain text protocol
    """

    MEMCACHE_HOST: str = Field(default="localhost", description="Memcache daemon host")
    MEMCACHE_PORT: int = Field(default=DEFAULT_MEMCACHE_PORT, description="Memcache daemon port")
    MEMCACHE_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    MEMCACHE_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)

    def connection_config(self) -> dict[str, Any]:
        """Connection dict handed to MemcacheCache."""
        return {
            "host": self.MEMCACHE_HOST,
            "port": self.MEMCACHE_PORT,
            "timeout": self.MEMCACHE_TIMEOUT,
            "socket_timeout": self.MEMCACHE_SOCKET_TIMEOUT,
        }


class MemcachedSettings(BaseSettings):
    """
    Pooled memcached daemon connection.

    STAGE-CACHE.2: Connection pool, safe to share across threads
    """

    MEMCACHED_HOST: str = Field(default="localhost", description="Memcached daemon host")
    MEMCACHED_PORT: int = Field(default=DEFAULT_MEMCACHE_PORT, description="Memcached daemon port")
    MEMCACHED_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    MEMCACHED_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")
    MEMCACHED_MAX_POOL_SIZE: int = Field(default=32, description="Maximum pooled connections")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)

    def connection_config(self) -> dict[str, Any]:
        """Connection dict handed to MemcachedCache."""
        return {
            "host": self.MEMCACHED_HOST,
            "port": self.MEMCACHED_PORT,
            "timeout": self.MEMCACHED_TIMEOUT,
            "socket_timeout": self.MEMCACHED_SOCKET_TIMEOUT,
            "max_pool_size": self.MEMCACHED_MAX_POOL_SIZE,
        }


class RedisSettings(BaseSettings):
    """
    Redis configuration.

    STAGE-CACHE.3: Redis connection configuration

    REDIS_RUNTIME_CACHE enables the in-process front tier. It is off by
    default so every call reaches the server and all processes observe the
    same state.
    """

    REDIS_HOST: str = Field(default="localhost", description="Redis server host")
    REDIS_PORT: int = Field(default=DEFAULT_REDIS_PORT, description="Redis server port")
    REDIS_DB: int = Field(default=0, description="Redis database number")
    REDIS_PASSWORD: str | None = Field(default=None, description="Redis password (if required)")
    REDIS_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    REDIS_RUNTIME_CACHE: bool = Field(default=False, description="Enable the in-process front tier")
    REDIS_MAX_CONNECTIONS: int = Field(default=50, description="Maximum pooled connections")
    REDIS_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")
    REDIS_SOCKET_CONNECT_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Connection timeout in seconds")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)

    def connection_config(self) -> dict[str, Any]:
        """Connection dict handed to RedisCache."""
        return {
            "host": self.REDIS_HOST,
            "port": self.REDIS_PORT,
            "timeout": self.REDIS_TIMEOUT,
            "runtime_cache": self.REDIS_RUNTIME_CACHE,
            "db": self.REDIS_DB,
            "password": self.REDIS_PASSWORD,
            "max_connections": self.REDIS_MAX_CONNECTIONS,
            "socket_timeout": self.REDIS_SOCKET_TIMEOUT,
            "socket_connect_timeout": self.REDIS_SOCKET_CONNECT_TIMEOUT,
        }


class SharedCacheSettings(BaseSettings):
    """
    Host-wide shared store.

    STAGE-CACHE.4: Shared store location
    """

    SHARED_CACHE_DIRECTORY: str = Field(
        default_factory=default_shared_directory,
        description="Directory backing the shared store"
    )
    SHARED_CACHE_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class LoggingSettings(BaseSettings):
    """
    Logging configuration for structured logging.

    STAGE-L: Logging configuration

    Architectural Decision: structlog for production-grade logging
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration sections.

    STAGE-0: Centralized configuration initialization

    Usage:
        from cache_facade.core.config.settings import get_settings

        settings = get_settings()
        redis_config = settings.redis.connection_config()
        mode = settings.cache.CACHE_EXECUTION_MODE
    """

    # Cache settings
    CACHE_DEFAULT_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime (1 hour)")
    CACHE_EXECUTION_MODE: ExecutionMode = Field(
        default=ExecutionMode.INTERACTIVE,
        description="interactive processes trust the runtime cache, batch processes do not"
    )

    # Memcache (legacy client) settings
    MEMCACHE_HOST: str = Field(default="localhost", description="Memcache daemon host")
    MEMCACHE_PORT: int = Field(default=DEFAULT_MEMCACHE_PORT, description="Memcache daemon port")
    MEMCACHE_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    MEMCACHE_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")

    # Memcached (pooled client) settings
    MEMCACHED_HOST: str = Field(default="localhost", description="Memcached daemon host")
    MEMCACHED_PORT: int = Field(default=DEFAULT_MEMCACHE_PORT, description="Memcached daemon port")
    MEMCACHED_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    MEMCACHED_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")
    MEMCACHED_MAX_POOL_SIZE: int = Field(default=32, description="Maximum pooled connections")

    # Redis settings
    REDIS_HOST: str = Field(default="localhost", description="Redis server host")
    REDIS_PORT: int = Field(default=DEFAULT_REDIS_PORT, description="Redis server port")
    REDIS_DB: int = Field(default=0, description="Redis database number")
    REDIS_PASSWORD: str | None = Field(default=None, description="Redis password (if required)")
    REDIS_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")
    REDIS_RUNTIME_CACHE: bool = Field(default=False, description="Enable the in-process front tier")
    REDIS_MAX_CONNECTIONS: int = Field(default=50, description="Maximum pooled connections")
    REDIS_SOCKET_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Socket timeout in seconds")
    REDIS_SOCKET_CONNECT_TIMEOUT: int = Field(default=DEFAULT_SOCKET_TIMEOUT, description="Connection timeout in seconds")

    # Shared store settings
    SHARED_CACHE_DIRECTORY: str = Field(
        default_factory=default_shared_directory,
        description="Directory backing the shared store"
    )
    SHARED_CACHE_TIMEOUT: int = Field(default=DEFAULT_TIMEOUT, description="Default entry lifetime")

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    # Metrics settings
    METRICS_PROMETHEUS_ENABLED: bool = Field(
        default=False,
        description="Mirror cache events into a Prometheus counter"
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    # Nested configuration objects
    @property
    def cache(self) -> 'CacheSettings':
        """Get facade-wide cache settings."""
        return CacheSettings(
            CACHE_DEFAULT_TIMEOUT=self.CACHE_DEFAULT_TIMEOUT,
            CACHE_EXECUTION_MODE=self.CACHE_EXECUTION_MODE
        )

    @property
    def memcache(self) -> 'MemcacheSettings':
        """Get legacy memcache settings."""
        return MemcacheSettings(
            MEMCACHE_HOST=self.MEMCACHE_HOST,
            MEMCACHE_PORT=self.MEMCACHE_PORT,
            MEMCACHE_TIMEOUT=self.MEMCACHE_TIMEOUT,
            MEMCACHE_SOCKET_TIMEOUT=self.MEMCACHE_SOCKET_TIMEOUT
        )

    @property
    def memcached(self) -> 'MemcachedSettings':
        """Get pooled memcached settings."""
        return MemcachedSettings(
            MEMCACHED_HOST=self.MEMCACHED_HOST,
            MEMCACHED_PORT=self.MEMCACHED_PORT,
            MEMCACHED_TIMEOUT=self.MEMCACHED_TIMEOUT,
            MEMCACHED_SOCKET_TIMEOUT=self.MEMCACHED_SOCKET_TIMEOUT,
            MEMCACHED_MAX_POOL_SIZE=self.MEMCACHED_MAX_POOL_SIZE
        )

    @property
    def redis(self) -> 'RedisSettings':
        """Get Redis settings."""
        return RedisSettings(
            REDIS_HOST=self.REDIS_HOST,
            REDIS_PORT=self.REDIS_PORT,
            REDIS_DB=self.REDIS_DB,
            REDIS_PASSWORD=self.REDIS_PASSWORD,
            REDIS_TIMEOUT=self.REDIS_TIMEOUT,
            REDIS_RUNTIME_CACHE=self.REDIS_RUNTIME_CACHE,
            REDIS_MAX_CONNECTIONS=self.REDIS_MAX_CONNECTIONS,
            REDIS_SOCKET_TIMEOUT=self.REDIS_SOCKET_TIMEOUT,
            REDIS_SOCKET_CONNECT_TIMEOUT=self.REDIS_SOCKET_CONNECT_TIMEOUT
        )

    @property
    def shared(self) -> 'SharedCacheSettings':
        """Get shared store settings."""
        return SharedCacheSettings(
            SHARED_CACHE_DIRECTORY=self.SHARED_CACHE_DIRECTORY,
            SHARED_CACHE_TIMEOUT=self.SHARED_CACHE_TIMEOUT
        )

    @property
    def logging(self) -> 'LoggingSettings':
        """Get logging settings."""
        return LoggingSettings(
            LOG_LEVEL=self.LOG_LEVEL,
            LOG_FORMAT=self.LOG_FORMAT
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Ignore extra environment variables
    )


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    STAGE-0.1: Settings initialization

    Returns:
        Settings: Global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        Settings: New settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
