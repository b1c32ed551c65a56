"""
Configuration package for the cache facade.

This package provides centralized, type-safe configuration management
using Pydantic Settings, plus the shared constants and enums.
"""

from .constants import DEFAULT_TIMEOUT, BackendType, CacheEvent, ExecutionMode
from .settings import (
    Settings,
    get_settings,
    reload_settings,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "BackendType",
    "CacheEvent",
    "ExecutionMode",
    "Settings",
    "get_settings",
    "reload_settings",
]
