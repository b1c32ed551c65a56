"""
Core Module

Foundational components: configuration, logging, exceptions, protocols
and validators.
"""

from .exceptions import (
    CacheConnectionError,
    CacheError,
    CacheFacadeError,
    CacheSerializationError,
    ConfigurationError,
    SystemComponentError,
    ValidationError,
)
from .interfaces import CacheInterface, CacheObserverProtocol
from .logging import (
    get_logger,
    log_stage,
    setup_logging,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "log_stage",
    "CacheFacadeError",
    "ConfigurationError",
    "SystemComponentError",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "ValidationError",
    "CacheInterface",
    "CacheObserverProtocol",
]
