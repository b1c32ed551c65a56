"""
Interfaces Module

Protocols decoupling application code from concrete cache backends.
"""

from cache_facade.core.interfaces.cache import CacheInterface, CacheObserverProtocol

__all__ = [
    "CacheInterface",
    "CacheObserverProtocol",
]
