"""
Monitoring Module

Event counting and metrics export for the cache backends.
"""

from .cache_observer import (
    CacheObserver,
    PrometheusCacheObserver,
    get_cache_observer,
)

__all__ = [
    "CacheObserver",
    "PrometheusCacheObserver",
    "get_cache_observer",
]
