"""
Cache Facade

Uniform get/set/exists/clear over process-local, host-shared, memcached and
Redis backends, with event counting for hit-rate reporting.
"""

from cache_facade.core.config.constants import BackendType, CacheEvent, ExecutionMode
from cache_facade.core.exceptions import (
    CacheFacadeError,
    CacheSerializationError,
    ConfigurationError,
    SystemComponentError,
)
from cache_facade.infrastructure.cache import (
    Cache,
    CacheRegistry,
    MemcacheCache,
    MemcachedCache,
    RedisCache,
    RuntimeCache,
    SharedMemoryCache,
    normalize_key,
)
from cache_facade.infrastructure.monitoring import CacheObserver, get_cache_observer

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "BackendType",
    "CacheEvent",
    "ExecutionMode",
    "Cache",
    "CacheRegistry",
    "RuntimeCache",
    "SharedMemoryCache",
    "MemcacheCache",
    "MemcachedCache",
    "RedisCache",
    "CacheObserver",
    "get_cache_observer",
    "normalize_key",
    "CacheFacadeError",
    "ConfigurationError",
    "SystemComponentError",
    "CacheSerializationError",
]
