"""
Cache Infrastructure

Backends behind one (group, key) facade:
- RuntimeCache: process-local dictionary
- SharedMemoryCache: host-wide store
- MemcacheCache / MemcachedCache: memcached daemon with a runtime front tier
- RedisCache: Redis server with an optional runtime front tier
"""

from .base import Cache
from .codec import decode_value, encode_value, normalize_key
from .memcache_cache import MemcacheCache
from .memcached_cache import MemcachedCache
from .redis_cache import RedisCache
from .registry import CacheRegistry
from .runtime_cache import RuntimeCache
from .shared_cache import SharedMemoryCache
from .tiered import TieredCache

__all__ = [
    "Cache",
    "TieredCache",
    "RuntimeCache",
    "SharedMemoryCache",
    "MemcacheCache",
    "MemcachedCache",
    "RedisCache",
    "CacheRegistry",
    "normalize_key",
    "encode_value",
    "decode_value",
]
