"""
Cache Registry - Composition Root

Hands out one shared instance per backend type, built on first request from
the settings. Construction errors propagate to the caller and nothing is
remembered for that type, so a later call retries the construction.

Usage:
    registry = CacheRegistry()
    cache = registry.get(BackendType.REDIS)
    cache.set("users", "42", {"name": "Ada"})
"""

import threading
from collections.abc import Callable, Iterable

from cache_facade.core.config.constants import BackendType
from cache_facade.core.config.settings import Settings, get_settings
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger
from cache_facade.infrastructure.cache.base import Cache
from cache_facade.infrastructure.cache.memcache_cache import MemcacheCache
from cache_facade.infrastructure.cache.memcached_cache import MemcachedCache
from cache_facade.infrastructure.cache.redis_cache import RedisCache
from cache_facade.infrastructure.cache.runtime_cache import RuntimeCache
from cache_facade.infrastructure.cache.shared_cache import SharedMemoryCache

logger = get_logger(__name__)


class CacheRegistry:
    """
    Lazily built, shared backend instances.

    Args:
        settings: Configuration source; defaults to the global settings
        observers: Observers attached to every built backend; None attaches
            the process-wide observer
    """

    def __init__(
        self,
        settings: Settings | None = None,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        self._settings = settings or get_settings()
        self._observers = list(observers) if observers is not None else None
        self._instances: dict[BackendType, Cache] = {}
        self._lock = threading.Lock()

        self._builders: dict[BackendType, Callable[[], Cache]] = {
            BackendType.RUNTIME: self._build_runtime,
            BackendType.SHARED: self._build_shared,
            BackendType.MEMCACHE: self._build_memcache,
            BackendType.MEMCACHED: self._build_memcached,
            BackendType.REDIS: self._build_redis,
        }

    def get(self, backend: BackendType | str) -> Cache:
        """
        Return the shared instance for a backend type.

        Raises:
            ValueError: Unknown backend name
            ConfigurationError / SystemComponentError: From the backend
        """
        backend = BackendType(backend)

        with self._lock:
            instance = self._instances.get(backend)
            if instance is None:
                instance = self._builders[backend]()
                self._instances[backend] = instance
                logger.info("Cache backend registered", stage="CACHE.INIT", backend=backend.value)
            return instance

    def built(self) -> list[BackendType]:
        """Backend types constructed so far."""
        with self._lock:
            return list(self._instances)

    def close(self) -> None:
        """Close and forget every built instance."""
        with self._lock:
            instances, self._instances = self._instances, {}

        for backend, instance in instances.items():
            instance.close()
            logger.info("Cache backend closed", stage="CACHE.INIT", backend=backend.value)

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    @property
    def _mode(self):
        return self._settings.cache.CACHE_EXECUTION_MODE

    def _build_runtime(self) -> Cache:
        return RuntimeCache(
            mode=self._mode,
            timeout=self._settings.cache.CACHE_DEFAULT_TIMEOUT,
            observers=self._observers,
        )

    def _build_shared(self) -> Cache:
        shared = self._settings.shared
        return SharedMemoryCache(
            directory=shared.SHARED_CACHE_DIRECTORY,
            timeout=shared.SHARED_CACHE_TIMEOUT,
            observers=self._observers,
        )

    def _build_memcache(self) -> Cache:
        return MemcacheCache(
            self._settings.memcache.connection_config(), mode=self._mode, observers=self._observers
        )

    def _build_memcached(self) -> Cache:
        return MemcachedCache(
            self._settings.memcached.connection_config(), mode=self._mode, observers=self._observers
        )

    def _build_redis(self) -> Cache:
        return RedisCache(
            self._settings.redis.connection_config(), mode=self._mode, observers=self._observers
        )
