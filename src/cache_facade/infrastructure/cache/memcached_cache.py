"""
Memcached Cache - Pooled Client

memcached daemon reached through a pymemcache PooledClient, fronted by an
owned runtime cache.

Why a pool?
- Each borrowed connection is used by one thread at a time, so the
  instance can be shared by request threads without an extra lock
- Connections are created lazily and reused afterwards

The client offers no enumeration primitive, so get_all_keys() returns an
empty list.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from cache_facade.core.config.constants import DEFAULT_SOCKET_TIMEOUT, ExecutionMode
from cache_facade.core.exceptions import SystemComponentError
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger
from cache_facade.core.validators import ensure_valid_connection
from cache_facade.infrastructure.cache.tiered import TieredCache

try:
    from pymemcache.client.base import PooledClient
    from pymemcache.exceptions import MemcacheError

    HAS_PYMEMCACHE = True
except ImportError:
    HAS_PYMEMCACHE = False

logger = get_logger(__name__)

DEFAULT_MAX_POOL_SIZE = 32


class MemcachedCache(TieredCache):
    """
    Pooled memcached backend.

    Args:
        config: {"host", "port", "timeout"?, "socket_timeout"?, "max_pool_size"?}
        mode: Execution mode handed to the front tier
        observers: See Cache

    Raises:
        SystemComponentError: pymemcache is not installed
        ConfigurationError: config is malformed (no socket is opened)
    """

    backend_name = "memcached"

    def __init__(
        self,
        config: Mapping[str, Any],
        mode: ExecutionMode | str = ExecutionMode.INTERACTIVE,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        if not HAS_PYMEMCACHE:
            raise SystemComponentError("MISSING_DRIVER_PYMEMCACHE", details={"backend": self.backend_name})
        ensure_valid_connection(config, "INVALID_MEMCACHED_SETUP")

        super().__init__(runtime_cache=True, mode=mode, timeout=config.get("timeout"), observers=observers)

        socket_timeout = config.get("socket_timeout") or DEFAULT_SOCKET_TIMEOUT
        self._transient_errors = (MemcacheError, OSError)
        self._client = PooledClient(
            (config["host"], config["port"]),
            connect_timeout=socket_timeout,
            timeout=socket_timeout,
            max_pool_size=config.get("max_pool_size") or DEFAULT_MAX_POOL_SIZE,
            allow_unicode_keys=True,
            default_noreply=False,
        )

        logger.info(
            "Memcached cache initialized",
            stage="CACHE.INIT",
            host=config["host"],
            port=config["port"],
            default_timeout=self._timeout,
        )

    def _backend_get(self, key: str) -> bytes | None:
        return self._client.get(key)

    def _backend_set(self, key: str, payload: bytes, timeout: int) -> None:
        self._client.set(key, payload, expire=timeout)

    def _backend_delete(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        super().close()
        self._client.close()
