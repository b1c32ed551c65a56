"""
Redis Cache - Pooled Redis Backend

Redis server reached through a shared ConnectionPool.

Why Connection Pooling?
- Reuse connections instead of creating new ones per call
- Max connections: burst capacity without overloading the server
- One instance can be shared by request threads

The in-process front tier is optional (config "runtime_cache") and off by
default, so every read reaches the server and all processes observe the
same state. Key enumeration is not offered: get_all_keys() returns [].
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
    import redis
    from redis.exceptions import RedisError

    HAS_REDIS = True
except ImportError:
    HAS_REDIS = False

logger = get_logger(__name__)

DEFAULT_MAX_CONNECTIONS = 50


class RedisCache(TieredCache):
    """
    Redis backend.

    Args:
        config: {"host", "port", "timeout"?, "runtime_cache"?, "db"?,
            "password"?, "max_connections"?, "socket_timeout"?,
            "socket_connect_timeout"?}
        mode: Execution mode handed to the front tier
        observers: See Cache

    Raises:
        SystemComponentError: redis-py is not installed
        ConfigurationError: config is malformed (no socket is opened)
    """

    backend_name = "redis"

    def __init__(
        self,
        config: Mapping[str, Any],
        mode: ExecutionMode | str = ExecutionMode.INTERACTIVE,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        if not HAS_REDIS:
            raise SystemComponentError("MISSING_DRIVER_REDIS", details={"backend": self.backend_name})
        ensure_valid_connection(config, "INVALID_REDIS_SETUP")

        super().__init__(
            runtime_cache=bool(config.get("runtime_cache", False)),
            mode=mode,
            timeout=config.get("timeout"),
            observers=observers,
        )

        self._transient_errors = (RedisError, OSError)

        # The pool opens connections on first use, never here
        self._pool = redis.ConnectionPool(
            host=config["host"],
            port=config["port"],
            db=config.get("db") or 0,
            password=config.get("password"),
            max_connections=config.get("max_connections") or DEFAULT_MAX_CONNECTIONS,
            socket_timeout=config.get("socket_timeout") or DEFAULT_SOCKET_TIMEOUT,
            socket_connect_timeout=config.get("socket_connect_timeout") or DEFAULT_SOCKET_TIMEOUT,
            decode_responses=False,  # Payloads are raw JSON bytes
        )
        self._client = redis.Redis(connection_pool=self._pool)

        logger.info(
            "Redis cache initialized",
            stage="CACHE.INIT",
            host=config["host"],
            port=config["port"],
            db=config.get("db") or 0,
            runtime_cache=self._runtime_cache is not None,
            default_timeout=self._timeout,
        )

    def _backend_get(self, key: str) -> bytes | None:
        return self._client.get(key)

    def _backend_set(self, key: str, payload: bytes, timeout: int) -> None:
        # Redis rejects a zero expiry; 0 means "no expiry" here
        if timeout > 0:
            self._client.set(key, payload, ex=timeout)
        else:
            self._client.set(key, payload)

    def _backend_delete(self, key: str) -> None:
        self._client.delete(key)

    def close(self) -> None:
        super().close()
        self._pool.disconnect()
