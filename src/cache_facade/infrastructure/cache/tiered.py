"""
Tiered Cache - Front Tier + Authoritative Store

Shared read/write path of every backend that stores encoded payloads in an
external store (memcached, Redis, the shared store).

Algorithm:
    GET:   front tier → store → miss (back-fill front tier on store hit)
    SET:   store + front tier (write-through)
    CLEAR: front tier + store

The front tier is an optional RuntimeCache exclusively owned by the
instance. Without one every call goes to the store.
Values returned by get() on a front tier hit are the objects the tier holds;
callers must not mutate them in place.

Failure policy:
- Store errors listed in _transient_errors are logged and the call
  degrades to a miss / no-op. They are never retried and never raised.
- Events: GET is emitted whenever the store is queried, followed by HIT or
  MISS. Front tier hits emit nothing.
"""

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any

from cache_facade.core.config.constants import CacheEvent, ExecutionMode
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger, log_stage
from cache_facade.infrastructure.cache.base import Cache
from cache_facade.infrastructure.cache.runtime_cache import RuntimeCache

logger = get_logger(__name__)


class TieredCache(Cache):
    """
    Cache backed by an external store with an optional front tier.

    Subclasses set _transient_errors and implement the four store
    primitives, all keyed by the normalized key.
    """

    backend_name = "store"
    _transient_errors: tuple[type[BaseException], ...] = (OSError,)

    def __init__(
        self,
        runtime_cache: bool = False,
        mode: ExecutionMode | str = ExecutionMode.INTERACTIVE,
        timeout: int | None = None,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        super().__init__(timeout=timeout, observers=observers)
        self._runtime_cache: RuntimeCache | None = None
        if runtime_cache:
            self._runtime_cache = RuntimeCache(mode=mode, observers=())

    @property
    def runtime_cache(self) -> RuntimeCache | None:
        """The owned front tier, if enabled."""
        return self._runtime_cache

    # -------------------------------------------------------------------------
    # Store primitives
    # -------------------------------------------------------------------------

    @abstractmethod
    def _backend_get(self, key: str) -> bytes | str | None:
        """Return the stored payload or None."""

    @abstractmethod
    def _backend_set(self, key: str, payload: bytes, timeout: int) -> None:
        """Store a payload for timeout seconds."""

    @abstractmethod
    def _backend_delete(self, key: str) -> None:
        """Delete a key; deleting an absent key is not an error."""

    def _backend_exists(self, key: str) -> bool:
        """
        Check the store for a key.

        Fetches and decodes so the answer matches what get() would return:
        a stored JSON null or an undecodable payload is not present.
        """
        payload = self._backend_get(key)
        return payload is not None and self._decode(payload) is not None

    def _log_failure(self, stage: str, operation: str, key: str, error: BaseException) -> None:
        log_stage(
            logger,
            stage,
            "Cache backend call failed",
            level="warning",
            backend=self.backend_name,
            operation=operation,
            cache_key=key,
            error=str(error),
            error_type=type(error).__name__,
        )

    # -------------------------------------------------------------------------
    # Cache API
    # -------------------------------------------------------------------------

    def get(self, group: str, key: str) -> Any | None:
        normalized = self.normalize_key(group, key)

        if self._runtime_cache is not None:
            value = self._runtime_cache.fetch(normalized)
            if value is not None:
                log_stage(logger, "CACHE.GET", "Front tier hit", level="debug", cache_key=normalized)
                return value

        self._notify(CacheEvent.GET)
        try:
            payload = self._backend_get(normalized)
        except self._transient_errors as e:
            self._log_failure("CACHE.GET", "get", normalized, e)
            payload = None

        value = self._decode(payload) if payload is not None else None
        if value is None:
            self._notify(CacheEvent.MISS)
            return None

        self._notify(CacheEvent.HIT)
        if self._runtime_cache is not None:
            self._runtime_cache.store(normalized, value)
        return value

    def _store(self, normalized: str, value: Any, timeout: int) -> None:
        payload = self._encode(value)
        log_stage(
            logger, "CACHE.SET", "Cache set", level="debug",
            backend=self.backend_name, cache_key=normalized, timeout=timeout,
        )
        try:
            self._backend_set(normalized, payload, timeout)
        except self._transient_errors as e:
            self._log_failure("CACHE.SET", "set", normalized, e)

        # The front tier gets its own decoded copy so later caller mutation
        # of value cannot diverge from what the store holds
        if self._runtime_cache is not None:
            self._runtime_cache.store(normalized, self._decode(payload))

    def exists(self, group: str, key: str) -> bool:
        normalized = self.normalize_key(group, key)

        if self._runtime_cache is not None and self._runtime_cache.fetch(normalized) is not None:
            return True

        try:
            return self._backend_exists(normalized)
        except self._transient_errors as e:
            self._log_failure("CACHE.GET", "exists", normalized, e)
            return False

    def clear(self, key: str) -> None:
        log_stage(logger, "CACHE.CLEAR", "Cache invalidated", level="debug", backend=self.backend_name, cache_key=key)
        if self._runtime_cache is not None:
            self._runtime_cache.clear(key)

        try:
            self._backend_delete(key)
        except self._transient_errors as e:
            self._log_failure("CACHE.CLEAR", "delete", key, e)

    def close(self) -> None:
        if self._runtime_cache is not None:
            self._runtime_cache.flush()
