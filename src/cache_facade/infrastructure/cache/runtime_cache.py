"""
Runtime Cache - Process-Local Tier

A dictionary living as long as the process. Used on its own as the
cheapest backend, and as the front tier of the networked backends.

Values are kept as-is (no payload encoding) since they never leave the
process. The dictionary holds references: mutating a value after store()
or after fetch() changes what later reads return, so callers treat cached
values as read-only. The tiered backends store a decoded copy of what they
wrote, never the caller's object.

Execution modes:
- INTERACTIVE: reads are served from the dictionary
- BATCH: reads always miss, forcing one-shot jobs and consumers to consult
  the authoritative backend. Writes, exists() and clear() are unaffected.

Thread-Safety: all dictionary access happens under an RLock, so one
instance can be shared by request threads.
"""

import threading
from collections.abc import Iterable
from typing import Any

from cache_facade.core.config.constants import CacheEvent, ExecutionMode
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger, log_stage
from cache_facade.infrastructure.cache.base import Cache

logger = get_logger(__name__)


class RuntimeCache(Cache):
    """
    In-process, non-persistent cache.

    Args:
        mode: Execution mode of the owning process
        timeout: Accepted for interface parity; entries live until cleared
        observers: See Cache. Front tiers are built with observers=() so
            their traffic is not counted twice.
    """

    def __init__(
        self,
        mode: ExecutionMode | str = ExecutionMode.INTERACTIVE,
        timeout: int | None = None,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        super().__init__(timeout=timeout, observers=observers)
        self._mode = ExecutionMode(mode)
        self._entries: dict[str, Any] = {}
        self._lock = threading.RLock()

    @property
    def mode(self) -> ExecutionMode:
        return self._mode

    # -------------------------------------------------------------------------
    # Normalized-key access (used by owning backends)
    # -------------------------------------------------------------------------

    def fetch(self, normalized: str) -> Any | None:
        """Return the value under a normalized key, honouring the execution mode."""
        if self._mode is ExecutionMode.BATCH:
            return None
        with self._lock:
            return self._entries.get(normalized)

    def store(self, normalized: str, value: Any) -> None:
        with self._lock:
            self._entries[normalized] = value

    def contains(self, normalized: str) -> bool:
        with self._lock:
            return normalized in self._entries

    def flush(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    # -------------------------------------------------------------------------
    # Cache API
    # -------------------------------------------------------------------------

    def get(self, group: str, key: str) -> Any | None:
        if self._mode is ExecutionMode.BATCH:
            return None

        normalized = self.normalize_key(group, key)
        self._notify(CacheEvent.GET)
        value = self.fetch(normalized)

        if value is None:
            self._notify(CacheEvent.MISS)
            return None

        self._notify(CacheEvent.HIT)
        return value

    def _store(self, normalized: str, value: Any, timeout: int) -> None:
        log_stage(logger, "CACHE.SET", "Runtime cache set", level="debug", cache_key=normalized)
        self.store(normalized, value)

    def exists(self, group: str, key: str) -> bool:
        return self.contains(self.normalize_key(group, key))

    def clear(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def get_all_keys(self) -> list[str]:
        with self._lock:
            return list(self._entries)

    def close(self) -> None:
        self.flush()
