"""
Shared Memory Cache - Host-Wide Store

Entries are shared by every process on the host through a diskcache store.
The default directory lives on /dev/shm, so the store stays memory-backed
and reads are about as cheap as a local map. There is no front tier for
the same reason.

Expiry is enforced by diskcache. Key enumeration is not offered:
get_all_keys() returns [].
"""

import sqlite3
from collections.abc import Iterable

from cache_facade.core.config.settings import get_settings
from cache_facade.core.exceptions import SystemComponentError
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger
from cache_facade.infrastructure.cache.tiered import TieredCache

try:
    import diskcache

    HAS_DISKCACHE = True
except ImportError:
    HAS_DISKCACHE = False

logger = get_logger(__name__)

# Seconds diskcache waits on the SQLite lock before raising Timeout
STORE_LOCK_TIMEOUT = 1


class SharedMemoryCache(TieredCache):
    """
    Host-wide shared cache.

    Args:
        directory: Store location; defaults to the configured shared directory
        timeout: Default entry lifetime in seconds, 0 meaning no expiry
        observers: See Cache

    Raises:
        SystemComponentError: diskcache is not installed or the store
            directory cannot be opened
    """

    backend_name = "shared"

    def __init__(
        self,
        directory: str | None = None,
        timeout: int | None = None,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        if not HAS_DISKCACHE:
            raise SystemComponentError("MISSING_DRIVER_DISKCACHE", details={"backend": self.backend_name})

        if directory is None:
            directory = get_settings().shared.SHARED_CACHE_DIRECTORY

        super().__init__(runtime_cache=False, timeout=timeout, observers=observers)

        try:
            self._store_handle = diskcache.Cache(directory, timeout=STORE_LOCK_TIMEOUT)
        except (OSError, sqlite3.Error) as e:
            raise SystemComponentError.from_exception(
                e, "SHARED_STORE_UNAVAILABLE", backend=self.backend_name, directory=directory
            ) from e

        self._transient_errors = (diskcache.Timeout, OSError, sqlite3.Error)

        logger.info(
            "Shared cache initialized",
            stage="CACHE.INIT",
            directory=self._store_handle.directory,
            default_timeout=self._timeout,
        )

    @property
    def directory(self) -> str:
        return self._store_handle.directory

    def _backend_get(self, key: str) -> bytes | None:
        return self._store_handle.get(key)

    def _backend_set(self, key: str, payload: bytes, timeout: int) -> None:
        self._store_handle.set(key, payload, expire=timeout or None)

    def _backend_delete(self, key: str) -> None:
        self._store_handle.delete(key)

    def close(self) -> None:
        super().close()
        self._store_handle.close()
