"""
Cache Facade Protocols

This module defines the contract every cache backend of the facade
satisfies, and the contract of the observers notified by a backend.

Architectural Decision: Protocol-based abstraction
- Application code depends on CacheInterface, never on a concrete backend
- Facilitates testing with mock implementations
- Type-safe interface with runtime checking
"""

from typing import Any, Protocol, runtime_checkable

from cache_facade.core.config.constants import CacheEvent


@runtime_checkable
class CacheInterface(Protocol):
    """
    Uniform operation set shared by all cache backends.

    Entries are addressed by a (group, key) pair. None is the "absent"
    result: a None value is never stored, set() with None deletes.

    Implementations:
    - RuntimeCache: process-local dictionary
    - SharedMemoryCache: store shared by all processes of the host
    - MemcacheCache / MemcachedCache: memcached daemon (+ front tier)
    - RedisCache: Redis server (+ optional front tier)

    Usage:
        def load_user(cache: CacheInterface, user_id: str) -> dict | None:
            return cache.get("users", user_id)
    """

    def get(self, group: str, key: str) -> Any | None:
        """
        Return the value stored under (group, key).

        Returns:
            The value, or None when nothing is stored, the payload cannot
            be decoded, or the backend could not be reached.
        """
        ...

    def set(self, group: str, key: str, value: Any = None, timeout: int | None = None) -> None:
        """
        Store value under (group, key) for timeout seconds.

        A None value is handled as clear_key(group, key).
        """
        ...

    def exists(self, group: str, key: str) -> bool:
        """Return True iff a following get() would return a value."""
        ...

    def clear_key(self, group: str, key: str) -> None:
        """Remove the entry identified by (group, key)."""
        ...

    def clear(self, key: str) -> None:
        """
        Remove the entry stored under the already normalized key.

        Clearing an absent key is not an error.
        """
        ...

    def get_all_keys(self) -> list[str]:
        """
        List the normalized keys known to the backend.

        Best-effort: backends without an enumeration primitive return [].
        """
        ...


@runtime_checkable
class CacheObserverProtocol(Protocol):
    """
    Receiver of cache events.

    update() is called synchronously on the calling thread and must not
    raise for events it does not recognize.
    """

    def update(self, event: CacheEvent | str) -> None:
        ...
