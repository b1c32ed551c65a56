"""
Cache Base Class

Every backend derives from Cache. The base class owns everything that must
behave identically across backends:

- key normalization (KeyCodec) and payload encode/decode (ValueCodec)
- observer wiring and event notification
- the set() template: a None value clears the entry, anything else is
  stored and reported as a SET event
- clear_key() always routes through clear() with the normalized key

Subclasses implement the physical lookup (get), the physical write
(_store) and removal (clear).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

import orjson

from cache_facade.core.config.constants import DEFAULT_TIMEOUT, CacheEvent
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger, log_stage
from cache_facade.infrastructure.cache.codec import decode_value, encode_value, normalize_key
from cache_facade.infrastructure.monitoring.cache_observer import get_cache_observer

logger = get_logger(__name__)


class Cache(ABC):
    """
    Abstract cache facade.

    Args:
        timeout: Default entry lifetime in seconds used when set() gets none
        observers: Observers to notify; None attaches the process-wide
            observer, an empty iterable attaches nothing
    """

    def __init__(
        self,
        timeout: int | None = None,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        self._timeout = DEFAULT_TIMEOUT if timeout is None else timeout
        self._observers: list[CacheObserverProtocol] = []

        if observers is None:
            observers = [get_cache_observer()]
        for observer in observers:
            self.attach(observer)

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def attach(self, observer: CacheObserverProtocol) -> None:
        """Subscribe an observer to this instance's events."""
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: CacheObserverProtocol) -> None:
        """Unsubscribe an observer; unknown observers are ignored."""
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self, event: CacheEvent) -> None:
        for observer in self._observers:
            observer.update(event)

    # -------------------------------------------------------------------------
    # Codecs
    # -------------------------------------------------------------------------

    @staticmethod
    def normalize_key(group: str, key: str) -> str:
        return normalize_key(group, key)

    @staticmethod
    def _encode(value: Any) -> bytes:
        return encode_value(value)

    @staticmethod
    def _decode(payload: bytes | str) -> Any | None:
        """Decode a payload; an undecodable payload counts as absent."""
        try:
            return decode_value(payload)
        except orjson.JSONDecodeError as e:
            log_stage(logger, "CACHE.GET", "Discarding undecodable payload", level="debug", error=str(e))
            return None

    @property
    def timeout(self) -> int:
        """Default entry lifetime in seconds."""
        return self._timeout

    def _resolve_timeout(self, timeout: int | None) -> int:
        return self._timeout if timeout is None else timeout

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @abstractmethod
    def get(self, group: str, key: str) -> Any | None:
        """Return the value stored under (group, key), or None."""

    def set(self, group: str, key: str, value: Any = None, timeout: int | None = None) -> None:
        """
        Store value under (group, key).

        A None value is never stored: the entry is cleared instead and no
        SET event is emitted.

        Raises:
            CacheSerializationError: If a backend has to encode the value
                and it has no payload representation
        """
        if value is None:
            log_stage(logger, "CACHE.SET", "Null value, clearing entry", level="debug", group=group, key=key)
            self.clear_key(group, key)
            return

        normalized = self.normalize_key(group, key)
        self._store(normalized, value, self._resolve_timeout(timeout))
        self._notify(CacheEvent.SET)

    @abstractmethod
    def _store(self, normalized: str, value: Any, timeout: int) -> None:
        """Write a non-null value under the normalized key."""

    def exists(self, group: str, key: str) -> bool:
        """
        Return True iff a following get() would return a value.

        Backends without events on the lookup path override this.
        """
        return self.get(group, key) is not None

    def clear_key(self, group: str, key: str) -> None:
        self.clear(self.normalize_key(group, key))

    @abstractmethod
    def clear(self, key: str) -> None:
        """Remove the entry under the normalized key; absent keys are ignored."""

    def get_all_keys(self) -> list[str]:
        """
        List the normalized keys known to the backend.

        The default is for backends with no enumeration primitive.
        """
        return []

    def close(self) -> None:
        """Release connections or files held by the backend."""
