"""
Memcache Cache - Legacy Single-Connection Client

memcached daemon reached through one pymemcache base Client connection,
fronted by an owned runtime cache since the daemon may live on another
machine.

Besides the regular get/set/delete path this backend speaks the plain-text
administrative protocol directly over a socket. It is used only by
get_all_keys(), which walks "stats items" and "stats cachedump". The
statistics dialect is undocumented and differs between daemon versions,
so enumeration is best-effort: a partial or empty list is a valid answer.
"""

import re
import socket
import threading
from collections.abc import Iterable, Mapping
from typing import Any

from cache_facade.core.config.constants import (
    ADMIN_LINE_TERMINATOR,
    ADMIN_READ_SIZE,
    ADMIN_RESPONSE_TERMINATORS,
    DEFAULT_SOCKET_TIMEOUT,
    ExecutionMode,
)
from cache_facade.core.exceptions import CacheConnectionError, SystemComponentError
from cache_facade.core.interfaces import CacheObserverProtocol
from cache_facade.core.logging.logger import get_logger, log_stage
from cache_facade.core.validators import ensure_valid_connection
from cache_facade.infrastructure.cache.tiered import TieredCache

try:
    from pymemcache.client.base import Client
    from pymemcache.exceptions import MemcacheError

    HAS_PYMEMCACHE = True
except ImportError:
    HAS_PYMEMCACHE = False

logger = get_logger(__name__)

STATS_ITEMS_PATTERN = re.compile(r"STAT items:(\d+):number (\d+)")
CACHEDUMP_ITEM_PATTERN = re.compile(r"ITEM (\S+) ")

_TERMINATORS = tuple(t.encode() for t in ADMIN_RESPONSE_TERMINATORS)


class MemcacheCache(TieredCache):
    """
    Legacy memcached backend.

    Args:
        config: {"host", "port", "timeout"?, "socket_timeout"?}
        mode: Execution mode handed to the front tier
        observers: See Cache

    Raises:
        SystemComponentError: pymemcache is not installed
        ConfigurationError: config is malformed (no socket is opened)

    The single client connection is not thread-safe, so every client call
    is serialized by a lock.
    """

    backend_name = "memcache"

    def __init__(
        self,
        config: Mapping[str, Any],
        mode: ExecutionMode | str = ExecutionMode.INTERACTIVE,
        observers: Iterable[CacheObserverProtocol] | None = None,
    ):
        if not HAS_PYMEMCACHE:
            raise SystemComponentError("MISSING_DRIVER_PYMEMCACHE", details={"backend": self.backend_name})
        ensure_valid_connection(config, "INVALID_MEMCACHE_SETUP")

        super().__init__(runtime_cache=True, mode=mode, timeout=config.get("timeout"), observers=observers)

        self._host: str = config["host"]
        self._port: int = config["port"]
        self._socket_timeout = config.get("socket_timeout") or DEFAULT_SOCKET_TIMEOUT
        self._transient_errors = (MemcacheError, OSError)
        self._lock = threading.Lock()

        # pymemcache connects lazily on the first command
        self._client = Client(
            (self._host, self._port),
            connect_timeout=self._socket_timeout,
            timeout=self._socket_timeout,
            allow_unicode_keys=True,
            default_noreply=False,
        )

        logger.info(
            "Memcache cache initialized",
            stage="CACHE.INIT",
            host=self._host,
            port=self._port,
            default_timeout=self._timeout,
        )

    # -------------------------------------------------------------------------
    # Store primitives
    # -------------------------------------------------------------------------

    def _backend_get(self, key: str) -> bytes | None:
        with self._lock:
            return self._client.get(key)

    def _backend_set(self, key: str, payload: bytes, timeout: int) -> None:
        with self._lock:
            self._client.set(key, payload, expire=timeout)

    def _backend_delete(self, key: str) -> None:
        with self._lock:
            self._client.delete(key)

    # -------------------------------------------------------------------------
    # Administrative protocol
    # -------------------------------------------------------------------------

    def _send_command(self, command: str) -> str:
        """
        Send a raw command on a fresh connection and return the response.

        Reading stops at the first terminator (END, DELETED, NOT_FOUND, OK)
        or when the daemon closes the connection.

        Raises:
            CacheConnectionError: If the daemon cannot be reached
        """
        try:
            with socket.create_connection((self._host, self._port), timeout=self._socket_timeout) as conn:
                conn.sendall((command + ADMIN_LINE_TERMINATOR).encode())
                buffer = b""
                while True:
                    chunk = conn.recv(ADMIN_READ_SIZE)
                    if not chunk:
                        break
                    buffer += chunk
                    if any(terminator in buffer for terminator in _TERMINATORS):
                        break
        except OSError as e:
            raise CacheConnectionError.from_exception(
                e, host=self._host, port=self._port, command=command
            ) from e

        return buffer.decode("utf-8", errors="replace")

    def get_all_keys(self) -> list[str]:
        """
        Enumerate keys slab by slab.

        "stats items" reports "STAT items:<slab>:number <count>" per slab;
        each distinct slab is then dumped with "stats cachedump <slab> <count>"
        whose "ITEM <key> [...]" lines carry the keys.
        """
        keys: list[str] = []
        slabs: set[str] = set()

        try:
            stats = self._send_command("stats items")
            for line in stats.split(ADMIN_LINE_TERMINATOR):
                match = STATS_ITEMS_PATTERN.match(line)
                if match is None:
                    continue
                slab, number = match.groups()
                if slab in slabs:
                    continue
                slabs.add(slab)
                dump = self._send_command(f"stats cachedump {slab} {number}")
                keys.extend(CACHEDUMP_ITEM_PATTERN.findall(dump))
        except CacheConnectionError as e:
            log_stage(
                logger,
                "CACHE.ADMIN",
                "Key enumeration aborted, returning partial result",
                level="warning",
                keys_found=len(keys),
                **e.details,
            )

        return keys

    def close(self) -> None:
        super().close()
        with self._lock:
            self._client.close()
