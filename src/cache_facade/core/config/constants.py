"""
System Constants and Enumerations

This module defines the constants and enumerations shared by every cache
backend of the facade.

Architectural Decision: Centralized constants for maintainability
- Single source of truth for defaults and wire-level strings
- Type-safe enums for event names and backend selection
- Easy to update and track changes
"""

from enum import Enum

# ============================================================================
# Cache Events (observer notifications)
# ============================================================================


class CacheEvent(str, Enum):
    """
    Events emitted by a cache facade to its observers.

    SET:  a non-null value was handed to the backend
    GET:  a physical lookup was attempted
    HIT:  the lookup produced a value
    MISS: the lookup produced nothing (or an undecodable payload)
    """

    SET = "SET"
    GET = "GET"
    HIT = "HIT"
    MISS = "MISS"


# ============================================================================
# Backend Types
# ============================================================================


class BackendType(str, Enum):
    """
    Physical backends a facade instance can be bound to.

    RUNTIME:   process-local dictionary (cheapest, not shared)
    SHARED:    store shared by all processes of the host
    MEMCACHE:  memcached daemon via the legacy single-connection client
    MEMCACHED: memcached daemon via the pooled client
    REDIS:     remote dictionary server
    """

    RUNTIME = "runtime"
    SHARED = "shared"
    MEMCACHE = "memcache"
    MEMCACHED = "memcached"
    REDIS = "redis"


# ============================================================================
# Execution Modes
# ============================================================================


class ExecutionMode(str, Enum):
    """
    Execution context of the process using the runtime cache.

    INTERACTIVE: long-lived request-serving process, the runtime cache is trusted
    BATCH:       one-shot job/consumer, runtime cache reads always miss
    """

    INTERACTIVE = "interactive"
    BATCH = "batch"


# ============================================================================
# Defaults
# ============================================================================

DEFAULT_TIMEOUT = 3600  # Entry lifetime handed to the backend (1 hour)
KEY_SEPARATOR = "_"  # Joins group and key
NAMESPACE_SEPARATOR = "\\"  # Flattened to KEY_SEPARATOR inside groups

DEFAULT_MEMCACHE_PORT = 11211
DEFAULT_REDIS_PORT = 6379
DEFAULT_SOCKET_TIMEOUT = 5  # Seconds

# Cache keys are truncated to this length in log entries
LOG_KEY_LENGTH = 40

# ============================================================================
# Memcached Administrative Protocol
# ============================================================================

ADMIN_LINE_TERMINATOR = "\r\n"
ADMIN_RESPONSE_TERMINATORS = (
    "END\r\n",
    "DELETED\r\n",
    "NOT_FOUND\r\n",
    "OK\r\n",
)
ADMIN_READ_SIZE = 256  # Bytes per socket read

# ============================================================================
# Metrics
# ============================================================================

PROMETHEUS_EVENTS_METRIC = "cache_facade_events_total"
