"""
Cache-Related Exceptions

Errors raised while talking to a physical cache backend.
"""

from cache_facade.core.exceptions.base import CacheFacadeError


class CacheError(CacheFacadeError):
    """Base exception for cache operation errors."""
    pass


class CacheConnectionError(CacheError):
    """
    Raised when a backend cannot be reached.

    Common causes:
    - Daemon/server is down
    - Network connectivity issues
    - Socket timeout

    The facade never lets this escape a get/set/clear call; it is logged
    and the call degrades to a miss or a no-op.
    """
    pass


class CacheSerializationError(CacheError):
    """
    Raised when a value cannot be encoded into a payload.

    This is a caller bug (unsupported type), not a cache failure, so
    set() propagates it.
    """
    pass
