#!/usr/bin/env python3
"""
Cache Observer - Event Counting for Every Cache Backend

Every cache backend notifies its attached observers of SET, GET, HIT and
MISS events. CacheObserver turns those notifications into four independent
counters; PrometheusCacheObserver additionally exports them.

Architectural Decision: injectable sink with a process-wide default
- get_cache_observer() returns the instance every backend attaches by default,
  so counts aggregate across all backends of the process
- Tests construct a fresh CacheObserver and pass it explicitly to get
  isolated counts

Thread-Safety:
- Increments happen under a lock; counters are independent so no ordering
  between them is guaranteed
"""

import threading
from typing import Any

from prometheus_client import Counter

from cache_facade.core.config.constants import PROMETHEUS_EVENTS_METRIC, CacheEvent
from cache_facade.core.config.settings import get_settings
from cache_facade.core.logging.logger import get_logger

logger = get_logger(__name__)


# ============================================================================
# Metric Definitions
# ============================================================================

CACHE_EVENTS = Counter(
    PROMETHEUS_EVENTS_METRIC,
    'Total cache facade events',
    ['event']  # SET, GET, HIT, MISS
)


class CacheObserver:
    """
    Counts cache events.

    Responsibility: One counter per recognized event, nothing else.

    Unrecognized event names are ignored so newer backends can emit events
    older observers do not know about.

    Usage:
        observer = CacheObserver()
        cache = RuntimeCache(observers=[observer])
        cache.set("users", "42", {"name": "Ann"})
        observer.count_set  # 1
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts: dict[CacheEvent, int] = {event: 0 for event in CacheEvent}

    def update(self, event: CacheEvent | str) -> None:
        """
        Record one event.

        Args:
            event: CacheEvent or its name ("SET", "GET", "HIT", "MISS")
        """
        try:
            event = CacheEvent(event)
        except ValueError:
            return

        with self._lock:
            self._counts[event] += 1

        self._export(event)

    def _export(self, event: CacheEvent) -> None:
        """Hook for subclasses forwarding events to a metrics backend."""

    @property
    def count_set(self) -> int:
        return self._counts[CacheEvent.SET]

    @property
    def count_get(self) -> int:
        return self._counts[CacheEvent.GET]

    @property
    def count_hit(self) -> int:
        return self._counts[CacheEvent.HIT]

    @property
    def count_miss(self) -> int:
        return self._counts[CacheEvent.MISS]

    def stats(self) -> dict[str, Any]:
        """
        Get cache performance statistics.

        Returns:
            Dict with the four counters and the hit rate over answered lookups
        """
        with self._lock:
            counts = dict(self._counts)

        lookups = counts[CacheEvent.HIT] + counts[CacheEvent.MISS]
        hit_rate = counts[CacheEvent.HIT] / lookups if lookups > 0 else 0.0

        return {
            "sets": counts[CacheEvent.SET],
            "gets": counts[CacheEvent.GET],
            "hits": counts[CacheEvent.HIT],
            "misses": counts[CacheEvent.MISS],
            "hit_rate": round(hit_rate, 3),
        }

    def reset(self) -> None:
        """Zero all counters. Never called by the backends themselves."""
        with self._lock:
            for event in self._counts:
                self._counts[event] = 0


class PrometheusCacheObserver(CacheObserver):
    """
    CacheObserver that also increments the cache_facade_events_total counter.

    The Prometheus counter is process-wide; reset() only affects the local
    counts.
    """

    def _export(self, event: CacheEvent) -> None:
        CACHE_EVENTS.labels(event=event.value).inc()


# =============================================================================
# GLOBAL INSTANCE (SINGLETON PATTERN)
# =============================================================================

_cache_observer: CacheObserver | None = None
_observer_lock = threading.Lock()


def get_cache_observer() -> CacheObserver:
    """
    Get the process-wide observer attached to backends by default.

    Returns:
        PrometheusCacheObserver when METRICS_PROMETHEUS_ENABLED is set,
        otherwise a plain CacheObserver
    """
    global _cache_observer

    if _cache_observer is None:
        with _observer_lock:
            if _cache_observer is None:
                if get_settings().METRICS_PROMETHEUS_ENABLED:
                    _cache_observer = PrometheusCacheObserver()
                else:
                    _cache_observer = CacheObserver()
                logger.info(
                    "Cache observer initialized",
                    stage="CACHE.INIT",
                    observer=type(_cache_observer).__name__,
                )

    return _cache_observer
