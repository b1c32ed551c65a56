"""
Pytest Configuration and Shared Test Fixtures

This module provides pytest configuration and reusable fixtures for all tests.
All fixtures defined here are automatically available to all test files.
"""

import os
from unittest.mock import MagicMock

import pytest

from tests.test_fixtures.cache_factory import CacheTestFactory

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def test_settings(tmp_path):
    """
    Real Settings instance pointing the shared store at a temp directory.

    Built without reading .env so local files cannot leak into tests.
    """
    from cache_facade.core.config.settings import Settings

    return Settings(
        _env_file=None,
        SHARED_CACHE_DIRECTORY=str(tmp_path / "shared"),
        CACHE_DEFAULT_TIMEOUT=600,
        MEMCACHE_HOST="memcache.test",
        MEMCACHED_HOST="memcached.test",
        REDIS_HOST="redis.test",
    )


@pytest.fixture
def memcache_config():
    """Valid connection dict for the memcache backends."""
    return {"host": "localhost", "port": 11211, "timeout": 120}


@pytest.fixture
def redis_config():
    """Valid connection dict for the Redis backend."""
    return {"host": "localhost", "port": 6379, "timeout": 120}


# ============================================================================
# Observer Fixtures
# ============================================================================


@pytest.fixture
def observer():
    """
    Fresh CacheObserver.

    Pass it explicitly (observers=[observer]) to get counts isolated from
    the process-wide observer.
    """
    from cache_facade.infrastructure.monitoring import CacheObserver

    return CacheObserver()


@pytest.fixture
def mock_observer():
    """Observer recording every update() call."""
    return MagicMock(spec=["update"])


# ============================================================================
# Backend Fixtures
# ============================================================================


@pytest.fixture
def runtime_cache(observer):
    """Interactive RuntimeCache reporting to the observer fixture."""
    from cache_facade.infrastructure.cache import RuntimeCache

    return RuntimeCache(observers=[observer])


@pytest.fixture
def memcache_store():
    """In-memory stand-in for a pymemcache client; inspect .data directly."""
    return CacheTestFactory.memcache_client()


@pytest.fixture
def memcache_client(memcache_store):
    """memcache_store wrapped for call assertions."""
    return MagicMock(wraps=memcache_store)


@pytest.fixture
def redis_store():
    """In-memory stand-in for a redis.Redis client; inspect .data directly."""
    return CacheTestFactory.redis_client()


@pytest.fixture
def redis_client(redis_store):
    """redis_store wrapped for call assertions."""
    return MagicMock(wraps=redis_store)


@pytest.fixture
def memcache_cache(memcache_config, observer, memcache_client):
    """Legacy MemcacheCache talking to an in-memory client."""
    from cache_facade.infrastructure.cache import MemcacheCache

    cache = MemcacheCache(memcache_config, observers=[observer])
    cache._client = memcache_client
    return cache


@pytest.fixture
def memcached_cache(memcache_config, observer, memcache_client):
    """Pooled MemcachedCache talking to an in-memory client."""
    from cache_facade.infrastructure.cache import MemcachedCache

    cache = MemcachedCache(memcache_config, observers=[observer])
    cache._client = memcache_client
    return cache


@pytest.fixture
def redis_cache(redis_config, observer, redis_client):
    """RedisCache without front tier talking to an in-memory client."""
    from cache_facade.infrastructure.cache import RedisCache

    cache = RedisCache(redis_config, observers=[observer])
    cache._client = redis_client
    return cache


@pytest.fixture
def shared_cache(tmp_path, observer):
    """SharedMemoryCache on a temp directory, closed after the test."""
    from cache_facade.infrastructure.cache import SharedMemoryCache

    cache = SharedMemoryCache(directory=str(tmp_path / "store"), observers=[observer])
    yield cache
    cache.close()


# ============================================================================
# Environment-Based Integration Toggles
# ============================================================================


def _env_flag(name: str) -> bool:
    return os.getenv(name, "0").lower() in ("1", "true", "yes")


@pytest.fixture(scope="session")
def use_real_redis():
    """Check if real Redis should be used for integration tests."""
    return _env_flag("USE_REAL_REDIS")


@pytest.fixture(scope="session")
def use_real_memcached():
    """Check if a real memcached daemon should be used for integration tests."""
    return _env_flag("USE_REAL_MEMCACHED")
