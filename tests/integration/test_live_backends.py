"""
Integration Tests Against Live Daemons

Exercise the networked backends end to end. Skipped unless the matching
USE_REAL_* toggle is set.
"""

import uuid

import pytest

from cache_facade.core.config.settings import Settings
from cache_facade.infrastructure.cache import MemcacheCache, MemcachedCache, RedisCache


@pytest.fixture
def live_settings():
    return Settings()


@pytest.fixture
def group():
    """Unique group so runs do not see each other's entries."""
    return f"it_{uuid.uuid4().hex[:8]}"


@pytest.mark.integration
class TestLiveRedis:
    @pytest.fixture
    def cache(self, use_real_redis, live_settings, observer):
        if not use_real_redis:
            pytest.skip("USE_REAL_REDIS not set")
        cache = RedisCache(live_settings.redis.connection_config(), observers=[observer])
        yield cache
        cache.close()

    def test_round_trip(self, cache, group):
        cache.set(group, "42", {"name": "Ann"}, timeout=30)

        assert cache.get(group, "42") == {"name": "Ann"}
        assert cache.exists(group, "42") is True

        cache.clear_key(group, "42")
        assert cache.get(group, "42") is None


@pytest.mark.integration
class TestLiveMemcached:
    @pytest.fixture(params=[MemcacheCache, MemcachedCache])
    def cache(self, request, use_real_memcached, live_settings, observer):
        if not use_real_memcached:
            pytest.skip("USE_REAL_MEMCACHED not set")
        config = live_settings.memcached.connection_config()
        cache = request.param(config, observers=[observer])
        yield cache
        cache.close()

    def test_round_trip_through_daemon(self, cache, group):
        cache.set(group, "k", [1, 2, 3], timeout=30)
        cache.runtime_cache.flush()

        assert cache.get(group, "k") == [1, 2, 3]

        cache.clear_key(group, "k")
        cache.runtime_cache.flush()
        assert cache.get(group, "k") is None

    def test_legacy_enumeration_is_best_effort(self, cache, group):
        cache.set(group, "k", 1, timeout=30)

        keys = cache.get_all_keys()

        assert isinstance(keys, list)
