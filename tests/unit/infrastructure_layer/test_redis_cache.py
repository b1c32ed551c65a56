"""
Unit Tests for RedisCache

Tests the Redis adapter with and without the optional front tier.
"""

from unittest.mock import patch

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from cache_facade.core.exceptions import CacheSerializationError, ConfigurationError, SystemComponentError
from cache_facade.infrastructure.cache import RedisCache
from cache_facade.infrastructure.cache import redis_cache as redis_module
from tests.test_fixtures.cache_factory import CacheTestFactory


@pytest.mark.unit
class TestRedisCache:
    """Test suite for RedisCache without front tier."""

    def test_front_tier_disabled_by_default(self, redis_cache):
        assert redis_cache.runtime_cache is None

    def test_scenario_set_get_clear(self, redis_cache, observer):
        """set, get, then clear_key on users/42."""
        redis_cache.set("users", "42", {"name": "Ann"})
        assert redis_cache.get("users", "42") == {"name": "Ann"}

        redis_cache.clear_key("users", "42")
        assert redis_cache.get("users", "42") is None

        assert observer.stats() == {"sets": 1, "gets": 2, "hits": 1, "misses": 1, "hit_rate": 0.5}

    def test_every_read_reaches_server(self, redis_cache, redis_client):
        redis_cache.set("users", "42", 1)

        redis_cache.get("users", "42")
        redis_cache.get("users", "42")

        assert redis_client.get.call_count == 2

    def test_set_passes_expiry(self, redis_cache, redis_client):
        redis_cache.set("users", "42", 1, timeout=30)

        redis_client.set.assert_called_once_with("USERS_42", b"1", ex=30)

    def test_zero_timeout_means_no_expiry(self, redis_cache, redis_store):
        redis_cache.set("users", "42", 1, timeout=0)

        assert redis_store.ttl["USERS_42"] is None

    def test_exists_is_silent(self, redis_cache, observer):
        redis_cache.set("users", "42", 1)

        assert redis_cache.exists("users", "42") is True
        assert redis_cache.exists("users", "43") is False
        assert observer.count_get == 0

    @pytest.mark.parametrize("payload", [b"null", b"\x80bad"])
    def test_exists_agrees_with_get_for_absent_payloads(self, redis_cache, redis_store, payload):
        """Test that a key holding null or garbage is reported absent, as get() does."""
        redis_store.data["USERS_42"] = payload

        assert redis_cache.get("users", "42") is None
        assert redis_cache.exists("users", "42") is False

    def test_nan_is_rejected_before_reaching_server(self, redis_cache, redis_client, observer):
        with pytest.raises(CacheSerializationError):
            redis_cache.set("users", "42", {"score": float("nan")})

        redis_client.set.assert_not_called()
        assert observer.count_set == 0

    def test_get_all_keys_is_empty(self, redis_cache):
        redis_cache.set("users", "42", 1)
        assert redis_cache.get_all_keys() == []

    def test_connection_error_degrades(self, redis_cache, observer):
        redis_cache._client = CacheTestFactory.failing_client(RedisConnectionError("down"))

        redis_cache.set("users", "42", 1)
        assert redis_cache.get("users", "42") is None
        assert redis_cache.exists("users", "42") is False
        redis_cache.clear_key("users", "42")

        assert observer.count_set == 1
        assert observer.count_miss == 1


@pytest.mark.unit
class TestRedisFrontTier:
    """Test RedisCache with runtime_cache enabled."""

    @pytest.fixture
    def tiered_redis(self, redis_config, observer, redis_client):
        cache = RedisCache({**redis_config, "runtime_cache": True}, observers=[observer])
        cache._client = redis_client
        return cache

    def test_front_tier_enabled(self, tiered_redis):
        assert tiered_redis.runtime_cache is not None

    def test_front_tier_hit_skips_server(self, tiered_redis, redis_client, observer):
        tiered_redis.set("users", "42", {"name": "Ann"})

        assert tiered_redis.get("users", "42") == {"name": "Ann"}

        redis_client.get.assert_not_called()
        assert observer.count_get == 0

    def test_server_hit_back_fills(self, tiered_redis, redis_store, redis_client):
        redis_store.data["USERS_42"] = b'"cached"'

        tiered_redis.get("users", "42")
        tiered_redis.get("users", "42")

        assert redis_client.get.call_count == 1

    def test_clear_drops_front_tier(self, tiered_redis):
        tiered_redis.set("users", "42", 1)

        tiered_redis.clear_key("users", "42")

        assert tiered_redis.get("users", "42") is None


@pytest.mark.unit
class TestRedisConstruction:
    def test_pool_configuration(self, redis_config):
        config = {**redis_config, "db": 3, "password": "secret", "max_connections": 10}

        with patch.object(redis_module.redis, "ConnectionPool") as pool_class, \
                patch.object(redis_module.redis, "Redis"):
            RedisCache(config, observers=())

        kwargs = pool_class.call_args.kwargs
        assert kwargs["db"] == 3
        assert kwargs["password"] == "secret"
        assert kwargs["max_connections"] == 10
        assert kwargs["decode_responses"] is False

    def test_runtime_cache_must_be_bool(self, redis_config):
        with pytest.raises(ConfigurationError) as exc_info:
            RedisCache({**redis_config, "runtime_cache": "yes"})

        assert exc_info.value.message == "INVALID_REDIS_SETUP"

    def test_missing_driver(self, redis_config):
        with patch.object(redis_module, "HAS_REDIS", False):
            with pytest.raises(SystemComponentError) as exc_info:
                RedisCache(redis_config)

        assert exc_info.value.message == "MISSING_DRIVER_REDIS"

    def test_close_disconnects_pool(self, redis_cache):
        with patch.object(redis_cache._pool, "disconnect") as disconnect:
            redis_cache.close()

        disconnect.assert_called_once()
