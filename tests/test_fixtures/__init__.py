"""
Test Fixtures Package

Shared test utilities and helpers for consistent testing across all modules.
"""

from .cache_factory import CacheTestFactory, FakeMemcacheClient, FakeRedisClient

__all__ = ["CacheTestFactory", "FakeMemcacheClient", "FakeRedisClient"]
