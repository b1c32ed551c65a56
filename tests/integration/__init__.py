"""
Integration tests.

These tests talk to live daemons and are skipped unless enabled:
- USE_REAL_REDIS=1 with Redis on REDIS_HOST/REDIS_PORT
- USE_REAL_MEMCACHED=1 with memcached on MEMCACHED_HOST/MEMCACHED_PORT
"""
