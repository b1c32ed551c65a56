"""
Exception Module

Structured exception hierarchy for the cache facade.

Module Structure:
-----------------
- **base.py**: CacheFacadeError base class + construction-time failures
- **cache.py**: Backend operation errors
- **validation.py**: Configuration field validation errors

Usage:
------
```python
from cache_facade.core.exceptions import ConfigurationError, SystemComponentError
```
"""

# Base exception
from cache_facade.core.exceptions.base import (
    CacheFacadeError,
    ConfigurationError,
    SystemComponentError,
)

# Cache exceptions
from cache_facade.core.exceptions.cache import (
    CacheConnectionError,
    CacheError,
    CacheSerializationError,
)

# Validation exceptions
from cache_facade.core.exceptions.validation import ValidationError

__all__ = [
    "CacheFacadeError",
    "ConfigurationError",
    "SystemComponentError",
    "CacheError",
    "CacheConnectionError",
    "CacheSerializationError",
    "ValidationError",
]
