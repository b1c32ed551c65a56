"""
Validators Module

Structure validation for backend construction parameters.
"""

from cache_facade.core.validators.base import BaseValidator
from cache_facade.core.validators.connection_validator import ConnectionValidator, ensure_valid_connection

__all__ = [
    "BaseValidator",
    "ConnectionValidator",
    "ensure_valid_connection",
]
