"""
Validation Exceptions

Raised by the validator building blocks.
"""

from typing import Any

from cache_facade.core.exceptions.base import CacheFacadeError


class ValidationError(CacheFacadeError):
    """
    Raised when a single configuration field fails validation.

    Attributes:
        field: Field name that failed validation (optional)
        value: Value that failed validation (optional)
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        self.field = field
        self.value = value
        details = {}
        if field is not None:
            details["field"] = field
        if value is not None:
            details["value"] = value
        super().__init__(message, details=details)
