"""
Base Exception Class

This module contains the base exception class that all other exceptions
inherit from, plus the construction-time failures every backend can raise.
"""

from typing import Any


class CacheFacadeError(Exception):
    """
    Base exception for all cache facade errors.

    All custom exceptions inherit from this class to enable:
    - Consistent error handling
    - Structured error logging
    - Rich context for debugging

    Attributes:
        message: Error message
        details: Additional error details (dict)

    Example:
        raise ConfigurationError(
            "INVALID_REDIS_SETUP",
            details={"errors": ["port must be between 1 and 65535"]}
        )
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = (details or {}).copy()  # Create a copy to prevent external modification
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to dictionary for logging.

        Returns:
            Dict with error_type, message and details
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }

    def with_context(self, **context) -> "CacheFacadeError":
        """
        Add additional context to the error details.

        Args:
            **context: Key-value pairs to add to details

        Returns:
            Self (for method chaining)
        """
        self.details.update(context)
        return self

    def __repr__(self) -> str:
        details_str = f", details={self.details}" if self.details else ""
        return f"{self.__class__.__name__}(message='{self.message}'{details_str})"

    @classmethod
    def from_exception(
        cls,
        exc: Exception,
        message: str | None = None,
        **details
    ) -> "CacheFacadeError":
        """
        Create an error from another exception.

        Useful for wrapping third-party exceptions with additional context.

        Example:
            >>> try:
            ...     client.get(key)
            ... except RedisError as e:
            ...     raise CacheConnectionError.from_exception(e, host="localhost", port=6379)
        """
        error_message = message or str(exc)
        error_details = {
            "original_error": exc.__class__.__name__,
            "original_message": str(exc),
            **details
        }
        return cls(error_message, details=error_details)


class ConfigurationError(CacheFacadeError):
    """
    Raised when backend construction parameters are invalid.

    Raised synchronously by a backend constructor, never at call time.
    details["errors"] holds the validator messages.
    """
    pass


class SystemComponentError(CacheFacadeError):
    """
    Raised when a driver or runtime component a backend needs is unavailable.

    Only the affected backend is unusable; other backends keep working.
    """
    pass
