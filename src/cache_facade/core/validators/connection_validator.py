"""
Connection Validator

Sanity-checks the connection dict handed to a networked backend before a
socket is opened.

VALIDATION RULES:
-----------------
- host:          required, non-empty string
- port:          required, integer between 1 and 65535
- timeout:       optional, non-negative integer (default entry lifetime)
- runtime_cache: optional, boolean
"""

from collections.abc import Callable, Mapping
from typing import Any

from cache_facade.core.exceptions import ConfigurationError, ValidationError
from cache_facade.core.logging.logger import get_logger
from cache_facade.core.validators.base import BaseValidator

logger = get_logger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


class ConnectionValidator(BaseValidator):
    """
    Validates backend connection dicts.

    Unlike a fail-fast validator, every field is checked and all problems
    are returned so a misconfiguration is fixed in one pass.
    """

    def validate(self, data: Mapping[str, Any]) -> list[str]:
        """
        Validate a connection dict.

        Args:
            data: Connection parameters (host, port, timeout, runtime_cache, ...)

        Returns:
            Error messages; an empty list means the dict is usable.
        """
        if not isinstance(data, Mapping):
            return [f"connection config must be a mapping, got {type(data).__name__}"]

        errors: list[str] = []
        checks: list[tuple[str, bool, Callable[[Any], None]]] = [
            ("host", True, self._check_host),
            ("port", True, self._check_port),
            ("timeout", False, self._check_timeout),
            ("runtime_cache", False, self._check_runtime_cache),
        ]

        for field_name, required, check in checks:
            if field_name not in data or data[field_name] is None:
                if required:
                    errors.append(f"{field_name} is required")
                continue
            try:
                check(data[field_name])
            except ValidationError as e:
                errors.append(e.message)

        if errors:
            logger.debug("Connection config rejected", errors=errors)

        return errors

    def _check_host(self, value: Any) -> None:
        self.validate_type(value, str, "host")
        self.validate_not_empty(value, "host")

    def _check_port(self, value: Any) -> None:
        self.validate_type(value, int, "port")
        self.validate_range(value, "port", minimum=MIN_PORT, maximum=MAX_PORT)

    def _check_timeout(self, value: Any) -> None:
        self.validate_type(value, int, "timeout")
        self.validate_range(value, "timeout", minimum=0)

    def _check_runtime_cache(self, value: Any) -> None:
        self.validate_type(value, bool, "runtime_cache")


def ensure_valid_connection(config: Mapping[str, Any], error_code: str) -> None:
    """
    Validate a connection dict or refuse construction.

    Args:
        config: Connection parameters
        error_code: Message of the raised error (e.g. "INVALID_REDIS_SETUP")

    Raises:
        ConfigurationError: With details["errors"] listing every problem
    """
    errors = ConnectionValidator().validate(config)
    if errors:
        raise ConfigurationError(error_code, details={"errors": errors})
