"""
Base Validator Module

Abstract base class and common validation utilities.

ENTERPRISE PATTERN: Template Method Pattern
--------------------------------------------
The BaseValidator provides reusable field checks while allowing
subclasses to implement the validation of a whole structure.
"""

from abc import ABC, abstractmethod
from typing import Any

from cache_facade.core.exceptions import ValidationError


class BaseValidator(ABC):
    """
    Abstract base validator with common validation utilities.

    Every check raises ValidationError with the offending field name.
    Subclasses decide whether to raise on the first problem or to collect
    all of them.
    """

    def validate_type(self, value: Any, expected: type | tuple[type, ...], field_name: str) -> None:
        """
        Validate value is an instance of the expected type(s).

        bool is rejected where int is expected, since bool subclasses int.
        """
        if isinstance(value, bool) and bool not in (expected if isinstance(expected, tuple) else (expected,)):
            raise ValidationError(f"{field_name} must not be a boolean", field=field_name, value=value)

        if not isinstance(value, expected):
            names = (
                " or ".join(t.__name__ for t in expected)
                if isinstance(expected, tuple)
                else expected.__name__
            )
            raise ValidationError(
                f"{field_name} must be of type {names}, got {type(value).__name__}",
                field=field_name,
                value=value,
            )

    def validate_not_empty(self, value: str, field_name: str) -> None:
        """
        Validate string is not empty or whitespace-only.

        Raises:
            ValidationError: If value is empty or whitespace
        """
        if not value or not value.strip():
            raise ValidationError(f"{field_name} cannot be empty", field=field_name)

    def validate_range(
        self,
        value: int,
        field_name: str,
        minimum: int | None = None,
        maximum: int | None = None,
    ) -> None:
        """
        Validate an integer lies within bounds (inclusive).

        Example:
            validator.validate_range(port, "port", minimum=1, maximum=65535)
        """
        if minimum is not None and value < minimum:
            raise ValidationError(
                f"{field_name} must be at least {minimum}", field=field_name, value=value
            )

        if maximum is not None and value > maximum:
            raise ValidationError(
                f"{field_name} must be at most {maximum}", field=field_name, value=value
            )

    @abstractmethod
    def validate(self, data: Any) -> list[str]:
        """
        Validate input data.

        ABSTRACT METHOD: Subclasses must implement

        Returns:
            Human-readable error messages, empty when data is valid
        """
        pass
