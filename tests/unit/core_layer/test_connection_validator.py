"""
Unit Tests for ConnectionValidator

Tests that malformed connection dicts are reported field by field and
refuse backend construction.
"""

import pytest

from cache_facade.core.exceptions import ConfigurationError, ValidationError
from cache_facade.core.validators import BaseValidator, ConnectionValidator, ensure_valid_connection


@pytest.fixture
def validator():
    return ConnectionValidator()


@pytest.mark.unit
class TestConnectionValidator:
    """Test suite for ConnectionValidator."""

    def test_valid_config_has_no_errors(self, validator):
        config = {"host": "localhost", "port": 11211, "timeout": 3600, "runtime_cache": True}
        assert validator.validate(config) == []

    def test_optional_fields_may_be_omitted(self, validator):
        assert validator.validate({"host": "localhost", "port": 6379}) == []

    def test_extra_fields_are_ignored(self, validator):
        config = {"host": "localhost", "port": 6379, "db": 3, "password": None}
        assert validator.validate(config) == []

    def test_missing_required_fields(self, validator):
        errors = validator.validate({})

        assert "host is required" in errors
        assert "port is required" in errors

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_port_out_of_range(self, validator, port):
        errors = validator.validate({"host": "localhost", "port": port})

        assert len(errors) == 1
        assert "port" in errors[0]

    @pytest.mark.parametrize("port", ["11211", 11211.0, True])
    def test_port_must_be_integer(self, validator, port):
        errors = validator.validate({"host": "localhost", "port": port})
        assert len(errors) == 1

    def test_empty_host(self, validator):
        errors = validator.validate({"host": "  ", "port": 11211})
        assert errors == ["host cannot be empty"]

    def test_negative_timeout(self, validator):
        errors = validator.validate({"host": "localhost", "port": 11211, "timeout": -5})
        assert errors == ["timeout must be at least 0"]

    def test_runtime_cache_must_be_bool(self, validator):
        errors = validator.validate({"host": "localhost", "port": 6379, "runtime_cache": "yes"})
        assert len(errors) == 1

    def test_all_problems_are_reported(self, validator):
        errors = validator.validate({"host": "", "port": 0, "timeout": -1})
        assert len(errors) == 3

    def test_non_mapping_config(self, validator):
        errors = validator.validate(["localhost", 11211])
        assert len(errors) == 1
        assert "mapping" in errors[0]


@pytest.mark.unit
class TestEnsureValidConnection:
    def test_valid_config_passes(self):
        ensure_valid_connection({"host": "localhost", "port": 11211}, "INVALID_MEMCACHE_SETUP")

    def test_invalid_config_raises_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ensure_valid_connection({"host": "localhost"}, "INVALID_MEMCACHE_SETUP")

        assert exc_info.value.message == "INVALID_MEMCACHE_SETUP"
        assert exc_info.value.details["errors"] == ["port is required"]


@pytest.mark.unit
class TestBaseValidator:
    """Test the reusable field checks."""

    class _Validator(BaseValidator):
        def validate(self, data):
            return []

    def test_validate_range_raises_with_field(self):
        with pytest.raises(ValidationError) as exc_info:
            self._Validator().validate_range(10, "retries", maximum=3)

        assert exc_info.value.field == "retries"

    def test_validate_type_accepts_bool_when_expected(self):
        self._Validator().validate_type(False, bool, "runtime_cache")

    def test_validate_type_rejects_bool_for_int(self):
        with pytest.raises(ValidationError):
            self._Validator().validate_type(True, int, "port")
