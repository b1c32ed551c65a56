"""
Unit Tests for Logging Module

Tests logger configuration, processors, and logging utilities.
"""

from unittest.mock import MagicMock

import pytest

from cache_facade.core.config.constants import LOG_KEY_LENGTH
from cache_facade.core.logging.logger import (
    add_log_level_name,
    add_timestamp,
    get_logger,
    log_stage,
    setup_logging,
    truncate_cache_key,
)


@pytest.mark.unit
class TestLoggerCreation:
    """Test logger creation and configuration."""

    def test_get_logger_returns_logger_instance(self):
        logger = get_logger(__name__)
        # structlog logger is not a standard logging.Logger
        assert hasattr(logger, "info")

    @pytest.mark.parametrize("log_format", ["json", "console"])
    def test_setup_logging_accepts_both_formats(self, log_format):
        """Test that setup_logging configures structlog without raising."""
        setup_logging(log_level="DEBUG", log_format=log_format)
        get_logger("test").info("configured", stage="TEST")


@pytest.mark.unit
class TestProcessors:
    """Test the custom structlog processors."""

    def test_add_timestamp_is_utc_iso(self):
        event = add_timestamp(None, "info", {})
        assert event["timestamp"].endswith("Z")

    def test_add_log_level_name_upper_cases(self):
        event = add_log_level_name(None, "info", {"level": "warning"})
        assert event["level"] == "WARNING"

    def test_long_cache_key_is_truncated(self):
        key = "USERS_" + "X" * 100

        event = truncate_cache_key(None, "debug", {"cache_key": key})

        assert event["cache_key"] == key[:LOG_KEY_LENGTH] + "..."

    def test_short_cache_key_is_kept(self):
        event = truncate_cache_key(None, "debug", {"cache_key": "USERS_42"})
        assert event["cache_key"] == "USERS_42"

    def test_events_without_cache_key_pass_through(self):
        event = {"event": "hello"}
        assert truncate_cache_key(None, "info", event) == {"event": "hello"}


@pytest.mark.unit
class TestLogStage:
    """Test log_stage helper."""

    def test_log_stage_dispatches_to_level(self):
        logger = MagicMock()

        log_stage(logger, "CACHE.GET", "Front tier hit", level="debug", cache_key="USERS_42")

        logger.debug.assert_called_once_with("Front tier hit", stage="CACHE.GET", cache_key="USERS_42")

    def test_log_stage_defaults_to_info(self):
        logger = MagicMock()

        log_stage(logger, "CACHE.INIT", "ready")

        logger.info.assert_called_once_with("ready", stage="CACHE.INIT")
