"""Tests for logging setup."""

import pytest
import structlog
from py_sunflower.logging_config import configure_logging


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_format(self):
        configure_logging(level="DEBUG", log_format="json")
        assert structlog.is_configured()
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_plain_format(self):
        configure_logging(log_format="plain")
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_unknown_level(self):
        with pytest.raises(ValueError):
            configure_logging(level="LOUD")

    def test_level_is_case_insensitive(self):
        configure_logging(level="warning", log_format="plain")
        assert structlog.is_configured()
