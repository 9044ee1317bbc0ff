"""Unit tests for the logging bridge."""

import logging

import pytest

from sonic.config import Settings
from sonic.util.logging import log_level


class TestLogLevel:
    """Tests for log_level."""

    @pytest.mark.parametrize(
        ("environment", "debug", "expected"),
        [
            ("production", False, logging.WARNING),
            ("production", True, logging.DEBUG),
            ("development", False, logging.INFO),
            ("test", False, logging.INFO),
        ],
    )
    def test_level_for_environment(self, environment, debug, expected):
        settings = Settings(environment=environment, debug=debug)

        assert log_level(settings) == expected
