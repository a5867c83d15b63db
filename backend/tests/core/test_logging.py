"""
Unit tests for root logging setup.
"""

import logging

from pgx_reporter.core import logging as reporter_logging


class TestConfigureLogging:
    """Test the level passed to the root logger."""

    def test_level_defaults_to_environment(self, monkeypatch):
        """Test no level falls back to PGX_REPORTER_LOG_LEVEL"""
        seen = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))
        monkeypatch.setenv("PGX_REPORTER_LOG_LEVEL", "debug")

        reporter_logging.configure_logging(None)

        assert seen["level"] == "DEBUG"

    def test_explicit_level_wins(self, monkeypatch):
        """Test an explicit level is used over the environment"""
        seen = {}
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: seen.update(kwargs))
        monkeypatch.setenv("PGX_REPORTER_LOG_LEVEL", "debug")

        reporter_logging.configure_logging("warning")

        assert seen["level"] == "WARNING"
        assert seen["format"] == reporter_logging.LOG_FORMAT
