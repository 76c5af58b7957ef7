"""Tests for settings and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from ofkt.core.config import SearchSettings, get_settings
from ofkt.core.logging import HANDLER_NAME, setup_logging


class TestSearchSettings:
    """Test configuration loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("OFKT_CACHE_SIZE", raising=False)
        monkeypatch.delenv("OFKT_MAX_RESULTS", raising=False)
        monkeypatch.delenv("OFKT_LOG_LEVEL", raising=False)
        monkeypatch.delenv("OFKT_DEBUG", raising=False)
        settings = SearchSettings(_env_file=None)
        assert settings.cache_size == 100
        assert settings.max_results == 100
        assert settings.log_level == "INFO"
        assert settings.debug is False

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("OFKT_MAX_RESULTS", "25")
        monkeypatch.setenv("OFKT_CACHE_SIZE", "5")
        settings = SearchSettings()
        assert settings.max_results == 25
        assert settings.cache_size == 5

    def test_log_level_normalized(self):
        settings = SearchSettings(log_level=" 'debug' ")
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(ValidationError):
            SearchSettings(log_level="chatty")

    def test_debug_string(self, monkeypatch):
        monkeypatch.setenv("OFKT_DEBUG", '"yes"')
        settings = SearchSettings()
        assert settings.debug is True
        assert settings.effective_log_level == "DEBUG"

    def test_invalid_cache_size(self):
        with pytest.raises(ValidationError):
            SearchSettings(cache_size=-1)

    def test_zero_cache_size_allowed(self):
        assert SearchSettings(cache_size=0).cache_size == 0

    def test_invalid_max_results(self):
        with pytest.raises(ValidationError):
            SearchSettings(max_results=-1)

    def test_get_settings_cached(self):
        assert get_settings() is get_settings()


class TestSetupLogging:
    """Test logger configuration."""

    def test_single_handler(self):
        settings = SearchSettings(log_level="WARNING")
        setup_logging(settings)
        logger = setup_logging(settings)

        handlers = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
        assert len(handlers) == 1
        assert logger.level == logging.WARNING

    def test_debug_mode(self):
        logger = setup_logging(SearchSettings(debug=True))
        assert logger.level == logging.DEBUG
        assert logger.name == "ofkt"
