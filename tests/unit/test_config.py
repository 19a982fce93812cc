"""Unit tests for settings loading and logging setup."""

import logging

import pytest
from pydantic import ValidationError

from voice_notes.core.config import Settings, configure_logging, get_settings


class TestSettings:
    """Tests for Settings and get_settings()."""

    def test_defaults(self):
        settings = Settings()
        assert settings.title_max_words == 7
        assert settings.fallback_title == "Nieuwe opname"
        assert settings.log_level == "INFO"

    def test_env_prefix_is_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("voice_notes_title_max_words", "4")
        assert Settings().title_max_words == 4

    def test_negative_word_budget_rejected(self, monkeypatch):
        monkeypatch.setenv("VOICE_NOTES_TITLE_MAX_WORDS", "-2")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_applies_level_to_package_logger(self):
        pkg_logger = configure_logging(Settings(log_level="debug"))
        assert pkg_logger.name == "voice_notes"
        assert pkg_logger.level == logging.DEBUG
