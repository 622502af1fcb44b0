"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from wordfilter.service.config import Settings


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("WORDFILTER_REPLACEMENT", raising=False)

        config = Settings(_env_file=None)

        assert config.replacement == "***"
        assert config.word_list_path is None
        assert config.matchable_scripts == ["cjk"]
        assert config.log_level == "INFO"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("WORDFILTER_REPLACEMENT", "###")
        monkeypatch.setenv("WORDFILTER_LOG_LEVEL", "debug")

        config = Settings(_env_file=None)

        assert config.replacement == "###"
        assert config.log_level == "DEBUG"

    def test_empty_replacement_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, replacement="")

    def test_empty_script_list_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, matchable_scripts=[])

    def test_unknown_log_level_is_rejected(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")
