"""
Tests for settings.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from helix.config import BUNDLED_DATA_DIR, HelixSettings, get_settings, settings


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("HELIX_STORE_PATH", raising=False)
        monkeypatch.delenv("HELIX_PROMPT_LOG_DIR", raising=False)

        config = HelixSettings(_env_file=None)

        assert config.helix_env == "development"
        assert config.is_development is True
        assert config.helix_log_prompts is False
        assert config.helix_data_dir == BUNDLED_DATA_DIR
        assert config.helix_store_path == Path(".helix") / "store.json"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("HELIX_ENV", "production")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("HELIX_LOG_PROMPTS", "1")

        config = HelixSettings(_env_file=None)

        assert config.is_production is True
        assert config.log_level == "DEBUG"
        assert config.helix_log_prompts is True

    def test_invalid_env_rejected(self, monkeypatch):
        monkeypatch.setenv("HELIX_ENV", "qa")

        with pytest.raises(ValidationError):
            HelixSettings(_env_file=None)

    def test_api_key_optional(self, monkeypatch):
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        assert HelixSettings(_env_file=None).openai_api_key is None


class TestSettingsProxy:
    def test_cached(self):
        assert get_settings() is get_settings()

    def test_proxy_reads_through(self):
        assert settings.helix_env == get_settings().helix_env

    def test_reset_picks_up_changes(self, monkeypatch, tmp_path):
        first = settings.helix_store_path
        monkeypatch.setenv("HELIX_STORE_PATH", str(tmp_path / "other.json"))

        assert settings.helix_store_path == first
        settings.reset()
        assert settings.helix_store_path == tmp_path / "other.json"
