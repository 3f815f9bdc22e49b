"""Tests for library settings."""

from config.settings import Settings, get_settings
from truncation.policy import build_policy, reset_defaults


class TestSettings:
    """Tests for environment-driven settings."""

    def test_default_settings(self, monkeypatch):
        monkeypatch.delenv("TRUNCATE_HTML_ELLIPSIS", raising=False)
        settings = Settings(_env_file=None)

        assert settings.ellipsis == "..."
        assert settings.length is None
        assert settings.by_words is False
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("TRUNCATE_HTML_ELLIPSIS", "~")
        monkeypatch.setenv("TRUNCATE_HTML_BY_WORDS", "true")
        settings = Settings(_env_file=None)

        assert settings.ellipsis == "~"
        assert settings.by_words is True

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()

    def test_settings_seed_defaults(self, monkeypatch):
        monkeypatch.setenv("TRUNCATE_HTML_ELLIPSIS", " [more]")
        get_settings.cache_clear()
        reset_defaults()

        assert build_policy(5).ellipsis == " [more]"
