"""Tests for settings and environment validation."""

from __future__ import annotations

import pytest

from fanhub.config import Settings
from fanhub.validate_env import validate_env


@pytest.fixture(autouse=True)
def _clear_validate_cache():
    validate_env.cache_clear()
    yield
    validate_env.cache_clear()


class TestValidateEnv:
    def test_development_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        validate_env()

    def test_unknown_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "qa")
        with pytest.raises(RuntimeError, match="ENVIRONMENT must be one of"):
            validate_env()

    def test_production_requires_cors(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.delenv("ALLOWED_CORS_ORIGINS", raising=False)
        with pytest.raises(RuntimeError, match="ALLOWED_CORS_ORIGINS"):
            validate_env()

    def test_production_rejects_localhost(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("ALLOWED_CORS_ORIGINS", "http://localhost:3000")
        with pytest.raises(RuntimeError, match="localhost"):
            validate_env()

    def test_production_ok(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("ALLOWED_CORS_ORIGINS", "https://leafsnews.com")
        validate_env()


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("NEWS_RSS_SOURCES", raising=False)
        monkeypatch.delenv("GNEWS_API_KEY", raising=False)
        settings = Settings(_env_file=None)

        assert settings.team.id == 10
        assert settings.team.abbreviation == "TOR"
        assert settings.news_config.max_articles == 50
        assert settings.recap_config.dominant_margin == 2
        assert settings.news_source_count == len(settings.news_config.rss_sources)

    def test_rss_override_and_gnews_count(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWS_RSS_SOURCES", "https://a.com/feed, https://b.com/rss ,")
        monkeypatch.setenv("GNEWS_API_KEY", "key")
        settings = Settings(_env_file=None)

        assert settings.news_config.rss_sources == ["https://a.com/feed", "https://b.com/rss"]
        assert settings.news_source_count == 3

    def test_cors_origins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_CORS_ORIGINS", "https://a.com, https://b.com")
        assert Settings(_env_file=None).allowed_cors_origins == ["https://a.com", "https://b.com"]
