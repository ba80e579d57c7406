# ABOUTME: Tests for configuration loading and validation.
# ABOUTME: Verifies Pydantic Settings behavior and defaults.

import pytest
from pydantic import ValidationError

from news_cards.config import Settings


class TestSettings:
    """Tests for Settings configuration class."""

    def test_settings_default_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should have the documented defaults."""
        for name in ("FEED_URL", "FEED_TIMEOUT", "FEED_IMAGE_TAGS", "CORS_ALLOW_ORIGIN"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.feed_url == "https://www.news.gr/rss.ashx?colid=2"
        assert settings.feed_timeout is None
        assert settings.feed_image_tags == ["enclosure", "media:thumbnail"]
        assert settings.cors_allow_origin == "*"
        assert settings.cache_control == "s-maxage=60, stale-while-revalidate=600"

    def test_settings_overrides(self, mock_settings: Settings) -> None:
        """Explicit values take precedence over defaults."""
        assert mock_settings.feed_url == "https://example.com/feed.rss"
        assert mock_settings.feed_timeout == 5
        assert mock_settings.log_level == "DEBUG"

    def test_settings_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Settings should be read from environment variables."""
        monkeypatch.setenv("FEED_URL", "https://env.example.com/rss")
        monkeypatch.setenv("FEED_IMAGE_TAGS", '["media:thumbnail"]')
        monkeypatch.setenv("CACHE_MAX_AGE", "15")

        settings = Settings(_env_file=None)

        assert settings.feed_url == "https://env.example.com/rss"
        assert settings.feed_image_tags == ["media:thumbnail"]
        assert settings.cache_control.startswith("s-maxage=15,")

    def test_settings_invalid_value_raises(self) -> None:
        """Settings should raise ValidationError on bad types."""
        with pytest.raises(ValidationError):
            Settings(cache_max_age="soon", _env_file=None)
