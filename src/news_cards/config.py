# ABOUTME: Centralized configuration using Pydantic Settings.
# ABOUTME: Loads feed, HTTP response and logging settings from environment and .env file.

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Feed
    feed_url: str = "https://www.news.gr/rss.ashx?colid=2"
    feed_user_agent: str = "News-Cards-Feed-Fetcher/1.0"
    feed_timeout: float | None = None  # No upper bound on the upstream fetch
    feed_image_tags: list[str] = ["enclosure", "media:thumbnail"]  # Tried in order

    # HTTP response
    cache_max_age: int = 60
    cache_stale_while_revalidate: int = 600
    cors_allow_origin: str = "*"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"  # "console" or "json"

    # Web
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def cache_control(self) -> str:
        """Build the Cache-Control header value for successful responses."""
        return (
            f"s-maxage={self.cache_max_age}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from environment variables and .env file.
    """
    return Settings()
