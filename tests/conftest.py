# ABOUTME: Pytest fixtures and configuration for news cards tests.
# ABOUTME: Provides settings, sample feeds, and mock upstream transports.

from collections.abc import Callable

import httpx
import pytest

from news_cards.config import Settings

SAMPLE_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example News</title>
    <link>https://news.example.com/</link>
    <item>
      <title><![CDATA[ Parliament passes budget ]]></title>
      <link>https://news.example.com/articles/1</link>
      <description><![CDATA[<p>The <b>budget</b> was approved.</p>]]></description>
      <pubDate>Mon, 01 Jan 2024 08:00:00 GMT</pubDate>
      <enclosure url="https://img.example.com/1.jpg" type="image/jpeg" length="0" />
    </item>
    <item>
      <title>Storm warning &amp; closures</title>
      <link>https://news.example.com/articles/2</link>
      <description>&lt;p&gt;Schools closed.&lt;/p&gt;</description>
      <pubDate>Mon, 01 Jan 2024 09:30:00 GMT</pubDate>
    </item>
    <item>
      <title>No date here</title>
      <link>https://news.example.com/articles/3</link>
    </item>
  </channel>
</rss>
"""


@pytest.fixture
def mock_settings() -> Settings:
    """Create settings for testing."""
    return Settings(
        feed_url="https://example.com/feed.rss",
        feed_user_agent="Test-Fetcher/1.0",
        feed_timeout=5,
        log_level="DEBUG",
        _env_file=None,
    )


@pytest.fixture
def sample_feed() -> str:
    """RSS document with two complete items and one missing its date."""
    return SAMPLE_FEED


@pytest.fixture
def make_client() -> Callable[..., httpx.AsyncClient]:
    """Build an AsyncClient whose upstream is a MockTransport handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make
