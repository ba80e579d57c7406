# ABOUTME: FastAPI dependency injection for settings and the feed fetcher.
# ABOUTME: Provides reusable dependencies for route handlers.

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request

from news_cards.config import Settings
from news_cards.feeds.fetcher import FeedFetcher


def get_app_settings(request: Request) -> Settings:
    """Get settings from app state."""
    return request.app.state.settings


AppSettings = Annotated[Settings, Depends(get_app_settings)]


async def get_feed_fetcher(settings: AppSettings) -> AsyncGenerator[FeedFetcher]:
    """Get a per-request feed fetcher, closed after the response."""
    async with FeedFetcher(settings) as fetcher:
        yield fetcher


Fetcher = Annotated[FeedFetcher, Depends(get_feed_fetcher)]
