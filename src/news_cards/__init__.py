# ABOUTME: Main package for the news cards feed service.
# ABOUTME: Exports settings access and the NewsItem model.

from news_cards.config import get_settings
from news_cards.models import ErrorResponse, NewsItem

__all__ = [
    "get_settings",
    "ErrorResponse",
    "NewsItem",
]
