# ABOUTME: Feed processing module for RSS fetching and field extraction.
# ABOUTME: Handles downloading the feed and turning item blocks into NewsItem records.

from news_cards.feeds.fetcher import FeedFetcher, FetchError
from news_cards.feeds.parser import iter_items, parse_feed

__all__ = ["FeedFetcher", "FetchError", "iter_items", "parse_feed"]
