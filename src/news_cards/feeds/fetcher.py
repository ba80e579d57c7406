# ABOUTME: Async RSS feed fetcher built on httpx.
# ABOUTME: Performs a single GET per call and hands the body to the regex extractor.

import httpx
import structlog

from news_cards.config import Settings, get_settings
from news_cards.feeds.parser import parse_feed
from news_cards.models import NewsItem

log = structlog.get_logger()


class FetchError(Exception):
    """Raised when the feed cannot be retrieved.

    ``status_code`` is None when the request never produced a response.
    """

    def __init__(self, message: str, status_code: int | None = None, reason: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason


class FeedFetcher:
    """Fetches the configured RSS feed and extracts news items."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-initialized HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self.settings.feed_timeout,
                headers={"User-Agent": self.settings.feed_user_agent},
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "FeedFetcher":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def _get(self, url: str | None) -> httpx.Response:
        feed_url = url or self.settings.feed_url
        log.debug("fetching_feed", url=feed_url)

        # Our own client already carries the User-Agent; injected ones may not
        headers = None if self._owns_client else {"User-Agent": self.settings.feed_user_agent}

        try:
            response = await self.client.get(feed_url, headers=headers)
        except httpx.RequestError as e:
            log.error("feed_fetch_failed", url=feed_url, error=str(e))
            raise FetchError(f"Failed to fetch RSS feed: {e}") from e

        if not response.is_success:
            log.error(
                "feed_fetch_failed",
                url=feed_url,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            raise FetchError(
                f"Failed to fetch RSS feed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
            )

        log.info("feed_fetched", url=feed_url, size=len(response.content))
        return response

    async def fetch_text(self, url: str | None = None) -> str:
        """Download the raw feed body.

        Args:
            url: Feed URL to fetch. Defaults to the configured feed.

        Returns:
            Response body text.

        Raises:
            FetchError: On a non-2xx response or a transport failure.
        """
        response = await self._get(url)
        return response.text

    async def fetch_items(self, url: str | None = None) -> list[NewsItem]:
        """Fetch the feed and extract its news items.

        The undecoded body goes to the parser so the feed's own encoding
        declaration is honored.
        """
        response = await self._get(url)
        items = parse_feed(response.content, image_tags=self.settings.feed_image_tags)
        log.info("feed_parsed", items=len(items))
        return items
