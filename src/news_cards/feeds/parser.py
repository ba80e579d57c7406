# ABOUTME: RSS field extractor producing NewsItem records.
# ABOUTME: Uses feedparser for the feed and BeautifulSoup to turn descriptions into text.

import io
from collections.abc import Iterator, Sequence

import feedparser
import structlog
from bs4 import BeautifulSoup

from news_cards.models import NewsItem

log = structlog.get_logger()

DEFAULT_IMAGE_TAGS: tuple[str, ...] = ("enclosure", "media:thumbnail")


def html_to_text(value: str) -> str:
    """Remove markup from an HTML fragment, keeping the text between tags."""
    if not value:
        return ""
    return BeautifulSoup(value, "html.parser").get_text().strip()


def _entry_key(tag: str) -> str:
    """Map a feed element name to the key feedparser stores it under.

    ``enclosure`` elements are collected in ``enclosures``; namespaced
    elements such as ``media:thumbnail`` become ``media_thumbnail``.
    """
    if tag == "enclosure":
        return "enclosures"
    return tag.replace(":", "_")


def _extract_image(entry: feedparser.FeedParserDict, image_tags: Sequence[str]) -> str | None:
    for tag in image_tags:
        for media in entry.get(_entry_key(tag)) or []:
            url = (media.get("url") or media.get("href") or "").strip()
            if url:
                return url
    return None


def _read_feed(xml: str | bytes) -> feedparser.FeedParserDict:
    data = xml.encode("utf-8") if isinstance(xml, str) else xml
    # A stream keeps feedparser from treating the document as a URL or path
    feed = feedparser.parse(io.BytesIO(data))

    if feed.bozo:
        log.warning("feed_parse_issue", error=str(feed.get("bozo_exception")))
    return feed


def iter_items(
    xml: str | bytes,
    image_tags: Sequence[str] = DEFAULT_IMAGE_TAGS,
) -> Iterator[NewsItem]:
    """Yield news items from a raw RSS document in document order.

    Every call parses ``xml`` from the start. Malformed documents yield
    whatever entries could be recovered; entries lacking a title, link or
    publication date are skipped without raising.

    Args:
        xml: Raw feed text, or the undecoded response body.
        image_tags: Element names to take an image URL from, first match wins.

    Yields:
        NewsItem for each complete entry.
    """
    feed = _read_feed(xml)

    for index, entry in enumerate(feed.entries):
        title = (entry.get("title") or "").strip()
        link = (entry.get("link") or "").strip()
        pub_date = (entry.get("published") or "").strip()

        if not (title and link and pub_date):
            log.debug(
                "item_skipped",
                index=index,
                has_title=bool(title),
                has_link=bool(link),
                has_pub_date=bool(pub_date),
            )
            continue

        yield NewsItem(
            title=title,
            link=link,
            description=html_to_text(entry.get("summary") or ""),
            pub_date=pub_date,
            image_url=_extract_image(entry, image_tags),
        )


def parse_feed(
    xml: str | bytes,
    image_tags: Sequence[str] = DEFAULT_IMAGE_TAGS,
) -> list[NewsItem]:
    """Parse a raw RSS document into a list of news items."""
    return list(iter_items(xml, image_tags=image_tags))
