"""RSS feed fetching."""

import logging
from typing import Any
from urllib.parse import urlsplit

import feedparser
import requests

from ingest_articles.clean_articles.clean import clean_text, decode_html
from ingest_articles.errors import FeedFetchError
from ingest_articles.models import RSSArticle

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30
DEFAULT_USER_AGENT = "article-discovery/1.0 (RSS reader)"
UNKNOWN_SOURCE = "Unknown Source"
GOOGLE_NEWS_SEARCH = "news.google.com/rss/search"


def fetch_rss_feed(
    url: str,
    *,
    timeout: float | None = None,
    user_agent: str | None = None,
) -> list[RSSArticle]:
    """
    Fetch a feed and return its entries as RSSArticles.

    Raises:
        FeedFetchError: If the URL is invalid or the feed can't be fetched or parsed.
    """
    if not url or not url.startswith("http"):
        raise FeedFetchError(url, f"Invalid RSS feed URL: {url}")

    try:
        response = requests.get(
            url,
            timeout=timeout or DEFAULT_TIMEOUT,
            headers={"User-Agent": user_agent or DEFAULT_USER_AGENT},
        )
        response.raise_for_status()
    except requests.RequestException as e:
        raise FeedFetchError(url, str(e)) from e

    try:
        feed = feedparser.parse(response.content)
    except Exception as e:
        raise FeedFetchError(url, f"Could not parse feed: {e}") from e

    if feed.get("bozo") and not feed.entries:
        reason = feed.get("bozo_exception") or "malformed feed"
        raise FeedFetchError(url, str(reason))

    if not feed.entries:
        logger.info("Feed %s has no entries", url)
        return []

    try:
        source = _source_name(feed.feed.get("title"), url)
        articles = [_parse_entry(entry, source) for entry in feed.entries]
    except Exception as e:
        raise FeedFetchError(url, f"Could not read feed entries: {e}") from e
    logger.info("Fetched %d articles from %s (%s)", len(articles), source, url)
    return articles


def _source_name(feed_title: str | None, url: str) -> str:
    """Pick a display name for the feed, once per feed."""
    if GOOGLE_NEWS_SEARCH in url:
        return "Google News"

    source = decode_html(feed_title).strip()
    if source and source != UNKNOWN_SOURCE:
        return source

    try:
        host = urlsplit(url).hostname or ""
    except ValueError:
        return UNKNOWN_SOURCE
    host = host.replace("www.", "", 1).replace("rss.", "", 1)
    if not host:
        return UNKNOWN_SOURCE
    return host[0].upper() + host[1:]


def _entry_content(entry: Any) -> str:
    content = entry.get("content")
    if content:
        value = content[0].get("value") if isinstance(content, list) else content
        if value:
            return value
    return entry.get("summary") or ""


def _parse_entry(entry: Any, source: str) -> RSSArticle:
    """Parse a single RSS entry into an RSSArticle."""
    content = _entry_content(entry)
    snippet = clean_text(entry.get("summary") or content)
    return RSSArticle(
        title=decode_html(entry.get("title")) or "Untitled",
        link=entry.get("link") or "",
        source=source,
        pub_date=entry.get("published") or entry.get("updated"),
        content_snippet=snippet or content or "",
        content=content,
    )
