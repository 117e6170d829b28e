"""Fetch many feeds at once."""

import logging
from concurrent.futures import ThreadPoolExecutor

from ingest_articles.errors import FeedFetchError
from ingest_articles.fetch_articles.fetch_rss_articles import fetch_rss_feed
from ingest_articles.models import RSSArticle

logger = logging.getLogger(__name__)

DEFAULT_MAX_WORKERS = 8


def fetch_custom_rss_feeds(
    feed_urls: list[str],
    *,
    max_workers: int | None = None,
    timeout: float | None = None,
    user_agent: str | None = None,
) -> list[RSSArticle]:
    """
    Fetch all feeds concurrently and concatenate their articles.

    Feeds that fail are logged and skipped. Articles keep the order of
    `feed_urls`, then the order of entries within each feed.
    """
    if not feed_urls:
        return []

    workers = min(max_workers or DEFAULT_MAX_WORKERS, len(feed_urls))
    logger.info("Fetching %d feeds with %d workers", len(feed_urls), workers)

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(fetch_rss_feed, url, timeout=timeout, user_agent=user_agent)
            for url in feed_urls
        ]

        articles: list[RSSArticle] = []
        failed = 0
        for url, future in zip(feed_urls, futures, strict=True):
            try:
                articles.extend(future.result())
            except FeedFetchError as e:
                failed += 1
                logger.warning("Failed to fetch feed %s: %s", url, e)

    logger.info(
        "Fetched %d articles from %d feeds (%d failed)",
        len(articles),
        len(feed_urls) - failed,
        failed,
    )
    return articles
