"""Ingest and normalize articles from RSS sources."""

import logging
from datetime import datetime, timezone
from typing import Any

from common.config import DiscoverConfig
from common.datetime import parse_datetime
from common.utils import get_value
from ingest_articles.clean_articles.clean import normalize_articles
from ingest_articles.errors import FeedFetchError
from ingest_articles.fetch_articles.fetch_articles import fetch_custom_rss_feeds
from ingest_articles.fetch_articles.google_news import fetch_industry_news
from ingest_articles.models import NormalizedArticle, RSSArticle

logger = logging.getLogger(__name__)


def filter_recent(articles: list[Any], since: datetime) -> list[Any]:
    """Keep articles published after `since`; undated articles are dropped."""
    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)

    kept = []
    for article in articles:
        published_at = parse_datetime(get_value(article, "pub_date", "pubDate"))
        if published_at is not None and published_at > since:
            kept.append(article)

    logger.info("Kept %d of %d articles published after %s", len(kept), len(articles), since.isoformat())
    return kept


def dedupe_by_link(articles: list[NormalizedArticle]) -> list[NormalizedArticle]:
    """Drop articles whose link was already seen, keeping the first."""
    seen: set[str] = set()
    unique = []
    for article in articles:
        if article.link in seen:
            continue
        seen.add(article.link)
        unique.append(article)

    if len(unique) < len(articles):
        logger.info("Dropped %d duplicate links", len(articles) - len(unique))
    return unique


def sort_newest_first(articles: list[NormalizedArticle]) -> list[NormalizedArticle]:
    """Sort by publish date, newest first. Undated articles go last in their original order."""
    dated = [a for a in articles if parse_datetime(a.published_at) is not None]
    undated = [a for a in articles if parse_datetime(a.published_at) is None]
    dated.sort(key=lambda a: parse_datetime(a.published_at), reverse=True)
    return dated + undated


def ingest_articles(
    feed_urls: list[str],
    keywords: list[str],
    config: DiscoverConfig,
    since: datetime | None = None,
) -> list[NormalizedArticle]:
    """
    Fetch custom feeds and Google News keyword results, then normalize them.

    The combined list has one article per normalized link (first seen wins)
    and is ordered newest first.
    """
    logger.info("Ingesting articles from %d feeds and %d keywords", len(feed_urls), len(keywords))

    raw_articles: list[RSSArticle] = fetch_custom_rss_feeds(
        feed_urls,
        max_workers=config.fetch.max_workers,
        timeout=config.fetch.timeout,
        user_agent=config.fetch.user_agent,
    )

    if keywords:
        try:
            raw_articles.extend(
                fetch_industry_news(
                    keywords,
                    hl=config.google_news.hl,
                    gl=config.google_news.gl,
                    ceid=config.google_news.ceid,
                    timeout=config.fetch.timeout,
                    user_agent=config.fetch.user_agent,
                )
            )
        except FeedFetchError as e:
            logger.warning("Industry news fetch failed: %s", e)

    if since is not None:
        raw_articles = filter_recent(raw_articles, since)

    if not raw_articles:
        logger.warning("0 Articles ingested")
        return []

    normalized = normalize_articles(raw_articles, config.tracking)
    articles = sort_newest_first(dedupe_by_link(normalized))
    logger.info("%d Articles ingested and normalized", len(articles))
    return articles
