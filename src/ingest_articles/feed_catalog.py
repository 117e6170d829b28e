"""Derive categories and keywords from a user's subscribed feeds."""

from __future__ import annotations

import re

from ingest_articles.fetch_articles.sources import RSS_FEED_CATEGORIES

STOP_WORDS = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for",
        "of", "with", "by", "from", "news", "feed", "rss", "top", "stories",
    }
)

_SPLIT_RE = re.compile(r"[\s\-&,]+")
_WORD_RE = re.compile(r"^[a-z]+$")


def normalize_feed_url(url: str) -> str:
    """Lower-case, trim, and drop trailing slashes so feed URLs compare equal."""
    return url.strip().lower().rstrip("/")


def _catalog_index() -> dict[str, tuple[str, str]]:
    """Map normalized feed URL -> (category name, feed title)."""
    index: dict[str, tuple[str, str]] = {}
    for category, feeds in RSS_FEED_CATEGORIES.items():
        for title, url in feeds.items():
            index[normalize_feed_url(url)] = (category, title)
    return index


def extract_categories_from_rss_feeds(custom_feeds: list[str] | None) -> list[str]:
    """Return the catalog categories the given feed URLs belong to, first match first."""
    if not custom_feeds:
        return []

    index = _catalog_index()
    categories: list[str] = []
    for feed_url in custom_feeds:
        match = index.get(normalize_feed_url(feed_url))
        if match and match[0] not in categories:
            categories.append(match[0])
    return categories


def extract_keywords_from_rss_feeds(custom_feeds: list[str] | None) -> list[str]:
    """Return meaningful words from the titles of catalog feeds the user follows."""
    if not custom_feeds:
        return []

    index = _catalog_index()
    keywords: list[str] = []
    for feed_url in custom_feeds:
        match = index.get(normalize_feed_url(feed_url))
        if not match:
            continue
        for word in _SPLIT_RE.split(match[1].lower()):
            if len(word) > 2 and word not in STOP_WORDS and _WORD_RE.match(word):
                if word not in keywords:
                    keywords.append(word)
    return keywords


def feeds_for_category(category: str) -> list[str]:
    """Feed URLs of a catalog category (case-insensitive name match)."""
    for name, feeds in RSS_FEED_CATEGORIES.items():
        if name.lower() == category.strip().lower():
            return list(feeds.values())
    return []
