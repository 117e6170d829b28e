"""Helper functions for ingest_articles CLI."""

from __future__ import annotations

import argparse
import logging

from common.cli_helpers import parse_csv
from ingest_articles.feed_catalog import feeds_for_category
from ingest_articles.fetch_articles.sources import RSS_FEED_CATEGORIES

logger = logging.getLogger(__name__)


def parse_feeds(value: str | None) -> list[str]:
    '''Parse the --feeds argument into a list of feed URLs.

    Each comma-separated part is either a feed URL or a catalog category name.
    "all" selects every catalog feed.
    '''
    parts = parse_csv(value)
    if any(part.lower() == "all" for part in parts):
        return [url for feeds in RSS_FEED_CATEGORIES.values() for url in feeds.values()]

    urls: list[str] = []
    for part in parts:
        if part.startswith("http"):
            candidates = [part]
        else:
            candidates = feeds_for_category(part)
            if not candidates:
                logger.warning("Invalid feed or category: %s", part)
        for url in candidates:
            if url not in urls:
                urls.append(url)

    if parts and not urls:
        valid = ", ".join(sorted(RSS_FEED_CATEGORIES))
        raise ValueError(f"No valid feeds provided. Pass feed URLs or one of: {valid}")

    return urls


def parse_ingest_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    '''Parse CLI arguments for ingest_articles.'''

    parser = argparse.ArgumentParser(description="Fetch and normalize RSS articles")
    parser.add_argument(
        "--feeds",
        default=None,
        help="Comma-separated feed URLs or catalog categories, or 'all'.",
    )
    parser.add_argument(
        "--keywords",
        default=None,
        help="Comma-separated keywords for a Google News search feed.",
    )
    parser.add_argument(
        "--lookback-hours",
        type=int,
        default=None,
        help="Only keep articles published in the last N hours (default: keep all).",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or path to YAML file (default: $DISCOVER_CONFIG or 'default').",
    )
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--load-local", action="store_true", help="Save results to local file")
    return parser.parse_args(argv)
