"""CLI for ingesting and normalizing articles."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from dotenv import load_dotenv

from common.cli_helpers import parse_csv, setup_logging
from common.config import load_config
from common.local_io import save_jsonl_records_local
from ingest_articles.feed_catalog import extract_categories_from_rss_feeds, extract_keywords_from_rss_feeds
from ingest_articles.helpers import parse_feeds, parse_ingest_articles_args
from ingest_articles.ingest_articles import ingest_articles

setup_logging()
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    args = parse_ingest_articles_args(argv)

    load_dotenv()
    config = load_config(args.config)

    feed_urls = parse_feeds(args.feeds)
    keywords = parse_csv(args.keywords)
    if not keywords and feed_urls:
        categories = extract_categories_from_rss_feeds(feed_urls)
        keywords = extract_keywords_from_rss_feeds(feed_urls)
        logger.info(
            "Derived %d keywords from feeds in categories: %s",
            len(keywords),
            ", ".join(categories) or "none",
        )
    if not feed_urls and not keywords:
        logger.warning("No feeds or keywords given; nothing to ingest")
        return

    since = None
    if args.lookback_hours is not None:
        since = datetime.now(timezone.utc) - timedelta(hours=args.lookback_hours)

    articles = ingest_articles(feed_urls, keywords, config, since=since)
    if not articles:
        logger.warning("No articles ingested")
        return

    if args.load_local:
        save_jsonl_records_local(articles, "ingested_articles", output_dir=args.output_dir)


if __name__ == "__main__":
    main()
