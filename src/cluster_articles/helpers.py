"""Helper functions for cluster_articles CLI."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any

from cluster_articles.cluster_articles import KEY_POLICIES
from common.local_io import read_jsonl_records

logger = logging.getLogger(__name__)


def parse_cluster_articles_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for cluster_articles."""

    parser = argparse.ArgumentParser(description="Group ingested articles by topic")

    # Input options
    parser.add_argument(
        "inputs",
        nargs="+",
        type=Path,
        help="Ingested article JSONL files",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Config name or path to YAML file (default: $DISCOVER_CONFIG or 'default').",
    )

    # Clustering options
    parser.add_argument(
        "--key-policy",
        choices=list(KEY_POLICIES),
        default=None,
        help="Group by title + link or by title only (default: from config)",
    )

    # Output options
    parser.add_argument("--output-dir", default="output")
    parser.add_argument("--load-local", action="store_true", help="Save results to local file")

    return parser.parse_args(argv)


def load_articles(paths: list[Path]) -> list[dict[str, Any]]:
    """Read articles from local JSONL files."""
    articles: list[dict[str, Any]] = []
    for path in paths:
        logger.info("Reading %s", path)
        articles.extend(read_jsonl_records(path))
    logger.info("Loaded %d articles from %d files", len(articles), len(paths))
    return articles
