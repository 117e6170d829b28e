"""Group articles that cover the same story."""

from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from functools import partial
from typing import Any, Callable, Iterable

from common.hashing import generate_title_key, generate_topic_key
from common.urls import DEFAULT_TRACKING_PARAMS, TrackingParams
from common.utils import get_value
from cluster_articles.models import ArticleCluster

logger = logging.getLogger(__name__)

KeyFn = Callable[[Any], str]


def topic_key_for(article: Any, tracking: TrackingParams = DEFAULT_TRACKING_PARAMS) -> str:
    """Key on title + tracking-free link."""
    return generate_topic_key(
        get_value(article, "title") or "",
        get_value(article, "link", "url") or "",
        tracking,
    )


def title_key_for(article: Any) -> str:
    """Key on title only, so the same headline from different links groups together."""
    return generate_title_key(get_value(article, "title") or "")


KEY_POLICIES = ("title_url", "title")


def get_key_fn(policy: str, tracking: TrackingParams = DEFAULT_TRACKING_PARAMS) -> KeyFn:
    """Key function for a key policy name."""
    if policy == "title_url":
        return partial(topic_key_for, tracking=tracking)
    if policy == "title":
        return title_key_for
    raise ValueError(f"Unknown key policy: {policy}. Must be one of {list(KEY_POLICIES)}")


def cluster_articles(
    articles: Iterable[Any],
    key_fn: KeyFn | None = None,
) -> dict[str, list[Any]]:
    """
    Partition articles by topic key.

    Args:
        articles: Articles (dataclasses or dicts) with `title` and `link`.
        key_fn: Key for one article (default: title + normalized link).

    Returns:
        Mapping of topic key to the articles sharing it, each list in input
        order. Every input article lands in exactly one list.
    """
    key_fn = key_fn or topic_key_for
    clusters: dict[str, list[Any]] = {}
    for article in articles:
        clusters.setdefault(key_fn(article), []).append(article)
    return clusters


def _as_record(article: Any) -> dict[str, Any]:
    if is_dataclass(article):
        return asdict(article)
    return dict(article)


def build_cluster_records(clusters: dict[str, list[Any]]) -> list[ArticleCluster]:
    """Build serializable cluster records, largest clusters first."""
    records = []
    for topic_key, members in clusters.items():
        sources: list[str] = []
        for article in members:
            source = get_value(article, "source")
            if source and source not in sources:
                sources.append(source)
        records.append(
            ArticleCluster(
                topic_key=topic_key,
                size=len(members),
                title=get_value(members[0], "title") or "",
                sources=sources,
                links=[get_value(article, "link", "url") or "" for article in members],
                articles=[_as_record(article) for article in members],
            )
        )

    records.sort(key=lambda record: record.size, reverse=True)
    total = sum(record.size for record in records)
    multi = sum(1 for record in records if record.size > 1)
    logger.info("Built %d clusters from %d articles (%d with duplicates)", len(records), total, multi)
    return records
