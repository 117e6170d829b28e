"""Data models for cluster_articles pipeline stage."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ArticleCluster:
    """Articles sharing one topic key, in input order."""

    topic_key: str
    size: int
    title: str
    sources: list[str] = field(default_factory=list)
    links: list[str] = field(default_factory=list)
    articles: list[dict[str, Any]] = field(default_factory=list)
