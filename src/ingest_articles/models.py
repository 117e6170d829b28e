"""Data models for ingest_articles pipeline stage."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RSSArticle:
    """Article parsed from an RSS feed entry."""
    title: str
    link: str
    source: str
    pub_date: Optional[str] = None
    content_snippet: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True)
class NormalizedArticle:
    """Article with tracking parameters stripped from the link and a parsed publish date."""
    title: str
    link: str
    source: str
    pub_date: Optional[str]
    content_snippet: Optional[str]
    content: Optional[str]
    published_at: Optional[str]
    raw_summary: str
