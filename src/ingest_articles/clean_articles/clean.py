"""Core clean logic."""

import html
import logging
import re
from typing import Any, Optional

from common.datetime import to_iso
from common.urls import DEFAULT_TRACKING_PARAMS, TrackingParams, normalize_url
from common.utils import get_value
from ingest_articles.models import NormalizedArticle, RSSArticle

logger = logging.getLogger(__name__)


def decode_html(text: Optional[str]) -> str:
    """Decode HTML entities (&amp;, &#39;, &hellip; ...) in feed text."""
    if not text:
        return ""
    return html.unescape(text)


def clean_text(text: Optional[str]) -> Optional[str]:
    """Clean text by stripping HTML, decoding entities, and collapsing whitespace."""
    if not text:
        return None
    # Strip HTML tags (keep text content)
    text = re.sub(r"<[^>]+>", " ", text)
    text = html.unescape(text)
    # Collapse whitespace
    text = re.sub(r"\s+", " ", text).strip()
    return text if text else None


def to_rss_article(raw: Any) -> RSSArticle:
    """Build an RSSArticle from a dict or object, accepting camelCase keys."""
    if isinstance(raw, RSSArticle):
        return raw
    return RSSArticle(
        title=get_value(raw, "title") or "",
        link=get_value(raw, "link", "url") or "",
        source=get_value(raw, "source") or "",
        pub_date=get_value(raw, "pub_date", "pubDate"),
        content_snippet=get_value(raw, "content_snippet", "contentSnippet"),
        content=get_value(raw, "content"),
    )


def normalize_article(
    article: Any,
    tracking: TrackingParams = DEFAULT_TRACKING_PARAMS,
) -> NormalizedArticle:
    """Normalize link and title, parse the publish date, and pick a raw summary."""
    article = to_rss_article(article)
    return NormalizedArticle(
        title=article.title.strip(),
        link=normalize_url(article.link, tracking),
        source=article.source,
        pub_date=article.pub_date,
        content_snippet=article.content_snippet,
        content=article.content,
        published_at=to_iso(article.pub_date),
        raw_summary=article.content_snippet or article.content or "",
    )


def normalize_articles(
    articles: list[Any],
    tracking: TrackingParams = DEFAULT_TRACKING_PARAMS,
) -> list[NormalizedArticle]:
    """Normalize a batch of articles, skipping ones without a link."""
    if not articles:
        logger.warning("No articles to normalize")
        return []

    results = []
    for raw in articles:
        article = to_rss_article(raw)
        if not article.link:
            logger.warning("Skipping article with missing link: title=%s", article.title)
            continue
        results.append(normalize_article(article, tracking))

    logger.info("Normalized %d of %d articles", len(results), len(articles))
    return results
