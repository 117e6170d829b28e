"""Google News RSS search feeds."""

import logging
from urllib.parse import quote

from ingest_articles.fetch_articles.fetch_rss_articles import fetch_rss_feed
from ingest_articles.models import RSSArticle

logger = logging.getLogger(__name__)

GOOGLE_NEWS_RSS_URL = "https://news.google.com/rss/search"


def build_google_news_rss_url(
    keywords: list[str],
    *,
    hl: str = "en-US",
    gl: str = "US",
    ceid: str = "US:en",
) -> str:
    """Build a Google News search feed URL matching any of `keywords`."""
    query = quote(" OR ".join(keywords), safe="!~*'()")
    return f"{GOOGLE_NEWS_RSS_URL}?q={query}&hl={hl}&gl={gl}&ceid={ceid}"


def fetch_industry_news(
    keywords: list[str],
    *,
    hl: str = "en-US",
    gl: str = "US",
    ceid: str = "US:en",
    timeout: float | None = None,
    user_agent: str | None = None,
) -> list[RSSArticle]:
    """Fetch Google News articles for the given keywords."""
    if not keywords:
        logger.warning("No keywords given for industry news")
        return []
    url = build_google_news_rss_url(keywords, hl=hl, gl=gl, ceid=ceid)
    logger.info("Fetching industry news for %d keywords", len(keywords))
    return fetch_rss_feed(url, timeout=timeout, user_agent=user_agent)
