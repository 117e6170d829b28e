"""Tests for ingest_articles.ingest_articles orchestration."""

from datetime import datetime, timezone
from unittest.mock import patch

from common.config import DiscoverConfig
from ingest_articles.errors import FeedFetchError
from ingest_articles.ingest_articles import dedupe_by_link, filter_recent, ingest_articles, sort_newest_first
from ingest_articles.models import NormalizedArticle, RSSArticle


def _article(title: str, pub_date: str | None = None) -> RSSArticle:
    return RSSArticle(
        title=title,
        link=f"https://example.com/{title}?utm_source=rss",
        source="Example",
        pub_date=pub_date,
    )


def _normalized(title: str, link: str, published_at: str | None = None) -> NormalizedArticle:
    return NormalizedArticle(
        title=title,
        link=link,
        source="Example",
        pub_date=published_at,
        content_snippet=None,
        content=None,
        published_at=published_at,
        raw_summary="",
    )


class TestFilterRecent:
    def test_keeps_only_newer_articles(self) -> None:
        articles = [
            _article("old", "Sun, 31 Dec 2023 12:00:00 GMT"),
            _article("new", "Mon, 01 Jan 2024 12:00:00 GMT"),
            _article("undated"),
        ]
        since = datetime(2024, 1, 1, tzinfo=timezone.utc)
        assert [a.title for a in filter_recent(articles, since)] == ["new"]

    def test_naive_since_treated_as_utc(self) -> None:
        articles = [_article("new", "2024-01-01T00:30:00+00:00")]
        assert len(filter_recent(articles, datetime(2024, 1, 1))) == 1


class TestIngestArticles:
    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_happy_path_returns_normalized_articles(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = [_article("feed")]
        mock_news.return_value = [_article("news")]

        result = ingest_articles(["https://a.com/feed"], ["solar"], DiscoverConfig())

        assert [a.title for a in result] == ["feed", "news"]
        assert result[0].link == "https://example.com/feed"
        mock_feeds.assert_called_once_with(
            ["https://a.com/feed"], max_workers=8, timeout=30, user_agent="article-discovery/1.0 (RSS reader)"
        )

    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_no_keywords_skips_google_news(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = [_article("feed")]
        ingest_articles(["https://a.com/feed"], [], DiscoverConfig())
        mock_news.assert_not_called()

    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_google_news_failure_keeps_feed_articles(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = [_article("feed")]
        mock_news.side_effect = FeedFetchError("https://news.google.com/rss/search", "boom")

        result = ingest_articles(["https://a.com/feed"], ["solar"], DiscoverConfig())

        assert [a.title for a in result] == ["feed"]

    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_empty_fetch_returns_empty(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = []
        assert ingest_articles([], [], DiscoverConfig()) == []

    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_since_filters_articles(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = [
            _article("old", "2023-01-01T00:00:00Z"),
            _article("new", "2024-06-01T00:00:00Z"),
        ]
        since = datetime(2024, 1, 1, tzinfo=timezone.utc)
        result = ingest_articles(["https://a.com/feed"], [], DiscoverConfig(), since=since)
        assert [a.title for a in result] == ["new"]

    @patch("ingest_articles.ingest_articles.fetch_industry_news")
    @patch("ingest_articles.ingest_articles.fetch_custom_rss_feeds")
    def test_drops_cross_source_duplicates_and_sorts_newest_first(self, mock_feeds, mock_news) -> None:
        mock_feeds.return_value = [
            RSSArticle(
                title="Old", link="https://x.com/a?utm_source=feed", source="Feed",
                pub_date="Mon, 01 Jan 2024 08:00:00 GMT",
            ),
            RSSArticle(
                title="New", link="https://x.com/b", source="Feed",
                pub_date="Tue, 02 Jan 2024 08:00:00 GMT",
            ),
        ]
        mock_news.return_value = [
            RSSArticle(
                title="Old", link="https://x.com/a?utm_source=gn", source="Google News",
                pub_date="Mon, 01 Jan 2024 09:00:00 GMT",
            ),
        ]

        result = ingest_articles(["https://a.com/feed"], ["solar"], DiscoverConfig())

        assert [(a.title, a.link) for a in result] == [
            ("New", "https://x.com/b"),
            ("Old", "https://x.com/a"),
        ]
        assert result[1].source == "Feed"


class TestDedupeByLink:
    def test_keeps_first_of_each_link(self) -> None:
        articles = [
            _normalized("first", "https://x.com/a"),
            _normalized("other", "https://x.com/b"),
            _normalized("second", "https://x.com/a"),
        ]
        assert [a.title for a in dedupe_by_link(articles)] == ["first", "other"]

    def test_empty(self) -> None:
        assert dedupe_by_link([]) == []


class TestSortNewestFirst:
    def test_undated_articles_go_last(self) -> None:
        articles = [
            _normalized("undated-1", "https://x.com/1"),
            _normalized("older", "https://x.com/2", "2024-01-01T00:00:00+00:00"),
            _normalized("undated-2", "https://x.com/3"),
            _normalized("newer", "https://x.com/4", "2024-01-02T00:00:00+00:00"),
        ]
        assert [a.title for a in sort_newest_first(articles)] == [
            "newer", "older", "undated-1", "undated-2",
        ]

    def test_compares_across_offsets(self) -> None:
        articles = [
            _normalized("utc-noon", "https://x.com/1", "2024-01-01T12:00:00+00:00"),
            _normalized("est-8am", "https://x.com/2", "2024-01-01T08:00:00-05:00"),
        ]
        assert [a.title for a in sort_newest_first(articles)] == ["est-8am", "utc-noon"]
