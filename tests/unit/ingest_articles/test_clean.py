"""Tests for ingest_articles.clean_articles.clean module."""

from ingest_articles.clean_articles.clean import (
    clean_text,
    decode_html,
    normalize_article,
    normalize_articles,
    to_rss_article,
)
from ingest_articles.models import RSSArticle
from common.urls import TrackingParams


class TestDecodeHtml:
    def test_decodes_named_and_numeric_entities(self) -> None:
        assert decode_html("Tom &amp; Jerry&#39;s &hellip;") == "Tom & Jerry's …"

    def test_none_returns_empty(self) -> None:
        assert decode_html(None) == ""


class TestCleanText:
    def test_strips_html_tags(self) -> None:
        assert clean_text("<h1>Title</h1> <p>Body</p>") == "Title Body"

    def test_decodes_entities(self) -> None:
        assert clean_text("<p>R&amp;D&nbsp;spend</p>") == "R&D spend"

    def test_collapses_whitespace(self) -> None:
        assert clean_text("multiple   spaces \n here") == "multiple spaces here"

    def test_none_returns_none(self) -> None:
        assert clean_text(None) is None

    def test_whitespace_only_returns_none(self) -> None:
        assert clean_text("  <br/>  \n\t ") is None


class TestToRssArticle:
    def test_accepts_camel_case_keys(self) -> None:
        article = to_rss_article(
            {
                "title": "T",
                "link": "https://example.com",
                "source": "S",
                "pubDate": "2024-01-01",
                "contentSnippet": "snip",
            }
        )
        assert article.pub_date == "2024-01-01"
        assert article.content_snippet == "snip"
        assert article.content is None

    def test_passes_through_rss_article(self) -> None:
        article = RSSArticle(title="T", link="https://example.com", source="S")
        assert to_rss_article(article) is article


class TestNormalizeArticle:
    def test_normalizes_fields(self) -> None:
        article = RSSArticle(
            title="  Solar Energy Growth ",
            link="https://example.com/solar?utm_source=rss&id=7",
            source="Tech News",
            pub_date="Mon, 01 Jan 2024 12:00:00 GMT",
            content_snippet="Solar energy is growing rapidly",
            content="Full content",
        )
        result = normalize_article(article)

        assert result.title == "Solar Energy Growth"
        assert result.link == "https://example.com/solar?id=7"
        assert result.published_at == "2024-01-01T12:00:00+00:00"
        assert result.raw_summary == "Solar energy is growing rapidly"
        assert result.source == "Tech News"

    def test_does_not_mutate_input(self) -> None:
        article = RSSArticle(title=" T ", link="https://example.com/?utm_source=x", source="S")
        normalize_article(article)
        assert article.title == " T "
        assert article.link == "https://example.com/?utm_source=x"

    def test_raw_summary_falls_back_to_content(self) -> None:
        article = RSSArticle(title="T", link="https://x.com", source="S", content_snippet="", content="Body")
        assert normalize_article(article).raw_summary == "Body"

    def test_raw_summary_empty_when_no_text(self) -> None:
        article = RSSArticle(title="T", link="https://x.com", source="S")
        assert normalize_article(article).raw_summary == ""

    def test_missing_or_invalid_date_gives_none(self) -> None:
        assert normalize_article(RSSArticle("T", "https://x.com", "S")).published_at is None
        invalid = RSSArticle("T", "https://x.com", "S", pub_date="yesterday-ish")
        assert normalize_article(invalid).published_at is None

    def test_uses_given_tracking_params(self) -> None:
        tracking = TrackingParams(names=frozenset({"ref"}))
        article = RSSArticle(title="T", link="https://x.com/a?ref=1&utm_source=y", source="S")
        assert normalize_article(article, tracking).link == "https://x.com/a?utm_source=y"


class TestNormalizeArticles:
    def test_skips_articles_without_link(self) -> None:
        articles = [
            RSSArticle(title="No link", link="", source="S"),
            {"title": "Has link", "link": "https://example.com/a", "source": "S"},
        ]
        result = normalize_articles(articles)
        assert [a.title for a in result] == ["Has link"]

    def test_empty_input_returns_empty(self) -> None:
        assert normalize_articles([]) == []

    def test_none_input_returns_empty(self) -> None:
        assert normalize_articles(None) == []
