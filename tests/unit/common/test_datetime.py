"""Tests for common.datetime module."""

from datetime import datetime, timedelta, timezone

from common.datetime import parse_datetime, to_iso


class TestParseDatetime:
    def test_none_returns_none(self) -> None:
        assert parse_datetime(None) is None

    def test_aware_datetime_passthrough(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert parse_datetime(dt) is dt

    def test_naive_datetime_gets_utc(self) -> None:
        result = parse_datetime(datetime(2024, 1, 1, 12, 0, 0))
        assert result.tzinfo == timezone.utc

    def test_iso_string_with_z_suffix(self) -> None:
        result = parse_datetime("2024-01-01T12:00:00Z")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_rfc2822_with_gmt(self) -> None:
        result = parse_datetime("Mon, 01 Jan 2024 12:00:00 GMT")
        assert result == datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def test_est_timezone(self) -> None:
        result = parse_datetime("Mon, 01 Jan 2024 12:00:00 EST")
        assert result.utcoffset() == timedelta(hours=-5)

    def test_date_only_string_gets_utc(self) -> None:
        result = parse_datetime("2024-01-01")
        assert result == datetime(2024, 1, 1, tzinfo=timezone.utc)

    def test_invalid_string_returns_none(self) -> None:
        assert parse_datetime("not a date") is None

    def test_blank_string_returns_none(self) -> None:
        assert parse_datetime("   ") is None


class TestToIso:
    def test_formats_parsed_value(self) -> None:
        assert to_iso("Mon, 01 Jan 2024 12:00:00 GMT") == "2024-01-01T12:00:00+00:00"

    def test_invalid_returns_none(self) -> None:
        assert to_iso("garbage") is None
