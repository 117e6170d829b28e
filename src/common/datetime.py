"""Datetime utilities."""

from datetime import datetime, timedelta, timezone

from dateutil.parser import parse as parse_date

# Timezone abbreviations seen in RSS pubDate values
TZINFOS = {
    "EST": timezone(timedelta(hours=-5)),
    "EDT": timezone(timedelta(hours=-4)),
    "CST": timezone(timedelta(hours=-6)),
    "CDT": timezone(timedelta(hours=-5)),
    "MST": timezone(timedelta(hours=-7)),
    "MDT": timezone(timedelta(hours=-6)),
    "PST": timezone(timedelta(hours=-8)),
    "PDT": timezone(timedelta(hours=-7)),
    "GMT": timezone.utc,
    "UTC": timezone.utc,
    "BST": timezone(timedelta(hours=1)),
}


def parse_datetime(value) -> datetime | None:
    """Parse an RFC 2822 / ISO datetime string, or return as-is if already datetime.

    Naive results are assumed to be UTC. Missing or unparseable values give None.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = parse_date(value, tzinfos=TZINFOS)
    except (ValueError, OverflowError):
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def to_iso(value) -> str | None:
    """ISO-8601 string for a datetime-like value, or None."""
    dt = parse_datetime(value)
    return dt.isoformat() if dt else None
