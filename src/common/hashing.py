"""Hashing utilities."""

import hashlib

from common.urls import DEFAULT_TRACKING_PARAMS, TrackingParams, normalize_url

TOPIC_KEY_LENGTH = 32


def _normalize_title(title: str) -> str:
    return (title or "").strip().casefold()


def _digest(*parts: str) -> str:
    # Length-prefix each part so ("ab", "c") and ("a", "bc") can't collide.
    payload = "|".join(f"{len(part)}:{part}" for part in parts)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:TOPIC_KEY_LENGTH]


def generate_topic_key(
    title: str,
    url: str,
    tracking: TrackingParams = DEFAULT_TRACKING_PARAMS,
) -> str:
    """Generate a topic key from an article title and its (raw) URL.

    The title is trimmed and case-folded and the URL has its tracking
    parameters removed before hashing, so the same story shared with
    different campaign tags maps to the same key.
    """
    return _digest(_normalize_title(title), normalize_url(url or "", tracking))


def generate_title_key(title: str) -> str:
    """Generate a topic key from the title alone."""
    return _digest(_normalize_title(title))
