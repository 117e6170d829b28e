"""URL normalization utilities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping
from urllib.parse import unquote_plus, urlsplit, urlunsplit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TrackingParams:
    """Denylist of query parameters that carry attribution, not identity.

    A parameter matches when its lower-cased name is one of `names` or starts
    with one of `prefixes`.
    """

    names: frozenset[str] = field(default_factory=frozenset)
    prefixes: tuple[str, ...] = ()

    def matches(self, name: str) -> bool:
        lowered = name.lower()
        if lowered in self.names:
            return True
        return any(lowered.startswith(prefix) for prefix in self.prefixes)

    @classmethod
    def from_config(cls, section: Mapping[str, Any] | None) -> TrackingParams:
        """Build from a config mapping with optional `names` and `prefixes` lists."""
        if not section:
            return DEFAULT_TRACKING_PARAMS
        names = section.get("names") or []
        prefixes = section.get("prefixes") or []
        if isinstance(names, str) or isinstance(prefixes, str):
            raise ValueError("tracking names and prefixes must be lists")
        return cls(
            names=frozenset(str(n).lower() for n in names),
            prefixes=tuple(str(p).lower() for p in prefixes),
        )


DEFAULT_TRACKING_PARAMS = TrackingParams(
    names=frozenset(
        {
            "fbclid",
            "gclid",
            "dclid",
            "gbraid",
            "wbraid",
            "msclkid",
            "yclid",
            "twclid",
            "ttclid",
            "li_fat_id",
            "igshid",
            "mc_cid",
            "mc_eid",
            "_hsenc",
            "_hsmi",
        }
    ),
    prefixes=("utm_",),
)


def _param_name(pair: str) -> str:
    name, _, _ = pair.partition("=")
    return unquote_plus(name)


def normalize_url(url: str, tracking: TrackingParams = DEFAULT_TRACKING_PARAMS) -> str:
    """
    Remove tracking query parameters from a URL.

    Remaining parameters keep their order and original encoding. If nothing is
    left the query string is dropped entirely. Strings that don't parse as an
    absolute URL are returned unchanged.

    Args:
        url: Raw URL string.
        tracking: Parameters to strip.

    Returns:
        The normalized URL, or `url` itself if it can't be parsed.
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        logger.debug("Unparseable URL left as-is: %s", url)
        return url

    if not parts.scheme or not parts.netloc:
        return url

    if not parts.query and "?" not in url.split("#", 1)[0]:
        return url

    kept = [
        pair
        for pair in parts.query.split("&")
        if pair and not tracking.matches(_param_name(pair))
    ]
    return urlunsplit(
        (parts.scheme, parts.netloc, parts.path, "&".join(kept), parts.fragment)
    )
