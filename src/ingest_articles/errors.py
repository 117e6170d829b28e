"""Exceptions raised while ingesting feeds."""


class FeedFetchError(RuntimeError):
    """A feed could not be fetched or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch RSS feed from {url}: {reason}")
        self.url = url
        self.reason = reason
