"""Common utility functions."""

from typing import Any


def get_value(obj: Any, key: str, *aliases: str) -> Any:
    """Get value from dict or object attribute, trying `aliases` if `key` is missing."""
    for name in (key, *aliases):
        if isinstance(obj, dict):
            if name in obj:
                return obj[name]
        elif hasattr(obj, name):
            return getattr(obj, name)
    return None
