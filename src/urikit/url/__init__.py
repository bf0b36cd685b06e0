"""src/urikit/url/__init__.py

URL grammar and relative reference resolution for Urikit.
"""

from .grammar import DEFAULT_SCHEME, Fields, compose_url, fill_scheme, split_url
from .resolver import collapse_dot_segments, resolve_reference

__all__ = [
    "DEFAULT_SCHEME",
    "Fields",
    "split_url",
    "compose_url",
    "fill_scheme",
    "resolve_reference",
    "collapse_dot_segments",
]
