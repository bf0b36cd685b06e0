"""src/urikit/__init__.py

Urikit - Fluent URL parsing, relative resolution and nested query parameters.

Urikit splits a URL into its components, lets you change them through a
chainable interface, resolves relative references against it and keeps the
query string as a tree of parameters addressed with dot-notation keys.

Key Features:
    - Zero external dependencies
    - Relative reference resolution with ``..`` collapsing
    - Nested query parameters (``post.content.html`` <-> ``post[content][html]``)
    - RFC 1738 and RFC 3986 query encodings
    - Full type hints (PEP 561)

Example:
    Basic usage::

        from urikit import URI

        uri = URI('https://example.com/blog/2024/post.php?utm_source=x&page=2')
        uri.relative('../archive.php')
        uri.remove(lambda key, value: key.startswith('utm_'))
        uri.set('filter.tag', 'python')
        print(uri)
        # https://example.com/blog/archive.php?page=2&filter%5Btag%5D=python

    Custom query options::

        from urikit import parse

        uri = parse('https://example.com/?a=1', separator=';', encoding='RFC3986')
"""

from urikit.document import URI, parse
from urikit.exceptions import (
    InvalidFieldError,
    InvalidOptionError,
    UnknownFieldError,
    UrikitError,
)
from urikit.options import EncodingMode, QueryOptions
from urikit.params import ValueTree, decode_query, encode_query
from urikit.url import Fields, collapse_dot_segments, compose_url, split_url
from urikit.version import __version__

__all__ = [
    "URI",
    "parse",
    "QueryOptions",
    "EncodingMode",
    "ValueTree",
    "Fields",
    "split_url",
    "compose_url",
    "decode_query",
    "encode_query",
    "collapse_dot_segments",
    "UrikitError",
    "InvalidFieldError",
    "UnknownFieldError",
    "InvalidOptionError",
    "__version__",
]
