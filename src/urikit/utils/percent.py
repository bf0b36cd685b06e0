"""src/urikit/utils/percent.py

Percent-encoding helpers shared by the query codec and the URL composer.
"""

import urllib.parse
from typing import Any

from urikit.options import EncodingMode


def to_text(value: Any) -> str:
    """Stringify a scalar the way it appears in a query string."""
    if value is True:
        return "1"
    if value is False:
        return "0"
    return str(value)


def quote_component(value: Any, encoding: EncodingMode = EncodingMode.RFC1738) -> str:
    """
    Percent-encode a single component.

    Only ``A-Z a-z 0-9 - _ .`` are left as-is; RFC 1738 additionally escapes
    ``~`` and writes spaces as ``+``.
    """
    text = to_text(value)
    if encoding is EncodingMode.RFC3986:
        return urllib.parse.quote(text, safe="~")
    return urllib.parse.quote_plus(text, safe="").replace("~", "%7E")


def unquote_component(value: str) -> str:
    """Decode a percent-encoded component, treating ``+`` as a space."""
    return urllib.parse.unquote_plus(value)
