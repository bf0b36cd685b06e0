"""src/urikit/url/grammar.py

URL splitter and composer for Urikit.
"""

import re
import urllib.parse
from typing import Any, Dict, Optional, Tuple, cast

from urikit.logs import logger
from urikit.options import EncodingMode
from urikit.utils.percent import quote_component

__all__ = ["DEFAULT_SCHEME", "Fields", "fill_scheme", "split_url", "compose_url"]

DEFAULT_SCHEME = "https"

# RFC 3986, appendix B. Every group is optional so the pattern always matches.
_URI_RE = re.compile(
    r"^(?:(?P<scheme>[^:/?#]+):)?"
    r"(?://(?P<authority>[^/?#]*))?"
    r"(?P<path>[^?#]*)"
    r"(?:\?(?P<query>[^#]*))?"
    r"(?:#(?P<fragment>.*))?$",
    re.DOTALL,
)

MAX_PORT = 65535


class Fields:
    """The eight syntactic components of a URL. Absent components are ``None``."""

    __slots__ = ("scheme", "user", "password", "host", "port", "path", "query", "fragment")

    def __init__(
        self,
        scheme: Optional[str] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        host: Optional[str] = None,
        port: Optional[int] = None,
        path: Optional[str] = None,
        query: Optional[str] = None,
        fragment: Optional[str] = None,
    ):
        self.scheme = scheme
        self.user = user
        self.password = password
        self.host = host
        self.port = port
        self.path = path
        self.query = query
        self.fragment = fragment

    def as_dict(self) -> Dict[str, Any]:
        """Return the components as a dictionary keyed by field name."""
        return {name: getattr(self, name) for name in self.__slots__}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Fields):
            return NotImplemented
        return self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        present = ", ".join(
            f"{name}={value!r}" for name, value in self.as_dict().items() if value is not None
        )
        return f"Fields({present})"


def fill_scheme(raw: str, scheme: Optional[str], default_scheme: str = DEFAULT_SCHEME) -> str:
    """Prefix a protocol-relative ``://host/...`` string with a scheme."""
    if raw.startswith("://"):
        return (scheme if scheme is not None else default_scheme) + raw
    return raw


def split_url(raw: str) -> Fields:
    """
    Split a URL-like string into its components.

    Never raises: whatever cannot be recognised is recorded as absent. An
    absent path is normalised to ``"/"``.
    """
    # Every group is optional, so the pattern matches any string.
    match = cast("re.Match[str]", _URI_RE.match(raw))

    fields = Fields(
        scheme=match.group("scheme"),
        path=match.group("path") or "/",
        query=match.group("query"),
        fragment=match.group("fragment"),
    )

    authority = match.group("authority")
    if authority:
        _split_authority(authority, fields)

    return fields


def _split_authority(authority: str, fields: Fields) -> None:
    userinfo, at, hostport = authority.rpartition("@")
    if at:
        user, colon, password = userinfo.partition(":")
        fields.user = urllib.parse.unquote(user)
        fields.password = urllib.parse.unquote(password) if colon else None

    host, port = _split_hostport(hostport)
    fields.host = host or None
    if port is None:
        return

    if port.isascii() and port.isdigit() and int(port) <= MAX_PORT:
        fields.port = int(port)
    elif port:
        logger.debug("Dropping invalid port %r in authority %r", port, authority)


def _split_hostport(hostport: str) -> Tuple[str, Optional[str]]:
    if hostport.startswith("["):
        end = hostport.find("]")
        if end != -1:
            rest = hostport[end + 1 :]
            if rest.startswith(":"):
                return hostport[: end + 1], rest[1:]
            if rest:
                logger.debug("Dropping %r after IPv6 host in %r", rest, hostport)
            return hostport[: end + 1], None

    host, colon, port = hostport.rpartition(":")
    if not colon:
        return hostport, None
    return host, port


def compose_url(fields: Fields, encoded_query: str = "", has_params: bool = False) -> str:
    """
    Render components back into a URL.

    Args:
        fields: Components to render. ``query`` is ignored in favour of
            ``encoded_query``.
        encoded_query: Already encoded query string.
        has_params: Whether the parameter tree is non-empty; the query part
            is only written when it is.
    """
    result = f"{fields.scheme or ''}://"

    if fields.user is not None:
        result += quote_component(fields.user, EncodingMode.RFC1738)
        if fields.password is not None:
            result += ":" + quote_component(fields.password, EncodingMode.RFC1738)
        result += "@"

    result += fields.host or ""

    if fields.port is not None:
        result += f":{fields.port}"

    if fields.path is not None:
        result += fields.path

    if has_params:
        result += f"?{encoded_query}"

    if fields.fragment is not None:
        result += f"#{fields.fragment}"

    return result
