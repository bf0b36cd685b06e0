"""src/urikit/document.py

Fluent URL document for Urikit.
"""

from typing import Any, Callable, Mapping, Optional, Union

from urikit.options import EncodingMode, QueryOptions
from urikit.params.codec import decode_query, encode_query
from urikit.params.tree import ValueTree
from urikit.url.grammar import DEFAULT_SCHEME, Fields, compose_url, fill_scheme, split_url
from urikit.url.resolver import resolve_reference
from urikit.utils.validators import coerce_port, validate_field_name

__all__ = ["URI", "parse"]

# Distinguishes "read" calls from "write None" calls on the accessors.
_UNSET: Any = object()

FieldValue = Union[Optional[str], "URI"]


class URI:
    """
    A parsed URL whose parts and query parameters can be changed in place.

    Every accessor reads when called without argument and writes (returning
    the URI itself for chaining) when called with one::

        uri = URI("https://example.com/dir/sub/file.php?page=1")
        uri.relative("../../hello.php").set("post.id", "42").fragment("top")
        str(uri)  # 'https://example.com/hello.php?page=1&post%5Bid%5D=42#top'

    Query parameters live in a ``ValueTree`` addressed with dot-notation keys.
    Query options are fixed at construction and used for every rendering.

    Instances are not thread-safe: callers sharing one URI across threads
    must serialize access themselves.
    """

    __slots__ = ("_original", "_fields", "_params", "_options", "default_scheme")

    def __init__(
        self,
        url: str,
        options: Optional[QueryOptions] = None,
        default_scheme: str = DEFAULT_SCHEME,
    ):
        self._options = options if options is not None else QueryOptions()
        self.default_scheme = default_scheme
        self._fields = Fields(path="/")
        self._params = ValueTree()
        self._original = ""
        self.reparse(url)

    def reparse(self, url: str) -> "URI":
        """
        Replace every component and parameter with those parsed from ``url``.

        A protocol-relative ``url`` (``"://host/path"``) reuses the current
        scheme, or the default scheme when there is none.
        """
        self._original = url
        self._fields = split_url(fill_scheme(url, self._fields.scheme, self.default_scheme))
        self._params = ValueTree(decode_query(self._fields.query, self._options.separator))
        return self

    @property
    def options(self) -> QueryOptions:
        """Query-string options used when rendering."""
        return self._options

    def original(self) -> str:
        """Return the string this URI was parsed from."""
        return self._original

    # Components

    def _field(self, name: str, value: Any) -> Any:
        if value is _UNSET:
            return getattr(self._fields, name)
        setattr(self._fields, name, value)
        return self

    def scheme(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the scheme."""
        return self._field("scheme", value)

    def user(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the user name (stored decoded)."""
        return self._field("user", value)

    def password(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the password (stored decoded)."""
        return self._field("password", value)

    def host(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the host."""
        return self._field("host", value)

    def port(self, value: Union[int, str, None] = _UNSET) -> Union[Optional[int], "URI"]:
        """
        Get / set the port.

        Raises:
            InvalidFieldError: If the value is neither an int nor a digit string.
        """
        if value is _UNSET:
            return self._fields.port
        return self._field("port", coerce_port(value))

    def path(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the path."""
        return self._field("path", value)

    def fragment(self, value: Optional[str] = _UNSET) -> FieldValue:
        """Get / set the fragment."""
        return self._field("fragment", value)

    def field(self, name: str, value: Any = _UNSET) -> Any:
        """
        Get / set a component by name.

        Raises:
            UnknownFieldError: If ``name`` is not one of ``scheme``, ``user``,
                ``password`` (or ``pass``), ``host``, ``port``, ``path`` or
                ``fragment``.
        """
        accessor = getattr(self, validate_field_name(name))
        return accessor(value)

    def extension(self, value: Optional[str] = _UNSET) -> FieldValue:
        """
        Get / set the path extension.

        Reads the text after the last ``.`` of the path, ``None`` if there is
        no dot. Writing replaces that text, or appends ``.`` and the new
        extension when the path has none.
        """
        path = self._fields.path or ""
        pos = path.rfind(".")

        if value is _UNSET:
            return None if pos == -1 else path[pos + 1 :]

        suffix = "" if value is None else value
        if pos == -1:
            self._fields.path = f"{path}.{suffix}"
        else:
            self._fields.path = path[: pos + 1] + suffix
        return self

    # Query

    def query(self, value: Optional[str] = _UNSET) -> Union[str, "URI"]:
        """Get the encoded query string / replace the parameters by decoding one."""
        if value is _UNSET:
            return encode_query(self._params, self._options)
        self._fields.query = value
        self._params = ValueTree(decode_query(value, self._options.separator))
        return self

    def params(self, value: Optional[Mapping[str, Any]] = _UNSET) -> Union[ValueTree, "URI"]:
        """Get the parameter tree / replace it wholesale."""
        if value is _UNSET:
            return self._params
        self._params = ValueTree(value)
        return self

    def add(self, key: str, value: Any) -> "URI":
        """Add a parameter; an existing value becomes (or extends) a list."""
        self._params.add(key, value)
        return self

    def set(self, key: str, value: Any) -> "URI":
        """Set a parameter, replacing any previous value."""
        self._params.set(key, value)
        return self

    def get(self, key: str, default: Any = None) -> Any:
        """Get a parameter, ``default`` when missing."""
        return self._params.get(key, default)

    def has(self, key: str) -> bool:
        """Check whether a parameter exists."""
        return self._params.has(key)

    def remove(self, key_or_predicate: Union[str, Callable[[str, Any], bool]]) -> "URI":
        """
        Remove a parameter.

        Args:
            key_or_predicate: A key in dot notation, or a callable receiving
                ``(dotted_key, value)`` for every leaf and returning ``True``
                for the ones to remove.
        """
        if callable(key_or_predicate):
            self._params.remove_where(key_or_predicate)
        else:
            self._params.remove(key_or_predicate)
        return self

    # Resolution and rendering

    def relative(self, reference: str) -> "URI":
        """
        Resolve a reference against this URI.

        Paths (``../x``, ``/x``, ``x?a=1#top``) update this URI in place.
        Full URLs (``http://...``, ``://host/...``, ``:///path``) produce a
        new URI; do not rely on the returned object being ``self``.
        """
        return resolve_reference(self, reference)

    def url(self) -> str:
        """Render the URL."""
        return compose_url(self._fields, self.query(), has_params=len(self._params) > 0)

    def __str__(self) -> str:
        return self.url()

    def __repr__(self) -> str:
        return f"<URI {self.url()!r}>"


def parse(
    url: str,
    numeric_prefix: str = "",
    separator: str = "&",
    encoding: Union[EncodingMode, str] = EncodingMode.RFC1738,
    default_scheme: str = DEFAULT_SCHEME,
) -> URI:
    """
    Parse ``url`` into a URI.

    Args:
        url: The URL to parse.
        numeric_prefix: Prefix for top-level numeric keys in the query string.
        separator: String joining query pairs.
        encoding: ``EncodingMode`` or its name (``"RFC1738"``, ``"RFC3986"``).
        default_scheme: Scheme used for protocol-relative input.

    Raises:
        InvalidOptionError: If the query options are invalid.
    """
    if isinstance(encoding, EncodingMode):
        options = QueryOptions(numeric_prefix, separator, encoding)
    else:
        options = QueryOptions.from_mode(encoding, numeric_prefix, separator)
    return URI(url, options=options, default_scheme=default_scheme)
