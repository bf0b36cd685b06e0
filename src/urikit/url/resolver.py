"""src/urikit/url/resolver.py

Relative reference resolution for Urikit.
"""

from typing import TYPE_CHECKING, List

from urikit.logs import logger
from urikit.url.grammar import fill_scheme

if TYPE_CHECKING:  # pragma: no cover
    from urikit.document import URI

__all__ = ["resolve_reference", "collapse_dot_segments"]


def resolve_reference(document: "URI", reference: str) -> "URI":
    """
    Resolve ``reference`` against ``document``.

    Handles three shapes of reference:

    - ``:///path``: same scheme, host and port, new path. Returns a new URI.
    - ``scheme://...`` or ``://host/...``: a full URL, the scheme being
      filled in when missing. Returns a new URI.
    - anything else is a path, optionally followed by ``?query`` and
      ``#fragment``. ``document`` is updated in place and returned.

    New URIs keep the query options and default scheme of ``document``.
    """
    if ":///" in reference:
        logger.debug("Resolving %r as a scheme and authority relative reference", reference)
        return _rebuild(document, _authority_relative(document, reference))

    if "://" in reference:
        logger.debug("Resolving %r as a full URL", reference)
        return _rebuild(
            document, fill_scheme(reference, document.scheme(), document.default_scheme)
        )

    path = reference
    if "?" in reference:
        path, tail = reference.split("?", 1)
        if "#" in tail:
            query, fragment = tail.split("#", 1)
            document.fragment(fragment)
        else:
            query = tail
            document.fragment(None)
        document.query(query)

    path = path.strip()
    if not path.startswith("/"):
        if path.startswith("./"):
            path = path[2:]
        current = document.path() or ""
        path = current[: current.rfind("/") + 1] + path

    document.path(collapse_dot_segments(path))
    return document


def _authority_relative(document: "URI", reference: str) -> str:
    if not reference.startswith(":///"):
        return reference

    scheme = document.scheme()
    url = f"{scheme if scheme is not None else document.default_scheme}://{document.host() or ''}"
    if document.port() is not None:
        url += f":{document.port()}"
    return url + reference[3:]


def _rebuild(document: "URI", url: str) -> "URI":
    return type(document)(url, options=document.options, default_scheme=document.default_scheme)


def collapse_dot_segments(path: str) -> str:
    """
    Remove every ``..`` segment together with the segment before it.

    ``/dir/sub/file.php`` joined with ``../../hello.php`` collapses to
    ``/hello.php``. A leading ``..`` with nothing before it is dropped on its
    own. Single ``.`` segments are kept.
    """
    tokens: List[str] = path.split("/")

    while ".." in tokens:
        index = tokens.index("..")
        if index == 0:
            logger.debug("Dropping leading '..' with no parent segment in %r", path)
            del tokens[0]
        else:
            del tokens[index - 1 : index + 1]

    return "/".join(tokens)
