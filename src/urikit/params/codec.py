"""src/urikit/params/codec.py

Bracketed query-string serialization (``a=1&b[x]=2&c[]=3``).
"""

import re
from typing import Any, Dict, List, Mapping, Optional, Tuple

from urikit.options import QueryOptions
from urikit.utils.percent import quote_component, unquote_component

__all__ = ["decode_query", "encode_query"]

_BRACKETS = re.compile(r"\[([^\[\]]*)\]")


def decode_query(query: Optional[str], separator: str = "&") -> Dict[str, Any]:
    """
    Decode a query string into nested containers.

    ``a=1&b[x]=2&b[y]=3`` gives ``{"a": "1", "b": {"x": "2", "y": "3"}}``.
    Repeated plain keys overwrite, repeated ``key[]`` entries append to a list.

    Args:
        query: Raw query string, without the leading ``?``.
        separator: Pair separator accepted in addition to ``&``.

    Returns:
        A new dictionary, empty for ``None`` or ``""``.
    """
    result: Dict[str, Any] = {}
    if not query:
        return result

    if separator != "&":
        query = query.replace(separator, "&")

    for pair in query.split("&"):
        if not pair:
            continue
        raw_key, _, raw_value = pair.partition("=")
        key = unquote_component(raw_key)
        if not key:
            continue
        value = unquote_component(raw_value)
        name, path = _split_key(key)
        if not name:
            continue
        _store(result, name, path, value)

    return {key: _listify(value) for key, value in result.items()}


def _split_key(key: str) -> Tuple[str, List[str]]:
    """Split ``a[b][]`` into ``("a", ["b", ""])``; unbalanced keys stay literal."""
    start = key.find("[")
    if start <= 0:
        return key, []

    path: List[str] = []
    pos = start
    while pos < len(key) and key[pos] == "[":
        match = _BRACKETS.match(key, pos)
        if match is None:
            break
        path.append(match.group(1))
        pos = match.end()

    if not path:
        return key, []
    # Trailing garbage after the last bracket is dropped.
    return key[:start], path


def _store(result: Dict[str, Any], name: str, path: List[str], value: str) -> None:
    if not path:
        result[name] = value
        return

    container: Any = result
    segment = name
    for child in path:
        node = _child_container(container, segment, child)
        container, segment = node, child

    _assign(container, segment, value)


def _child_container(container: Any, segment: str, child: str) -> Any:
    """Return the container stored at ``segment``, creating or converting it."""
    if segment == "":
        node: Any = [] if child == "" else {}
        _assign(container, segment, node)
        return node

    # A named segment always lives in a map; lists are only reached through "[]".
    node = container.get(segment)
    if child == "":
        if not isinstance(node, (list, dict)):
            node = []
            _assign(container, segment, node)
        return node

    if isinstance(node, list):
        node = {str(index): item for index, item in enumerate(node)}
        _assign(container, segment, node)
    elif not isinstance(node, dict):
        node = {}
        _assign(container, segment, node)
    return node


def _assign(container: Any, segment: str, value: Any) -> None:
    """Store ``value`` under ``segment``; ``""`` means append."""
    if isinstance(container, list):
        container.append(value)
        return

    if segment == "":
        segment = str(_next_index(container))
    container[segment] = value


def _listify(node: Any) -> Any:
    """Turn maps keyed ``"0"`` .. ``"n-1"`` (in order) into lists, recursively."""
    if isinstance(node, list):
        return [_listify(item) for item in node]
    if not isinstance(node, dict):
        return node

    node = {key: _listify(value) for key, value in node.items()}
    if node and list(node) == [str(index) for index in range(len(node))]:
        return list(node.values())
    return node


def _is_index(key: str) -> bool:
    return key.isascii() and key.isdigit()


def _next_index(container: Dict[str, Any]) -> int:
    indices = [int(key) for key in container if _is_index(key)]
    return max(indices) + 1 if indices else 0


def encode_query(tree: Mapping[str, Any], options: Optional[QueryOptions] = None) -> str:
    """
    Encode nested containers as a bracketed query string.

    Args:
        tree: Parameters, typically a ``ValueTree``.
        options: Serialization options, defaults to ``QueryOptions()``.

    Returns:
        Pairs joined by ``options.separator``. ``None`` values and empty
        containers produce no pair.
    """
    if options is None:
        options = QueryOptions()

    pairs: List[str] = []
    for key, value in tree.items():
        name = str(key)
        if _is_index(name):
            name = options.numeric_prefix + name
        _encode_value(pairs, quote_component(name, options.encoding), value, options)

    return options.separator.join(pairs)


def _encode_value(pairs: List[str], prefix: str, value: Any, options: QueryOptions) -> None:
    if value is None:
        return

    if isinstance(value, Mapping):
        items = [(str(key), item) for key, item in value.items()]
    elif isinstance(value, (list, tuple)):
        items = [(str(index), item) for index, item in enumerate(value)]
    else:
        pairs.append(f"{prefix}={quote_component(value, options.encoding)}")
        return

    open_, close = quote_component("[", options.encoding), quote_component("]", options.encoding)
    for key, item in items:
        child = f"{prefix}{open_}{quote_component(key, options.encoding)}{close}"
        _encode_value(pairs, child, item, options)
