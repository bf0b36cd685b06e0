"""src/urikit/params/tree.py

Nested, dot-addressable parameter tree for Urikit.
"""

import copy
from typing import (
    Any,
    Callable,
    Dict,
    Iterator,
    List,
    Mapping,
    MutableMapping,
    Optional,
    Tuple,
    Union,
)

__all__ = ["Value", "ValueTree"]

# Scalar | List | Map. Scalars are normally strings; other scalars are
# stringified when the tree is encoded.
Value = Union[str, List[Any], Dict[str, Any]]


class ValueTree(MutableMapping[str, Any]):
    """
    Query parameters as a tree of scalars, lists and nested maps.

    Keys in dot notation (``"post.content.html"``) walk through nested maps.
    Only ``set()`` and ``add()`` create intermediate maps, overwriting any
    non-map value found on the way. ``get()``, ``has()`` and ``remove()``
    never create nodes.

    Behaves like a dictionary on its top-level keys and compares equal to
    a plain ``dict`` holding the same data.

    Values are deep-copied on the way in, so a tree never shares containers
    with its caller or with another tree.
    """

    __slots__ = ("_data",)

    def __init__(self, data: Optional[Mapping[str, Any]] = None):
        self._data: Dict[str, Any] = {}
        if data:
            for key, value in data.items():
                self._data[str(key)] = copy.deepcopy(value)

    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)

    def __delitem__(self, key: str) -> None:
        del self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"ValueTree({self._data!r})"

    def navigate(
        self, key: str, create: bool = False
    ) -> Optional[Tuple[str, Dict[str, Any]]]:
        """
        Walk a dotted key down to the map that holds its last segment.

        Args:
            key: Key in dot notation.
            create: Install an empty map at every intermediate segment that
                does not already hold one (write mode).

        Returns:
            ``(leaf_key, container)`` or ``None`` when, in read mode, an
            intermediate segment is missing or is not a map.
        """
        *parents, leaf = key.split(".")
        container = self._data

        for segment in parents:
            child = container.get(segment)
            if not isinstance(child, dict):
                if not create:
                    return None
                child = {}
                container[segment] = child
            container = child

        return leaf, container

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a parameter.

        Args:
            key: Key in dot notation.
            default: Returned when the key is missing.

        Returns:
            The stored value, or ``default``.
        """
        found = self.navigate(key)
        if found is None:
            return default
        leaf, container = found
        return container.get(leaf, default)

    def has(self, key: str) -> bool:
        """Check whether a dotted key exists (``None`` values count as present)."""
        found = self.navigate(key)
        if found is None:
            return False
        leaf, container = found
        return leaf in container

    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under a dotted key, replacing whatever was there."""
        leaf, container = self.navigate(key, create=True)  # type: ignore[misc]
        container[leaf] = copy.deepcopy(value)

    def add(self, key: str, value: Any) -> None:
        """
        Add a value under a dotted key.

        A missing key is simply set. An existing list gets ``value`` appended.
        An existing scalar or map is turned into ``[old, value]``.
        """
        leaf, container = self.navigate(key, create=True)  # type: ignore[misc]
        value = copy.deepcopy(value)
        if leaf not in container:
            container[leaf] = value
        elif isinstance(container[leaf], list):
            container[leaf].append(value)
        else:
            container[leaf] = [container[leaf], value]

    def remove(self, key: str) -> None:
        """Delete a dotted key. Missing keys and paths are ignored."""
        found = self.navigate(key)
        if found is None:
            return
        leaf, container = found
        container.pop(leaf, None)

    def remove_where(self, predicate: Callable[[str, Any], bool]) -> None:
        """
        Delete every leaf for which ``predicate(dotted_key, value)`` is true.

        The predicate sees the pairs produced by ``flatten()``.
        """
        doomed = [key for key, value in self.flatten() if predicate(key, value)]
        for key in doomed:
            self.remove(key)

    def flatten(self, prefix: str = "") -> List[Tuple[str, Any]]:
        """
        List ``(dotted_key, value)`` leaves in insertion order.

        Non-empty maps are recursed into; an empty map is itself a leaf.
        Lists are leaves.
        """
        return _flatten(self._data, prefix)

    def to_dict(self) -> Dict[str, Any]:
        """Return a deep copy of the tree as plain containers."""
        return copy.deepcopy(self._data)


def _flatten(data: Dict[str, Any], prefix: str) -> List[Tuple[str, Any]]:
    pairs: List[Tuple[str, Any]] = []
    for key, value in data.items():
        if isinstance(value, dict) and value:
            pairs.extend(_flatten(value, f"{prefix}{key}."))
        else:
            pairs.append((f"{prefix}{key}", value))
    return pairs
