"""src/urikit/options.py

Query-string serialization options.
"""

import enum
from dataclasses import dataclass

from urikit.exceptions import InvalidOptionError

__all__ = ["EncodingMode", "QueryOptions"]


class EncodingMode(enum.Enum):
    """Escaping table used when encoding query keys and values."""

    # Space as "+", "~" escaped (application/x-www-form-urlencoded).
    RFC1738 = "RFC1738"
    # Space as "%20", "~" left alone.
    RFC3986 = "RFC3986"


@dataclass(frozen=True)
class QueryOptions:
    """
    Query-string serialization options.

    Fixed for the lifetime of a URI and shared by every encode call it makes.

    Attributes:
        numeric_prefix: Prefix prepended to top-level numeric keys.
        separator: String joining the ``key=value`` pairs.
        encoding: Escaping table for keys and values.
    """

    numeric_prefix: str = ""
    separator: str = "&"
    encoding: EncodingMode = EncodingMode.RFC1738

    def __post_init__(self) -> None:
        if not isinstance(self.numeric_prefix, str):
            raise InvalidOptionError(
                f"numeric_prefix must be a string, got {self.numeric_prefix!r}"
            )
        if not isinstance(self.separator, str) or not self.separator:
            raise InvalidOptionError(
                f"separator must be a non-empty string, got {self.separator!r}"
            )
        if not isinstance(self.encoding, EncodingMode):
            raise InvalidOptionError(f"Unknown encoding mode: {self.encoding!r}")

    @classmethod
    def from_mode(
        cls, mode: str, numeric_prefix: str = "", separator: str = "&"
    ) -> "QueryOptions":
        """Create options from an encoding mode name (``"RFC1738"`` or ``"RFC3986"``)."""
        try:
            encoding = EncodingMode(str(mode).upper())
        except ValueError as exc:
            raise InvalidOptionError(f"Unknown encoding mode: {mode!r}") from exc
        return cls(numeric_prefix=numeric_prefix, separator=separator, encoding=encoding)
