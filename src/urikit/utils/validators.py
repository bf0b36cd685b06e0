"""utils/validators.py

Validation utilities for Urikit.
"""

from typing import Any, Optional

from urikit.exceptions import InvalidFieldError, UnknownFieldError

FIELD_NAMES = ("scheme", "user", "password", "host", "port", "path", "fragment")

# "pass" cannot be a method name, but is accepted as a field name.
FIELD_ALIASES = {"pass": "password"}


def validate_field_name(name: str) -> str:
    """Return the accessor name for a URI field, raise if it is not one."""
    name = FIELD_ALIASES.get(name, name)
    if name not in FIELD_NAMES:
        raise UnknownFieldError(name)
    return name


def coerce_port(value: Any) -> Optional[int]:
    """Convert a port given as int or digit string, ``None`` clears it."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidFieldError(f"Invalid port: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        return int(value.strip())
    raise InvalidFieldError(f"Invalid port: {value!r}")
