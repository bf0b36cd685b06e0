"""tests/unit/test_utils.py"""

import pytest

from urikit.exceptions import InvalidFieldError, UnknownFieldError
from urikit.options import EncodingMode
from urikit.utils.percent import quote_component, to_text, unquote_component
from urikit.utils.validators import FIELD_NAMES, coerce_port, validate_field_name


@pytest.mark.parametrize(
    "value, encoding, expected",
    [
        ("a b", EncodingMode.RFC1738, "a+b"),
        ("a b", EncodingMode.RFC3986, "a%20b"),
        ("x~y", EncodingMode.RFC1738, "x%7Ey"),
        ("x~y", EncodingMode.RFC3986, "x~y"),
        ("a/b&c=d", EncodingMode.RFC1738, "a%2Fb%26c%3Dd"),
        ("a/b&c=d", EncodingMode.RFC3986, "a%2Fb%26c%3Dd"),
        ("-_.", EncodingMode.RFC1738, "-_."),
        ("é", EncodingMode.RFC3986, "%C3%A9"),
    ],
)
def test_quote_component(value, encoding, expected):
    """Test percent-encoding with both escaping tables."""
    assert quote_component(value, encoding) == expected


def test_unquote_component():
    """Test percent-decoding treats '+' as a space."""
    assert unquote_component("a+b%20c%26d") == "a b c&d"


@pytest.mark.parametrize(
    "value, expected",
    [(True, "1"), (False, "0"), (3, "3"), (1.5, "1.5"), ("x", "x")],
)
def test_to_text(value, expected):
    """Test scalar stringification."""
    assert to_text(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [(8080, 8080), ("443", 443), (" 81 ", 81), (None, None)],
)
def test_coerce_port(value, expected):
    """Test port coercion of valid values."""
    assert coerce_port(value) == expected


@pytest.mark.parametrize("value", ["abc", "", "12a", 1.5, True, "²"])
def test_coerce_port_rejects_invalid(value):
    """Test port coercion rejects anything but ints and digit strings."""
    with pytest.raises(InvalidFieldError):
        coerce_port(value)


def test_validate_field_name():
    """Test the closed set of field names."""
    for name in FIELD_NAMES:
        assert validate_field_name(name) == name
    with pytest.raises(UnknownFieldError):
        validate_field_name("query")
    with pytest.raises(UnknownFieldError):
        validate_field_name("password_hash")


def test_validate_field_name_pass_alias():
    """Test "pass" names the password field."""
    assert validate_field_name("pass") == "password"
