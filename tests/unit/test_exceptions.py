"""tests/unit/test_exceptions.py"""

import pytest

from urikit.exceptions import (
    InvalidFieldError,
    InvalidOptionError,
    UnknownFieldError,
    UrikitError,
)


def test_exception_hierarchy():
    """Verify the inheritance structure of Urikit exceptions."""
    assert issubclass(InvalidFieldError, UrikitError)
    assert issubclass(InvalidFieldError, ValueError)
    assert issubclass(UnknownFieldError, InvalidFieldError)
    assert issubclass(InvalidOptionError, UrikitError)
    assert issubclass(InvalidOptionError, ValueError)


def test_unknown_field_error_message():
    """Verify that UnknownFieldError names the offending field."""
    with pytest.raises(UnknownFieldError) as exc_info:
        raise UnknownFieldError("query")
    assert "'query'" in str(exc_info.value)
    assert exc_info.value.name == "query"


@pytest.mark.parametrize(
    "exception_class",
    [
        UrikitError,
        InvalidFieldError,
        InvalidOptionError,
    ],
)
def test_generic_exceptions_accept_message(exception_class):
    """Verify that generic exceptions can be raised with a message."""
    message = f"Testing {exception_class.__name__}"
    with pytest.raises(exception_class) as exc_info:
        raise exception_class(message)
    assert message in str(exc_info.value)
