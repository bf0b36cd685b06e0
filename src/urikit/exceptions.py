"""src/urikit/exceptions.py

Urikit Exceptions hierarchy.
"""


class UrikitError(Exception):
    """Base exception for all Urikit errors."""


class InvalidFieldError(UrikitError, ValueError):
    """
    A URI field setter received a value it cannot store.
    """


class UnknownFieldError(InvalidFieldError):
    """Field name outside the closed set of URI components."""

    def __init__(self, name: str):
        super().__init__(f"Unknown URI field: {name!r}")
        self.name = name


class InvalidOptionError(UrikitError, ValueError):
    """
    Query-string serialization options are invalid.
    """
