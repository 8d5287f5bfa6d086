"""src/urivalue/exceptions.py

Urivalue Exceptions hierarchy.
"""


class UriError(Exception):
    """Base exception for all Urivalue errors."""


class MalformedUri(UriError, ValueError):
    """
    The given string cannot be split into URI components.
    Raised only while constructing a URI.
    """

    def __init__(self, message: str = "The given URI is not well formed"):
        super().__init__(message)


class UriRelationError(UriError):
    """Base exception for failed preconditions of relational operations."""


class BaseNotAbsolute(UriRelationError):
    """The base URI is relative where an absolute one is required."""

    def __init__(self, message: str = "The given URI is not absolute"):
        super().__init__(message)


class SelfNotRelative(UriRelationError):
    """The current URI is absolute where a relative one is required."""

    def __init__(self, message: str = "The current URI is not relative"):
        super().__init__(message)


class SelfNotAbsolute(UriRelationError):
    """The current URI is relative where an absolute one is required."""

    def __init__(self, message: str = "The current URI is not absolute"):
        super().__init__(message)


class NotUnder(UriRelationError):
    """The current URI is not located under the base URI."""

    def __init__(self, message: str = "The current URI is not under the given URI"):
        super().__init__(message)
