"""
Error Handling Module for lambdadepot

This module defines the exceptions raised by the library and the argument
guard used by every combinator. Programming-contract violations (a missing
collaborator) are reported eagerly through NullArgumentError; domain failures
are carried by Result and only surface through its accessors.
"""

from typing import Optional, TypeVar

T = TypeVar('T')


class LambdaDepotError(Exception):
    """Base exception for lambdadepot errors."""
    pass


class NullArgumentError(LambdaDepotError, TypeError):
    """A required argument was None."""

    def __init__(self, name: str):
        super().__init__(f"{name} must not be None")
        self.name = name


class NoSuchElementError(LambdaDepotError, LookupError):
    """The requested value or error is not present."""
    pass


class UnresolvedFailureError(LambdaDepotError, RuntimeError):
    """
    Raised when a failed Result is unwrapped without a failure-specific
    exception supplier. The carried error is available as ``error`` and is
    chained as ``__cause__``.
    """

    def __init__(self, error: BaseException):
        super().__init__(f"Result is failure: {error!r}")
        self.error = error


def require_non_null(value: Optional[T], name: str) -> T:
    """
    Validate that an argument is not None.

    Args:
        value: The argument to check
        name (str): Parameter name reported in the error

    Returns:
        The value unchanged

    Raises:
        NullArgumentError: If the value is None
    """
    if value is None:
        raise NullArgumentError(name)
    return value
