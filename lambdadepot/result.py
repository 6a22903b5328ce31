"""
Result Module for lambdadepot

A tri-state value wrapper that is exactly one of:

- Success: carries a non-None value
- Failure: carries an exception, no value
- Empty:   carries neither (a single shared instance)

Results are immutable. Every combinator returns a new Result, or the same
instance when nothing applies. Collaborators passed to a combinator are
validated before the state is looked at, so passing None fails even in a state
that would never call it.
"""

from typing import Any, Callable, Generic, Optional, TypeVar, Union

from .error_handling import (
    NoSuchElementError,
    UnresolvedFailureError,
    require_non_null,
)
from .predicates import instance_of

T = TypeVar('T')
R = TypeVar('R')

# An exception class, a tuple of them, or a predicate over the error
ErrorFilter = Union[type, tuple, Callable[[BaseException], bool], None]


def _error_matcher(when: ErrorFilter) -> Callable[[BaseException], bool]:
    if when is None:
        return lambda error: True
    if isinstance(when, type):
        return instance_of(when)
    if isinstance(when, tuple):
        return instance_of(*when)
    if callable(when):
        return when
    raise TypeError(f"when must be an exception type or a predicate, got {type(when).__name__}")


class Result(Generic[T]):
    """
    Abstract tri-state result. Build instances with ``success``,
    ``success_or_empty``, ``failure`` or ``empty``.

    Example:
        >>> Result.success("42").map(int).filter(lambda n: n > 40).get_value()
        42
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Result[T]":
        if cls is Result:
            raise TypeError("Result cannot be instantiated directly, use Result.success, failure or empty")
        return super().__new__(cls)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Result[T]":
        return self

    def __deepcopy__(self, memo: dict) -> "Result[T]":
        return self

    # Construction

    @staticmethod
    def success(value: T) -> "Result[T]":
        """
        Wrap a value as a successful Result.

        Raises:
            NullArgumentError: If value is None
        """
        return Success(value)

    @staticmethod
    def success_or_empty(value: Optional[T]) -> "Result[T]":
        """Wrap a value as Success, or return Empty when it is None."""
        return Success(value) if value is not None else EMPTY

    @staticmethod
    def failure(error: BaseException) -> "Result[Any]":
        """
        Wrap an exception as a failed Result.

        Raises:
            NullArgumentError: If error is None
            TypeError: If error is not an exception instance
        """
        return Failure(error)

    @staticmethod
    def empty() -> "Result[Any]":
        """Return the shared empty Result."""
        return EMPTY

    # State

    def is_success(self) -> bool:
        return False

    def is_failure(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return False

    def get_value(self) -> T:
        """
        Return the value of a successful Result.

        Raises:
            NoSuchElementError: If this Result is not success
        """
        raise NoSuchElementError("No value present")

    def get_error(self) -> BaseException:
        """
        Return the error of a failed Result.

        Raises:
            NoSuchElementError: If this Result is not failure
        """
        raise NoSuchElementError("No error present")

    def has_value(self) -> "Result[bool]":
        return Result.success(self.is_success())

    def has_error(self) -> "Result[bool]":
        return Result.success(self.is_failure())

    def has_nothing(self) -> "Result[bool]":
        return Result.success(self.is_empty())

    # Transformation

    def map(self, mapper: Callable[[T], R]) -> "Result[R]":
        """
        Apply ``mapper`` to the value of a successful Result.

        Args:
            mapper: Function applied to the value

        Returns:
            ``success_or_empty(mapper(value))`` on success, this Result otherwise.
            Exceptions raised by mapper propagate.

        Raises:
            NullArgumentError: If mapper is None
        """
        require_non_null(mapper, "mapper")
        if self.is_success():
            return Result.success_or_empty(mapper(self.get_value()))
        return self

    def flat_map(self, mapper: Callable[[T], "Result[R]"]) -> "Result[R]":
        """Return ``mapper(value)`` on success, this Result otherwise."""
        require_non_null(mapper, "mapper")
        if self.is_success():
            return mapper(self.get_value())
        return self

    def filter(self, predicate: Callable[[T], bool]) -> "Result[T]":
        """Keep a successful Result only if ``predicate(value)`` holds; otherwise Empty."""
        require_non_null(predicate, "predicate")
        if self.is_success() and not predicate(self.get_value()):
            return EMPTY
        return self

    def transform(self, transformer: Callable[["Result[T]"], R]) -> R:
        """Return ``transformer(self)``."""
        require_non_null(transformer, "transformer")
        return transformer(self)

    # Failure handling

    def _failure_matches(self, when: ErrorFilter) -> bool:
        matcher = _error_matcher(when)
        return self.is_failure() and bool(matcher(self.get_error()))

    def if_failure_map(self, mapper: Callable[[BaseException], BaseException],
                       when: ErrorFilter = None) -> "Result[T]":
        """
        Replace the error of a matching failure with ``mapper(error)``.

        Args:
            mapper: Function producing the replacement exception
            when: Optional exception type (or tuple of types) or predicate the
                  error must match; absent matches every error

        Returns:
            A new failure on match, this Result otherwise

        Raises:
            NullArgumentError: If mapper is None
        """
        require_non_null(mapper, "mapper")
        if self._failure_matches(when):
            return Result.failure(mapper(self.get_error()))
        return self

    def if_failure_resume(self, mapper: Callable[[BaseException], "Result[T]"],
                          when: ErrorFilter = None) -> "Result[T]":
        """Replace a matching failure with the Result returned by ``mapper(error)``."""
        require_non_null(mapper, "mapper")
        if self._failure_matches(when):
            return mapper(self.get_error())
        return self

    def if_failure_return(self, fallback_value: T, when: ErrorFilter = None) -> "Result[T]":
        """
        Replace a matching failure with ``success(fallback_value)``.

        Raises:
            NullArgumentError: If fallback_value is None
        """
        require_non_null(fallback_value, "fallback_value")
        if self._failure_matches(when):
            return Result.success(fallback_value)
        return self

    def if_failure_return_get(self, fallback_supplier: Callable[[], T],
                              when: ErrorFilter = None) -> "Result[T]":
        """Replace a matching failure with ``success(fallback_supplier())``."""
        require_non_null(fallback_supplier, "fallback_supplier")
        if self._failure_matches(when):
            return Result.success(fallback_supplier())
        return self

    # Empty handling

    def if_empty_return(self, default_value: T) -> "Result[T]":
        require_non_null(default_value, "default_value")
        if self.is_empty():
            return Result.success(default_value)
        return self

    def if_empty_return_get(self, default_supplier: Callable[[], T]) -> "Result[T]":
        require_non_null(default_supplier, "default_supplier")
        if self.is_empty():
            return Result.success(default_supplier())
        return self

    def if_empty_resume(self, alternative: "Result[T]") -> "Result[T]":
        require_non_null(alternative, "alternative")
        if self.is_empty():
            return alternative
        return self

    def if_empty_resume_get(self, alternative_supplier: Callable[[], "Result[T]"]) -> "Result[T]":
        require_non_null(alternative_supplier, "alternative_supplier")
        if self.is_empty():
            return alternative_supplier()
        return self

    # Observation

    def peek_if_success(self, on_success: Callable[[T], Any]) -> "Result[T]":
        """Call ``on_success(value)`` if successful and return this Result."""
        require_non_null(on_success, "on_success")
        if self.is_success():
            on_success(self.get_value())
        return self

    def peek_if_failure(self, on_failure: Callable[[BaseException], Any],
                        when: ErrorFilter = None) -> "Result[T]":
        """Call ``on_failure(error)`` for a matching failure and return this Result."""
        require_non_null(on_failure, "on_failure")
        if self._failure_matches(when):
            on_failure(self.get_error())
        return self

    def peek_if_empty(self, on_empty: Callable[[], Any]) -> "Result[T]":
        require_non_null(on_empty, "on_empty")
        if self.is_empty():
            on_empty()
        return self

    def if_success(self, success_action: Callable[[T], Any]) -> None:
        require_non_null(success_action, "success_action")
        if self.is_success():
            success_action(self.get_value())

    def if_failure(self, failure_action: Callable[[BaseException], Any]) -> None:
        require_non_null(failure_action, "failure_action")
        if self.is_failure():
            failure_action(self.get_error())

    def if_empty(self, empty_action: Callable[[], Any]) -> None:
        require_non_null(empty_action, "empty_action")
        if self.is_empty():
            empty_action()

    def if_success_or_failure(self, success_action: Callable[[T], Any],
                              failure_action: Callable[[BaseException], Any]) -> None:
        require_non_null(success_action, "success_action")
        require_non_null(failure_action, "failure_action")
        if self.is_success():
            success_action(self.get_value())
        elif self.is_failure():
            failure_action(self.get_error())

    def if_success_or_empty(self, success_action: Callable[[T], Any],
                            empty_action: Callable[[], Any]) -> None:
        require_non_null(success_action, "success_action")
        require_non_null(empty_action, "empty_action")
        if self.is_success():
            success_action(self.get_value())
        elif self.is_empty():
            empty_action()

    def if_failure_or_empty(self, failure_action: Callable[[BaseException], Any],
                            empty_action: Callable[[], Any]) -> None:
        require_non_null(failure_action, "failure_action")
        require_non_null(empty_action, "empty_action")
        if self.is_failure():
            failure_action(self.get_error())
        elif self.is_empty():
            empty_action()

    def if_success_or_else(self, success_action: Callable[[T], Any],
                           failure_action: Callable[[BaseException], Any],
                           empty_action: Callable[[], Any]) -> None:
        """Call exactly one of the three actions, according to the state."""
        require_non_null(success_action, "success_action")
        require_non_null(failure_action, "failure_action")
        require_non_null(empty_action, "empty_action")
        if self.is_success():
            success_action(self.get_value())
        elif self.is_failure():
            failure_action(self.get_error())
        else:
            empty_action()

    # Extraction

    def or_else_throw(self, empty_supplier: Callable[[], BaseException],
                      failure_supplier: Optional[Callable[[], BaseException]] = None) -> T:
        """
        Return the value, or raise.

        Args:
            empty_supplier: Produces the exception raised when this Result is empty
            failure_supplier: Produces the exception raised when this Result is a
                              failure. When omitted, a failure raises
                              UnresolvedFailureError chained from the carried error
                              instead of anything from ``empty_supplier``.

        Returns:
            The value of a successful Result

        Raises:
            NullArgumentError: If empty_supplier is None
            UnresolvedFailureError: On failure without a failure_supplier
        """
        require_non_null(empty_supplier, "empty_supplier")
        if self.is_success():
            return self.get_value()
        if self.is_empty():
            raise empty_supplier()
        if failure_supplier is None:
            error = self.get_error()
            raise UnresolvedFailureError(error) from error
        raise failure_supplier()


class Success(Result[T]):
    """A successful Result carrying a non-None value."""

    __slots__ = ("_value",)

    def __init__(self, value: T):
        object.__setattr__(self, "_value", require_non_null(value, "value"))

    def is_success(self) -> bool:
        return True

    def get_value(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Success, self._value))

    def __repr__(self) -> str:
        return f"Success({self._value!r})"


class Failure(Result[Any]):
    """A failed Result carrying the exception that occurred."""

    __slots__ = ("_error",)

    def __init__(self, error: BaseException):
        require_non_null(error, "error")
        if not isinstance(error, BaseException):
            raise TypeError(f"error must be an exception instance, got {type(error).__name__}")
        object.__setattr__(self, "_error", error)

    def is_failure(self) -> bool:
        return True

    def get_error(self) -> BaseException:
        return self._error

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure) and self._error is other._error

    def __hash__(self) -> int:
        return hash((Failure, id(self._error)))

    def __repr__(self) -> str:
        return f"Failure({self._error!r})"


class _Empty(Result[Any]):
    __slots__ = ()

    _instance = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_empty(self) -> bool:
        return True

    def __repr__(self) -> str:
        return "Result.empty()"


EMPTY: Result[Any] = _Empty()

success = Result.success
success_or_empty = Result.success_or_empty
failure = Result.failure
empty = Result.empty
