"""
Option Module

A two-state value wrapper, Present(value) or Empty, used for null-safe property
access. It has the shape of Result without the failure state.
"""

from typing import Any, Callable, Generic, Iterator, Optional, TypeVar

from .error_handling import NoSuchElementError, require_non_null

T = TypeVar('T')
U = TypeVar('U')


class Option(Generic[T]):
    """
    Abstract optional value. Build instances with ``of``, ``of_nullable`` or ``empty``.

    Example:
        >>> Option.of_nullable({"a": 1}.get("b")).or_else(0)
        0
    """

    __slots__ = ()

    def __new__(cls, *args: Any, **kwargs: Any) -> "Option[T]":
        if cls is Option:
            raise TypeError("Option cannot be instantiated directly, use Option.of, of_nullable or empty")
        return super().__new__(cls)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "Option[T]":
        return self

    def __deepcopy__(self, memo: dict) -> "Option[T]":
        return self

    @staticmethod
    def of(value: T) -> "Option[T]":
        """
        Wrap a non-None value.

        Raises:
            NullArgumentError: If value is None
        """
        return Present(value)

    @staticmethod
    def of_nullable(value: Optional[T]) -> "Option[T]":
        return Present(value) if value is not None else EMPTY

    @staticmethod
    def empty() -> "Option[Any]":
        return EMPTY

    def is_present(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return not self.is_present()

    def get(self) -> T:
        """
        Return the value.

        Raises:
            NoSuchElementError: If no value is present
        """
        raise NoSuchElementError("No value present")

    def map(self, mapper: Callable[[T], U]) -> "Option[U]":
        """Return ``of_nullable(mapper(value))`` when present, empty otherwise."""
        if self.is_present():
            require_non_null(mapper, "mapper")
            return Option.of_nullable(mapper(self.get()))
        return EMPTY

    def flat_map(self, mapper: Callable[[T], "Option[U]"]) -> "Option[U]":
        if self.is_present():
            require_non_null(mapper, "mapper")
            return mapper(self.get())
        return EMPTY

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if self.is_present():
            require_non_null(predicate, "predicate")
            return self if predicate(self.get()) else EMPTY
        return self

    def transform(self, transformer: Callable[["Option[T]"], U]) -> U:
        require_non_null(transformer, "transformer")
        return transformer(self)

    def if_present(self, when_present: Callable[[T], Any]) -> None:
        if self.is_present():
            require_non_null(when_present, "when_present")
            when_present(self.get())

    def if_present_or_else(self, when_present: Callable[[T], Any], when_empty: Callable[[], Any]) -> None:
        if self.is_present():
            require_non_null(when_present, "when_present")
            when_present(self.get())
        else:
            require_non_null(when_empty, "when_empty")
            when_empty()

    def if_empty(self, when_empty: Callable[[], Any]) -> None:
        if self.is_empty():
            require_non_null(when_empty, "when_empty")
            when_empty()

    def peek_if_present(self, when_present: Callable[[T], Any]) -> "Option[T]":
        self.if_present(when_present)
        return self

    def peek_if_present_or_else(self, when_present: Callable[[T], Any],
                                when_empty: Callable[[], Any]) -> "Option[T]":
        self.if_present_or_else(when_present, when_empty)
        return self

    def peek_if_empty(self, when_empty: Callable[[], Any]) -> "Option[T]":
        self.if_empty(when_empty)
        return self

    def or_else(self, other: Optional[T]) -> Optional[T]:
        return self.get() if self.is_present() else other

    def or_else_get(self, other: Callable[[], T]) -> T:
        if self.is_present():
            return self.get()
        require_non_null(other, "other")
        return other()

    def or_else_throw(self, exception_supplier: Callable[[], BaseException]) -> T:
        if self.is_present():
            return self.get()
        require_non_null(exception_supplier, "exception_supplier")
        raise exception_supplier()

    def to_result(self):
        """Convert to a Result: Present becomes Success, Empty becomes the empty Result."""
        from .result import Result

        return Result.success(self.get()) if self.is_present() else Result.empty()

    def __iter__(self) -> Iterator[T]:
        if self.is_present():
            yield self.get()


class Present(Option[T]):
    __slots__ = ("_value",)

    def __init__(self, value: T):
        object.__setattr__(self, "_value", require_non_null(value, "value"))

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Present) and self._value == other._value

    def __hash__(self) -> int:
        return hash((Present, self._value))

    def __repr__(self) -> str:
        return f"Option.of({self._value!r})"


class _Empty(Option[Any]):
    __slots__ = ()

    _instance = None

    def __new__(cls) -> "_Empty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Option.empty()"


EMPTY: Option[Any] = _Empty()

of = Option.of
of_nullable = Option.of_nullable
empty = Option.empty
