"""
Functions Module

Fixed-arity function wrappers (arity 0 to 4) supporting partial application,
argument reversal, currying, sequencing and lifting into Result.

Invoking a wrapper never catches: whatever the wrapped callable raises reaches
the caller. Only ``lift`` translates raised exceptions into Result failures.
"""

import functools
import logging
from typing import Any, Callable, Tuple

from .arity import ArityWrapper
from .error_handling import require_non_null
from .result import Result

logger = logging.getLogger(__name__)


def _capture(invoke: Callable[..., Any], name: str, *args: Any, **kwargs: Any) -> Result:
    try:
        value = invoke(*args, **kwargs)
    except Exception as e:
        logger.debug("Captured %s raised by %s: %s", type(e).__name__, name, e)
        return Result.failure(e)
    return Result.success_or_empty(value)


class _FunctionN(ArityWrapper):
    __slots__ = ()

    _argument_name = "function"

    def _invoke(self, *args: Any) -> Any:
        return self.apply(*args)

    def _member(self, arity: int):
        return FUNCTIONS[arity]

    def and_then(self, after: Callable[[Any], Any]) -> "_FunctionN":
        """
        Compose ``after`` onto the result of this function.

        Args:
            after: Single-argument callable receiving this function's result

        Returns:
            A function of the same arity returning ``after(self(...))``

        Raises:
            NullArgumentError: If after is None
        """
        require_non_null(after, "after")
        invoke = self.apply
        return self._member(self.arity)(lambda *args: after(invoke(*args)))

    def lift(self) -> "_FunctionN":
        """
        Return a function of the same arity whose invocation returns a Result.

        A normal return becomes ``Result.success_or_empty(value)``; any
        ``Exception`` raised becomes ``Result.failure(exception)`` carrying the
        raised instance. ``BaseException`` subclasses outside ``Exception``
        (KeyboardInterrupt, SystemExit) are not captured.
        """
        invoke, name = self.apply, self.name
        return self._member(self.arity)(functools.partial(_capture, invoke, name))

    def _curried(self) -> "Function1":
        rest = FUNCTIONS[self.arity - 1]
        invoke = self.apply
        return Function1(lambda t1: rest(functools.partial(invoke, t1)))


class Function0(_FunctionN):
    """A zero-argument function, interchangeable with a value-producing thunk."""

    __slots__ = ()

    arity = 0

    @staticmethod
    def just(value: Any) -> "Function0":
        """Return a Function0 that always produces ``value``."""
        return Function0(lambda: value)

    def apply(self) -> Any:
        return self._fn()

    def get(self) -> Any:
        """Supplier alias of ``apply``."""
        return self.apply()


class Function1(_FunctionN):
    __slots__ = ()

    arity = 1

    @staticmethod
    def identity() -> "Function1":
        """Return a Function1 that returns its argument."""
        return Function1(lambda t1: t1)

    def apply(self, t1: Any) -> Any:
        return self._fn(t1)

    def compose(self, before: Callable[[Any], Any]) -> "Function1":
        """
        Return a Function1 applying ``before`` first and this function to its result.

        Raises:
            NullArgumentError: If before is None
        """
        require_non_null(before, "before")
        invoke = self.apply
        return Function1(lambda t: invoke(before(t)))


class Function2(_FunctionN):
    __slots__ = ()

    arity = 2

    def apply(self, t1: Any, t2: Any) -> Any:
        return self._fn(t1, t2)

    def reverse(self) -> "Function2":
        """Return a Function2 taking ``(t2, t1)``."""
        return self._reversed()

    def curry(self) -> Function1:
        """Return ``t1 -> t2 -> self(t1, t2)``."""
        return self._curried()


class Function3(_FunctionN):
    __slots__ = ()

    arity = 3

    def apply(self, t1: Any, t2: Any, t3: Any) -> Any:
        return self._fn(t1, t2, t3)

    def reverse(self) -> "Function3":
        """Return a Function3 taking ``(t3, t2, t1)``."""
        return self._reversed()

    def curry(self) -> Function1:
        """Return a Function1 of ``t1`` producing the Function2 of ``(t2, t3)``."""
        return self._curried()


class Function4(_FunctionN):
    __slots__ = ()

    arity = 4

    def apply(self, t1: Any, t2: Any, t3: Any, t4: Any) -> Any:
        return self._fn(t1, t2, t3, t4)

    def reverse(self) -> "Function4":
        """Return a Function4 taking ``(t4, t3, t2, t1)``."""
        return self._reversed()

    def curry(self) -> Function1:
        """Return a Function1 of ``t1`` producing the Function3 of ``(t2, t3, t4)``."""
        return self._curried()


FUNCTIONS: Tuple[type, ...] = (Function0, Function1, Function2, Function3, Function4)


def as_function0(supplier: Callable[[], Any]) -> Function0:
    """Wrap a zero-argument callable as a new Function0."""
    return Function0(supplier)


def as_function1(function: Callable[[Any], Any]) -> Function1:
    """Wrap a one-argument callable as a new Function1."""
    return Function1(function)


def as_function2(function: Callable[[Any, Any], Any]) -> Function2:
    """Wrap a two-argument callable as a new Function2."""
    return Function2(function)


def as_function3(function: Callable[[Any, Any, Any], Any]) -> Function3:
    """Wrap a three-argument callable as a new Function3."""
    return Function3(function)


def as_function4(function: Callable[[Any, Any, Any, Any], Any]) -> Function4:
    """Wrap a four-argument callable as a new Function4."""
    return Function4(function)


def lift(fn: Callable[..., Any]) -> Callable[..., Result]:
    """
    Decorate a plain callable of any signature so that it returns a Result.

    Args:
        fn: The callable to wrap

    Returns:
        A callable with the same signature returning ``Result.success_or_empty``
        of the return value, or ``Result.failure`` of a raised ``Exception``

    Raises:
        NullArgumentError: If fn is None

    Example:
        >>> @lift
        ... def parse(text):
        ...     return int(text)
        >>> parse("x").is_failure()
        True
    """
    require_non_null(fn, "fn")
    name = getattr(fn, "__qualname__", repr(fn))

    @functools.wraps(fn)
    def lifted(*args: Any, **kwargs: Any) -> Result:
        return _capture(fn, name, *args, **kwargs)

    return lifted
