"""
Predicates Module

Fixed-arity predicate wrappers (arity 0 to 4) with short-circuit logical
combinators, plus builders for commonly needed single-argument predicates.
"""

from typing import Any, Callable, Optional, Sequence, Tuple

from .arity import ArityWrapper
from .error_handling import require_non_null


class _PredicateN(ArityWrapper):
    __slots__ = ()

    _argument_name = "predicate"

    def _invoke(self, *args: Any) -> bool:
        return self.test(*args)

    def _member(self, arity: int):
        return PREDICATES[arity]

    def and_(self, other: Callable[..., bool]) -> "_PredicateN":
        """
        Short-circuit conjunction: ``other`` is only evaluated when this predicate is true.

        Raises:
            NullArgumentError: If other is None
        """
        require_non_null(other, "other")
        test = self.test
        return self._member(self.arity)(lambda *args: test(*args) and bool(other(*args)))

    def or_(self, other: Callable[..., bool]) -> "_PredicateN":
        """
        Short-circuit disjunction: ``other`` is only evaluated when this predicate is false.

        Raises:
            NullArgumentError: If other is None
        """
        require_non_null(other, "other")
        test = self.test
        return self._member(self.arity)(lambda *args: test(*args) or bool(other(*args)))

    def negate(self) -> "_PredicateN":
        test = self.test
        return self._member(self.arity)(lambda *args: not test(*args))

    def __and__(self, other: Callable[..., bool]) -> "_PredicateN":
        return self.and_(other)

    def __or__(self, other: Callable[..., bool]) -> "_PredicateN":
        return self.or_(other)

    def __invert__(self) -> "_PredicateN":
        return self.negate()


class Predicate0(_PredicateN):
    """A zero-argument predicate, interchangeable with a boolean-producing thunk."""

    __slots__ = ()

    arity = 0

    def test(self) -> bool:
        return bool(self._fn())

    def get(self) -> bool:
        """Supplier alias of ``test``."""
        return self.test()


class Predicate1(_PredicateN):
    __slots__ = ()

    arity = 1

    def test(self, t1: Any) -> bool:
        return bool(self._fn(t1))


class Predicate2(_PredicateN):
    __slots__ = ()

    arity = 2

    def test(self, t1: Any, t2: Any) -> bool:
        return bool(self._fn(t1, t2))

    def reverse(self) -> "Predicate2":
        return self._reversed()


class Predicate3(_PredicateN):
    __slots__ = ()

    arity = 3

    def test(self, t1: Any, t2: Any, t3: Any) -> bool:
        return bool(self._fn(t1, t2, t3))

    def reverse(self) -> "Predicate3":
        return self._reversed()


class Predicate4(_PredicateN):
    __slots__ = ()

    arity = 4

    def test(self, t1: Any, t2: Any, t3: Any, t4: Any) -> bool:
        return bool(self._fn(t1, t2, t3, t4))

    def reverse(self) -> "Predicate4":
        return self._reversed()


PREDICATES: Tuple[type, ...] = (Predicate0, Predicate1, Predicate2, Predicate3, Predicate4)


def as_predicate0(supplier: Callable[[], bool]) -> Predicate0:
    return Predicate0(supplier)


def as_predicate1(predicate: Callable[[Any], bool]) -> Predicate1:
    return Predicate1(predicate)


def as_predicate2(predicate: Callable[[Any, Any], bool]) -> Predicate2:
    return Predicate2(predicate)


def as_predicate3(predicate: Callable[[Any, Any, Any], bool]) -> Predicate3:
    return Predicate3(predicate)


def as_predicate4(predicate: Callable[[Any, Any, Any, Any], bool]) -> Predicate4:
    return Predicate4(predicate)


def _validate_predicates(predicates: Sequence[Callable[[Any], bool]]) -> None:
    if not predicates:
        raise ValueError("no predicate supplied to evaluate")
    if any(predicate is None for predicate in predicates):
        raise ValueError("None predicate supplied")


def all_of(*predicates: Callable[[Any], bool]) -> Predicate1:
    """
    Combine predicates into one that holds when every predicate holds.

    Evaluation stops at the first predicate returning false.

    Raises:
        ValueError: If no predicates are given or any of them is None
    """
    _validate_predicates(predicates)
    return Predicate1(lambda t1: all(predicate(t1) for predicate in predicates))


def any_of(*predicates: Callable[[Any], bool]) -> Predicate1:
    """
    Combine predicates into one that holds when at least one predicate holds.

    Evaluation stops at the first predicate returning true.

    Raises:
        ValueError: If no predicates are given or any of them is None
    """
    _validate_predicates(predicates)
    return Predicate1(lambda t1: any(predicate(t1) for predicate in predicates))


def none_of(*predicates: Callable[[Any], bool]) -> Predicate1:
    """Combine predicates into one that holds when no predicate holds."""
    _validate_predicates(predicates)
    return any_of(*predicates).negate()


def is_none() -> Predicate1:
    return Predicate1(lambda t1: t1 is None)


def is_not_none() -> Predicate1:
    return Predicate1(lambda t1: t1 is not None)


def not_(predicate: Callable[[Any], bool]) -> Predicate1:
    require_non_null(predicate, "predicate")
    return Predicate1(lambda t1: not predicate(t1))


def instance_of(*types: type) -> Predicate1:
    """
    Build a predicate testing ``isinstance(value, types)``.

    Args:
        *types: One or more classes

    Raises:
        ValueError: If no type is given
        NullArgumentError: If any type is None
    """
    if not types:
        raise ValueError("no type supplied to match")
    for cls in types:
        require_non_null(cls, "types")
    return Predicate1(lambda t1: isinstance(t1, types))


def _identity(value: Any) -> Any:
    return value


def _comparison(value: Any, key: Optional[Callable[[Any], Any]],
                compare: Callable[[Any, Any], bool]) -> Predicate1:
    key = key or _identity
    target = key(value)
    return Predicate1(lambda t1: compare(key(t1), target))


def is_greater_than(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    """
    Build a predicate testing ``t1 > value``.

    Args:
        value: The bound to compare against
        key: Optional function applied to both sides before comparing

    Raises:
        NullArgumentError: If value is None
    """
    require_non_null(value, "value")
    return _comparison(value, key, lambda a, b: a > b)


def is_greater_than_or_equal_to(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    require_non_null(value, "value")
    return _comparison(value, key, lambda a, b: a >= b)


def is_less_than(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    require_non_null(value, "value")
    return _comparison(value, key, lambda a, b: a < b)


def is_less_than_or_equal_to(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    require_non_null(value, "value")
    return _comparison(value, key, lambda a, b: a <= b)


def is_equal_to(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    """
    Build a predicate testing ``t1 == value``.

    None is a legal target: ``is_equal_to(None)`` matches None only, and
    ``key`` is not applied in that case.
    """
    if value is None:
        return Predicate1(lambda t1: t1 is None)
    return _comparison(value, key, lambda a, b: a == b)


def is_not_equal_to(value: Any, key: Optional[Callable[[Any], Any]] = None) -> Predicate1:
    require_non_null(value, "value")
    return _comparison(value, key, lambda a, b: a != b)


def property_test_or_else(getter: Any, predicate: Callable[[Any], bool], default: bool) -> Predicate1:
    """
    Build a predicate testing a possibly missing property of its input.

    Args:
        getter: A SafeGetter, or a plain extractor wrapped with SafeGetter.of
        predicate: Test applied to the extracted property
        default (bool): Result when the input or the property is None

    Returns:
        Predicate1: ``predicate(property)`` when present, ``default`` otherwise

    Raises:
        NullArgumentError: If getter or predicate is None
    """
    from .safe_access import SafeGetter

    require_non_null(getter, "getter")
    require_non_null(predicate, "predicate")
    if not isinstance(getter, SafeGetter):
        getter = SafeGetter.of(getter)
    return Predicate1(lambda t1: getter.get(t1).map(lambda prop: bool(predicate(prop))).or_else(default))


def property_test_or_else_true(getter: Any, predicate: Callable[[Any], bool]) -> Predicate1:
    return property_test_or_else(getter, predicate, True)


def property_test_or_else_false(getter: Any, predicate: Callable[[Any], bool]) -> Predicate1:
    return property_test_or_else(getter, predicate, False)

