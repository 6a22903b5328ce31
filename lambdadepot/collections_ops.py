"""
Collection Operations Module

Curried helpers over lists, sets and dicts. Each transforming helper takes its
Function1/Predicate1 collaborator up front and returns a Function1 that
accepts the collection, so helpers compose with ``and_then``. Inputs are never
mutated; every transformation builds a new collection.
"""

from typing import Any, Callable, Dict, Iterable, List, Mapping, MutableMapping, Optional, Sequence

from .error_handling import require_non_null
from .functions import Function1
from .option import Option


# Lists

def list_map(mapper: Callable[[Any], Any]) -> Function1:
    """
    Build a function mapping every element of a list.

    Args:
        mapper: Function applied to each element

    Returns:
        Function1: ``list -> [mapper(e) for e in list]``

    Raises:
        NullArgumentError: If mapper is None (or, later, if the list is None)
    """
    require_non_null(mapper, "mapper")

    def apply(values: List[Any]) -> List[Any]:
        require_non_null(values, "list")
        return [mapper(value) for value in values]

    return Function1(apply)


def list_flat_map(mapper: Callable[[Any], Iterable[Any]]) -> Function1:
    require_non_null(mapper, "mapper")

    def apply(values: List[Any]) -> List[Any]:
        require_non_null(values, "list")
        return [mapped for value in values for mapped in mapper(value)]

    return Function1(apply)


def list_filter(predicate: Callable[[Any], bool]) -> Function1:
    require_non_null(predicate, "predicate")

    def apply(values: List[Any]) -> List[Any]:
        require_non_null(values, "list")
        return [value for value in values if predicate(value)]

    return Function1(apply)


def list_append(*elements: Any) -> Function1:
    """Build a function returning a copy of a list with ``elements`` added at the end."""

    def apply(values: List[Any]) -> List[Any]:
        require_non_null(values, "list")
        return [*values, *elements]

    return Function1(apply)


def list_prepend(*elements: Any) -> Function1:
    """Build a function returning a copy of a list with ``elements`` added at the front."""

    def apply(values: List[Any]) -> List[Any]:
        require_non_null(values, "list")
        return [*elements, *values]

    return Function1(apply)


def get_head(values: Optional[Sequence[Any]]) -> Option:
    """First element of a sequence; empty for None or an empty sequence."""
    return get_at(values, 0)


def get_tail(values: Optional[Sequence[Any]]) -> Option:
    """Last element of a sequence; empty for None or an empty sequence."""
    if not values:
        return Option.empty()
    return Option.of_nullable(values[-1])


def get_at(values: Optional[Sequence[Any]], index: int) -> Option:
    """Element at a non-negative ``index``; empty for None or a sequence too short."""
    if values is None or not 0 <= index < len(values):
        return Option.empty()
    return Option.of_nullable(values[index])


# Sets

def set_map(mapper: Callable[[Any], Any]) -> Function1:
    require_non_null(mapper, "mapper")

    def apply(values: Iterable[Any]) -> frozenset:
        require_non_null(values, "set")
        return frozenset(mapper(value) for value in values)

    return Function1(apply)


def set_flat_map(mapper: Callable[[Any], Iterable[Any]]) -> Function1:
    require_non_null(mapper, "mapper")

    def apply(values: Iterable[Any]) -> frozenset:
        require_non_null(values, "set")
        return frozenset(mapped for value in values for mapped in mapper(value))

    return Function1(apply)


def set_filter(predicate: Callable[[Any], bool]) -> Function1:
    require_non_null(predicate, "predicate")

    def apply(values: Iterable[Any]) -> frozenset:
        require_non_null(values, "set")
        return frozenset(value for value in values if predicate(value))

    return Function1(apply)


# Maps

def map_map_values(mapper: Callable[[Any], Any]) -> Function1:
    """Build a function returning a dict with ``mapper`` applied to every value."""
    require_non_null(mapper, "mapper")

    def apply(mapping: Mapping[Any, Any]) -> Dict[Any, Any]:
        require_non_null(mapping, "map")
        return {key: mapper(value) for key, value in mapping.items()}

    return Function1(apply)


def map_filter_keys(predicate: Callable[[Any], bool]) -> Function1:
    require_non_null(predicate, "predicate")

    def apply(mapping: Mapping[Any, Any]) -> Dict[Any, Any]:
        require_non_null(mapping, "map")
        return {key: value for key, value in mapping.items() if predicate(key)}

    return Function1(apply)


def map_filter_values(predicate: Callable[[Any], bool]) -> Function1:
    require_non_null(predicate, "predicate")

    def apply(mapping: Mapping[Any, Any]) -> Dict[Any, Any]:
        require_non_null(mapping, "map")
        return {key: value for key, value in mapping.items() if predicate(value)}

    return Function1(apply)


def map_get(mapping: Optional[Mapping[Any, Any]], key: Any) -> Option:
    """Value stored under ``key``; empty for a None mapping, a missing key or a None value."""
    if mapping is None:
        return Option.empty()
    return Option.of_nullable(mapping.get(key))


def map_get_or_put(key: Any, supplier: Callable[[], Any]) -> Function1:
    """
    Build a function returning the value under ``key``, storing ``supplier()``
    first when the key is absent.

    The mapping passed to the returned function is mutated only on a miss,
    and the supplier is called only then.

    Raises:
        NullArgumentError: If key or supplier is None
    """
    require_non_null(key, "key")
    require_non_null(supplier, "supplier")

    def apply(mapping: MutableMapping[Any, Any]) -> Any:
        require_non_null(mapping, "map")
        if key not in mapping:
            mapping[key] = supplier()
        return mapping[key]

    return Function1(apply)


def map_get_or_default(key: Any, supplier: Callable[[], Any]) -> Function1:
    """Build a function returning the value under ``key``, or ``supplier()`` without storing it."""
    require_non_null(key, "key")
    require_non_null(supplier, "supplier")

    def apply(mapping: Mapping[Any, Any]) -> Any:
        require_non_null(mapping, "map")
        if key in mapping:
            return mapping[key]
        return supplier()

    return Function1(apply)
