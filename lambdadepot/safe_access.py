"""
Safe Access Module

Null-safe chained property navigation. A SafeGetter is a chain of extraction
steps that stops at the first None link and reports the outcome as an Option;
a SafeSetter writes a value into the target the chain reaches, if any.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Union

from .error_handling import require_non_null
from .option import Option

logger = logging.getLogger(__name__)


class SafeGetter:
    """
    Chain of null-safe extraction steps.

    Example:
        >>> getter = SafeGetter.of(attr("address")).then(attr("city"))
        >>> getter.get(None).is_empty()
        True
    """

    __slots__ = ("_getter",)

    def __init__(self, getter: Callable[[Any], Option]):
        self._getter = getter

    @classmethod
    def of(cls, getter: Callable[[Any], Any]) -> "SafeGetter":
        """
        Start a chain with one extraction step.

        Args:
            getter: Extractor applied to a non-None input; a None return ends the chain

        Raises:
            NullArgumentError: If getter is None
        """
        require_non_null(getter, "getter")
        return cls(lambda i: Option.of_nullable(i).map(getter))

    def when(self, filter: Callable[[Any], bool]) -> "SafeGetter":
        """Keep the chain's value only if ``filter`` holds for it."""
        require_non_null(filter, "filter")
        getter = self._getter
        return SafeGetter(lambda i: getter(i).filter(filter))

    def then(self, next_getter: Union["SafeGetter", Callable[[Any], Any]]) -> "SafeGetter":
        """
        Append a step: a plain extractor, or another SafeGetter whose chain
        continues from this one's value.

        Raises:
            NullArgumentError: If next_getter is None
        """
        require_non_null(next_getter, "next_getter")
        getter = self._getter
        if isinstance(next_getter, SafeGetter):
            return SafeGetter(lambda i: getter(i).flat_map(next_getter.get))
        return SafeGetter(lambda i: getter(i).map(next_getter))

    def set_with(self, setter: Callable[[Any, Any], Any]) -> "SafeSetter":
        """Build a SafeSetter writing through ``setter(target, value)``."""
        require_non_null(setter, "setter")
        return SafeSetter(self, setter)

    def get(self, i: Any) -> Option:
        """Run the chain on a possibly-None input."""
        return self._getter(i)

    def __call__(self, i: Any) -> Option:
        return self.get(i)


class SafeSetter:
    __slots__ = ("_getter", "_setter")

    def __init__(self, getter: SafeGetter, setter: Callable[[Any, Any], Any]):
        self._getter = getter
        self._setter = setter

    def set(self, i: Any, v: Any) -> bool:
        """
        Write ``v`` into the target the getter chain reaches from ``i``.

        Returns:
            bool: True if the chain reached a target and the setter ran
        """
        target = self._getter.get(i)
        target.if_present(lambda o: self._setter(o, v))
        if target.is_empty():
            logger.debug("SafeSetter skipped: no target reachable from %r", type(i).__name__)
        return target.is_present()


def attr(name: str) -> Callable[[Any], Any]:
    """Extractor reading attribute ``name``; a missing attribute yields None."""
    require_non_null(name, "name")
    return lambda o: getattr(o, name, None)


def item(key: Any) -> Callable[[Any], Any]:
    """
    Extractor reading ``key`` from a mapping or an index from a sequence.

    A missing key or out-of-range index yields None.
    """
    require_non_null(key, "key")

    def extract(o: Any) -> Any:
        if isinstance(o, Mapping):
            return o.get(key)
        if isinstance(o, Sequence) and isinstance(key, int) and -len(o) <= key < len(o):
            return o[key]
        return None

    return extract


def set_attr(name: str) -> Callable[[Any, Any], None]:
    """Setter assigning attribute ``name`` on the target."""
    require_non_null(name, "name")
    return lambda o, v: setattr(o, name, v)


def set_item(key: Any) -> Callable[[Any, Any], None]:
    """Setter assigning ``target[key] = value``."""
    require_non_null(key, "key")

    def assign(o: Any, v: Any) -> None:
        o[key] = v

    return assign
