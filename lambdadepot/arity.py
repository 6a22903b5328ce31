"""
Arity Module

Shared machinery for the fixed-arity Function, Predicate and Consumer
families. Each family member wraps one plain callable; the combinators never
mutate a wrapper, they build a new one closing over the original.
"""

import functools
from typing import Any, Callable, Type

from .error_handling import require_non_null


class ArityWrapper:
    """
    Base class for a callable of fixed arity.

    Subclasses set ``arity``, implement ``_invoke`` (the family's apply/test/accept)
    and ``_member`` (lookup of the family member of a given arity).
    """

    __slots__ = ("_fn",)

    arity = 0
    _argument_name = "fn"

    def __init__(self, fn: Callable[..., Any]):
        require_non_null(fn, self._argument_name)
        if not callable(fn):
            raise TypeError(f"{type(self).__name__} requires a callable, got {type(fn).__name__}")
        object.__setattr__(self, "_fn", fn)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __copy__(self) -> "ArityWrapper":
        return self

    def __deepcopy__(self, memo: dict) -> "ArityWrapper":
        return self

    @classmethod
    def of(cls, reference: Callable[..., Any]) -> "ArityWrapper":
        """
        Adapt a reference to this family member.

        Args:
            reference: A wrapper of this class or a plain callable

        Returns:
            The reference itself if it already is an instance of this class,
            otherwise a new wrapper around it

        Raises:
            NullArgumentError: If reference is None
        """
        require_non_null(reference, "reference")
        if isinstance(reference, cls):
            return reference
        return cls(reference)

    def _invoke(self, *args: Any) -> Any:
        raise NotImplementedError

    def _member(self, arity: int) -> Type["ArityWrapper"]:
        raise NotImplementedError

    def __call__(self, *args: Any) -> Any:
        return self._invoke(*args)

    def partial_apply(self, *args: Any) -> "ArityWrapper":
        """
        Bind the leading arguments.

        Args:
            *args: Between one and ``arity`` leading arguments

        Returns:
            The family member of arity ``arity - len(args)`` awaiting the
            remaining arguments

        Raises:
            TypeError: If the number of arguments is out of range
        """
        bound = len(args)
        if not 1 <= bound <= self.arity:
            raise TypeError(
                f"{type(self).__name__}.partial_apply takes 1 to {self.arity} arguments ({bound} given)"
            )
        return self._member(self.arity - bound)(functools.partial(self._invoke, *args))

    def _reversed(self) -> "ArityWrapper":
        invoke = self._invoke
        return self._member(self.arity)(lambda *args: invoke(*reversed(args)))

    @property
    def name(self) -> str:
        """Qualified name of the wrapped callable, for logs and reprs."""
        fn = self._fn
        if isinstance(fn, functools.partial):
            fn = fn.func
        return getattr(fn, "__qualname__", None) or repr(fn)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name})"
