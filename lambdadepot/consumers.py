"""
Consumers Module

Fixed-arity consumer wrappers (arity 0 to 4): side-effecting callables whose
return value is discarded, supporting partial application, argument reversal
and sequencing.
"""

from typing import Any, Callable, Tuple

from .arity import ArityWrapper
from .error_handling import require_non_null


class _ConsumerN(ArityWrapper):
    __slots__ = ()

    _argument_name = "consumer"

    def _invoke(self, *args: Any) -> None:
        self.accept(*args)

    def _member(self, arity: int):
        return CONSUMERS[arity]

    def and_then(self, after: Callable[..., Any]) -> "_ConsumerN":
        """
        Sequence ``after`` behind this consumer.

        The returned consumer passes the same arguments to this consumer and
        then to ``after``. If this consumer raises, ``after`` is not invoked.

        Raises:
            NullArgumentError: If after is None
        """
        require_non_null(after, "after")
        accept = self.accept

        def sequenced(*args: Any) -> None:
            accept(*args)
            after(*args)

        return self._member(self.arity)(sequenced)


class Consumer0(_ConsumerN):
    __slots__ = ()

    arity = 0

    def accept(self) -> None:
        self._fn()

    def run(self) -> None:
        """Runnable alias of ``accept``."""
        self.accept()


class Consumer1(_ConsumerN):
    __slots__ = ()

    arity = 1

    def accept(self, t1: Any) -> None:
        self._fn(t1)


class Consumer2(_ConsumerN):
    __slots__ = ()

    arity = 2

    def accept(self, t1: Any, t2: Any) -> None:
        self._fn(t1, t2)

    def reverse(self) -> "Consumer2":
        return self._reversed()


class Consumer3(_ConsumerN):
    __slots__ = ()

    arity = 3

    def accept(self, t1: Any, t2: Any, t3: Any) -> None:
        self._fn(t1, t2, t3)

    def reverse(self) -> "Consumer3":
        return self._reversed()


class Consumer4(_ConsumerN):
    __slots__ = ()

    arity = 4

    def accept(self, t1: Any, t2: Any, t3: Any, t4: Any) -> None:
        self._fn(t1, t2, t3, t4)

    def reverse(self) -> "Consumer4":
        return self._reversed()


CONSUMERS: Tuple[type, ...] = (Consumer0, Consumer1, Consumer2, Consumer3, Consumer4)


def as_consumer0(runnable: Callable[[], Any]) -> Consumer0:
    return Consumer0(runnable)


def as_consumer1(consumer: Callable[[Any], Any]) -> Consumer1:
    return Consumer1(consumer)


def as_consumer2(consumer: Callable[[Any, Any], Any]) -> Consumer2:
    return Consumer2(consumer)


def as_consumer3(consumer: Callable[[Any, Any, Any], Any]) -> Consumer3:
    return Consumer3(consumer)


def as_consumer4(consumer: Callable[[Any, Any, Any, Any], Any]) -> Consumer4:
    return Consumer4(consumer)
