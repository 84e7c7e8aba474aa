"""Predicate inversion.

Standard library operations such as ``filter`` or ``itertools.takewhile`` have
no negated counterpart, which usually forces a ``lambda x: not pred(x)``
closure. The wrappers in this module replace that closure with an object that
forwards to the wrapped predicate and inverts only its boolean result.

A predicate can follow one of three calling disciplines, and each has its own
wrapper:
    - **Not**: pure and reusable. Duplicable whenever the wrapped predicate is.
    - **NotMut**: reusable, but each call may alter hidden state in the wrapped
      predicate (e.g. a set recording elements already seen). Duplication is
      refused because the copies would fork that state.
    - **NotOnce**: consuming. The wrapped predicate is called at most once and
      released afterwards.

Examples:
    >>> from funcmode.functional.iter_move import filter_by_move
    >>> list(filter_by_move(["hello", "", "world", ""], Not(lambda s: s == "")))
    ['hello', 'world']

    >>> seen = set()
    >>> def unique(x):
    ...     fresh = x not in seen
    ...     seen.add(x)
    ...     return fresh
    >>> next(filter(NotMut(unique), [1, 2, 3, 4, 2, 6]))
    2
"""

import copy
import typing as tp

from funcmode.core.types import ensure_callable
from funcmode.logger.logger import logger

__all__ = [
    "Not",
    "NotMut",
    "NotOnce",
    "PredicateConsumedError",
]

T = tp.TypeVar("T")


class PredicateConsumedError(RuntimeError):
    """Raised when a consuming inverted predicate is called a second time."""


class Not(tp.Generic[T]):
    """Invert a pure, reusable predicate.

    Calling ``Not(pred)(x)`` returns ``not pred(x)``. Any exception raised by
    ``pred`` propagates unchanged.

    Attributes:
        inner: The wrapped predicate.
    """

    __slots__ = ("inner",)

    def __init__(self, predicate: tp.Callable[[T], bool]) -> None:
        self.inner = ensure_callable(predicate, name="predicate")

    def __call__(self, value: T) -> bool:
        return not self.inner(value)

    def __copy__(self) -> "Not[T]":
        return type(self)(copy.copy(self.inner))

    def __deepcopy__(self, memo: dict) -> "Not[T]":
        return type(self)(copy.deepcopy(self.inner, memo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inner!r})"


class NotMut(Not[T]):
    """Invert a reusable predicate that mutates internal state when called.

    The wrapped predicate runs exactly once per call, so its side effect is
    preserved as-is.
    """

    __slots__ = ()

    def __copy__(self) -> "NotMut[T]":
        raise TypeError(
            f"{type(self).__name__} wraps a stateful predicate and cannot be duplicated."
        )

    def __deepcopy__(self, memo: dict) -> "NotMut[T]":
        return self.__copy__()


class NotOnce(Not[T]):
    """Invert a predicate that may be called only once.

    The first call forwards to the wrapped predicate and releases it, so any
    state it owns is dropped with it. ``inner`` is ``None`` afterwards.
    """

    __slots__ = ()

    def __call__(self, value: T) -> bool:
        predicate = self.inner
        if predicate is None:
            raise PredicateConsumedError(
                "NotOnce predicate has already been called."
            )
        self.inner = None
        logger.debug(f"Consuming one-shot predicate {predicate!r}")
        return not predicate(value)

    @property
    def consumed(self) -> bool:
        return self.inner is None

    def __copy__(self) -> "NotOnce[T]":
        raise TypeError(
            f"{type(self).__name__} wraps a consuming predicate and cannot be duplicated."
        )

    def __deepcopy__(self, memo: dict) -> "NotOnce[T]":
        return self.__copy__()
