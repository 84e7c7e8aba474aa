"""Glue for calling arbitrary functions as methods of a receiver.

Each helper passes the receiver to a unary function in one of five ways:
    - **dot**: by value. The receiver is handed over and should not be used
      afterwards.
    - **dot_ref**: by reference. The receiver is only read.
    - **dot_refmut**: by mutable reference. The function may mutate it.
    - **dot_deref**: the receiver's indirection target, read only.
    - **dot_derefmut**: the receiver's indirection target, mutable.

:func:`call_with` selects the mode at runtime from a :class:`PassMode`, and the
:class:`Dottable` mixin attaches the helpers as methods to a class.

Examples:
    >>> dot("hello", len)
    5
    >>> queue = [4, 5, 6]
    >>> dot_refmut(queue, lambda q: q.pop(0)), dot_refmut(queue, lambda q: q.pop(0))
    (4, 5)
"""

import typing as tp

from funcmode.core.enums import PassMode
from funcmode.core.indirection import deref, deref_mut

__all__ = [
    "dot",
    "dot_ref",
    "dot_refmut",
    "dot_deref",
    "dot_derefmut",
    "call_with",
    "Dottable",
]

T = tp.TypeVar("T")
B = tp.TypeVar("B")


def dot(receiver: T, func: tp.Callable[[T], B]) -> B:
    """Call ``func`` as a by-value method of ``receiver``."""
    return func(receiver)


def dot_ref(receiver: T, func: tp.Callable[[T], B]) -> B:
    """Call ``func`` as a read-only method of ``receiver``."""
    return func(receiver)


def dot_refmut(receiver: T, func: tp.Callable[[T], B]) -> B:
    """Call ``func`` as a mutating method of ``receiver``."""
    return func(receiver)


def dot_deref(receiver: tp.Any, func: tp.Callable[[tp.Any], B]) -> B:
    """Call ``func`` as a read-only method of the receiver's indirection target."""
    return func(deref(receiver))


def dot_derefmut(receiver: tp.Any, func: tp.Callable[[tp.Any], B]) -> B:
    """Call ``func`` as a mutating method of the receiver's indirection target."""
    return func(deref_mut(receiver))


_DISPATCH: tp.Dict[PassMode, tp.Callable[[tp.Any, tp.Callable[[tp.Any], tp.Any]], tp.Any]] = {
    PassMode.VALUE: dot,
    PassMode.REF: dot_ref,
    PassMode.MUT_REF: dot_refmut,
    PassMode.INDIRECT_REF: dot_deref,
    PassMode.INDIRECT_MUT_REF: dot_derefmut,
}


def call_with(
    receiver: tp.Any,
    func: tp.Callable[[tp.Any], B],
    mode: tp.Union[PassMode, str] = PassMode.VALUE,
) -> B:
    """Call ``func`` on ``receiver`` using the given passing mode.

    Args:
        receiver: The value the call is made on.
        func: Unary function.
        mode: A :class:`PassMode` or its string value (e.g. ``"indirect_ref"``).

    Returns:
        Whatever ``func`` returns.

    Raises:
        ValueError: If ``mode`` is not a known passing mode.
    """
    return _DISPATCH[PassMode(mode)](receiver, func)


class Dottable:
    """Mixin giving a class the receiver-call helpers as methods.

    Example:
        >>> class Name(str, Dottable):
        ...     pass
        >>> Name("hello").dot(str.upper)
        'HELLO'
    """

    __slots__ = ()

    def dot(self, func: tp.Callable[[tp.Any], B]) -> B:
        return dot(self, func)

    def dot_ref(self, func: tp.Callable[[tp.Any], B]) -> B:
        return dot_ref(self, func)

    def dot_refmut(self, func: tp.Callable[[tp.Any], B]) -> B:
        return dot_refmut(self, func)

    def dot_deref(self, func: tp.Callable[[tp.Any], B]) -> B:
        return dot_deref(self, func)

    def dot_derefmut(self, func: tp.Callable[[tp.Any], B]) -> B:
        return dot_derefmut(self, func)
