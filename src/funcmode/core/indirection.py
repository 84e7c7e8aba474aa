"""One level of indirection: wrappers that point to another value.

The indirect adapters and receiver calls operate on a wrapper's target rather
than on the wrapper itself. A value qualifies when it implements the
:class:`~funcmode.core.types.Deref` protocol (``deref()``), the
:class:`~funcmode.core.types.DerefMut` protocol (``deref_mut()``), or is a
``weakref.ref``.

:class:`Slot` is the package's own wrapper. It holds a single value that can be
read, replaced and handed out through both protocols, which also makes it the
"variable" that :func:`funcmode.functional.binding.bind_variable` re-reads on
every call.

Example:
    >>> box = Slot([3, 1, 2])
    >>> deref(box)
    [3, 1, 2]
    >>> deref_mut(box).sort()
    >>> box.get()
    [1, 2, 3]
"""

import typing as tp
import weakref

from funcmode.core.types import Deref, DerefMut

__all__ = [
    "Slot",
    "deref",
    "deref_mut",
    "supports_deref",
]

T = tp.TypeVar("T")


class Slot(tp.Generic[T]):
    """Mutable single-value holder exposing its value as an indirection target.

    Attributes:
        value: The held value. Reading or assigning it directly is equivalent
            to :meth:`get` and :meth:`set`.
    """

    __slots__ = ("value",)

    def __init__(self, value: T) -> None:
        self.value = value

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def replace(self, value: T) -> T:
        """Store ``value`` and return the previously held one."""
        previous, self.value = self.value, value
        return previous

    def deref(self) -> T:
        return self.value

    def deref_mut(self) -> T:
        return self.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slot):
            return self.value == other.value
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Slot({self.value!r})"


def _follow_weakref(ref: weakref.ReferenceType) -> tp.Any:
    target = ref()
    if target is None:
        raise ReferenceError("weakly-referenced object no longer exists")
    return target


def supports_deref(value: tp.Any) -> bool:
    """Check whether ``value`` exposes an indirection target."""
    return isinstance(value, (Deref, DerefMut, weakref.ReferenceType))


def deref(value: tp.Any) -> tp.Any:
    """Follow one level of indirection for reading.

    Falls back to ``deref_mut()`` for holders that only expose a mutable
    target, so every value accepted by :func:`supports_deref` can be read.

    Args:
        value: A :class:`Deref` or :class:`DerefMut` implementation, or a
            ``weakref.ref``.

    Returns:
        The wrapper's target.

    Raises:
        TypeError: If ``value`` has no indirection target.
        ReferenceError: If ``value`` is a dead weak reference.
    """
    if isinstance(value, Deref):
        return value.deref()
    if isinstance(value, DerefMut):
        return value.deref_mut()
    if isinstance(value, weakref.ReferenceType):
        return _follow_weakref(value)
    raise TypeError(f"{type(value).__name__!r} object does not support deref().")


def deref_mut(value: tp.Any) -> tp.Any:
    """Follow one level of indirection for mutation.

    Prefers ``deref_mut()`` and falls back to ``deref()``: a Python target is
    the same object either way, the distinction only records intent.

    Raises:
        TypeError: If ``value`` has no indirection target.
        ReferenceError: If ``value`` is a dead weak reference.
    """
    if isinstance(value, DerefMut):
        return value.deref_mut()
    return deref(value)
