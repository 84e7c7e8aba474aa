"""Lazy mapping adapters whose function borrows each element.

The mapping function is applied to the element (or to the element's indirection
target) without taking it over: the adapter drops the element right after the
call and never keeps a reference to it. This is convenient for mapping unbound
methods such as ``Counter.total`` or ``list.pop`` over a sequence of objects.

Borrow modes:
    - **map_by_ref**: ``func(element)``, the element is only read.
    - **map_by_mut_ref**: ``func(element)``, the element may be mutated in place.
    - **map_by_indirect_ref**: ``func(deref(element))``.
    - **map_by_indirect_mut_ref**: ``func(deref_mut(element))``.

Every adapter pulls exactly one source element per produced value and calls
``func`` exactly once for it.

Example:
    >>> from funcmode.core.indirection import Slot
    >>> list(map_by_indirect_ref([Slot("ab"), Slot("cde")], len))
    [2, 3]
"""

import operator
import typing as tp

from funcmode.core.indirection import deref, deref_mut
from funcmode.core.types import ensure_callable

__all__ = [
    "MapRef",
    "MapMutRef",
    "MapIndirectRef",
    "MapIndirectMutRef",
    "map_by_ref",
    "map_by_mut_ref",
    "map_by_indirect_ref",
    "map_by_indirect_mut_ref",
]

T = tp.TypeVar("T")
B = tp.TypeVar("B")


class _BorrowMap(tp.Iterator[B]):
    """Shared machinery: pull one element, borrow it, map it, drop it."""

    __slots__ = ("_source", "_func")

    def __init__(self, iterable: tp.Iterable[tp.Any], func: tp.Callable[..., B]) -> None:
        self._func = ensure_callable(func, name="func")
        self._source = iter(iterable)

    def __iter__(self) -> "_BorrowMap[B]":
        return self

    def __next__(self) -> B:
        return self._func(self._borrow(next(self._source)))

    def __length_hint__(self) -> int:
        return operator.length_hint(self._source)

    def _borrow(self, item: tp.Any) -> tp.Any:
        return item

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._source!r}, {self._func!r})"


class MapRef(_BorrowMap[B]):
    """An iterator mapping the source with ``func`` taken by reference.

    Created by :func:`map_by_ref`.
    """

    __slots__ = ()


class MapMutRef(_BorrowMap[B]):
    """An iterator mapping the source with ``func`` taken by mutable reference.

    Created by :func:`map_by_mut_ref`.
    """

    __slots__ = ()


class MapIndirectRef(_BorrowMap[B]):
    """An iterator mapping the source's indirection targets with ``func``.

    Created by :func:`map_by_indirect_ref`.
    """

    __slots__ = ()

    def _borrow(self, item: tp.Any) -> tp.Any:
        return deref(item)


class MapIndirectMutRef(_BorrowMap[B]):
    """An iterator mapping the source's mutable indirection targets with ``func``.

    Created by :func:`map_by_indirect_mut_ref`.
    """

    __slots__ = ()

    def _borrow(self, item: tp.Any) -> tp.Any:
        return deref_mut(item)


def map_by_ref(iterable: tp.Iterable[T], func: tp.Callable[[T], B]) -> MapRef[B]:
    """Map with a function that reads its argument without consuming it.

    Useful for mapping unary read-only methods over a sequence of values.
    """
    return MapRef(iterable, func)


def map_by_mut_ref(iterable: tp.Iterable[T], func: tp.Callable[[T], B]) -> MapMutRef[B]:
    """Map with a function that may mutate its argument in place.

    Useful for mapping unary mutating methods over a sequence of values. The
    element is dropped after the call, so the mutation is only observable
    through the returned value or through references the caller already holds.
    """
    return MapMutRef(iterable, func)


def map_by_indirect_ref(
    iterable: tp.Iterable[tp.Any], func: tp.Callable[[tp.Any], B]
) -> MapIndirectRef[B]:
    """Map with a function applied to each element's indirection target.

    Elements must implement ``deref()`` or be weak references; an element that
    does not raises ``TypeError`` when it is reached.
    """
    return MapIndirectRef(iterable, func)


def map_by_indirect_mut_ref(
    iterable: tp.Iterable[tp.Any], func: tp.Callable[[tp.Any], B]
) -> MapIndirectMutRef[B]:
    """Map with a function that may mutate each element's indirection target."""
    return MapIndirectMutRef(iterable, func)
