"""Fluent wrapper chaining the move-tested and reference-mapped adapters.

:class:`Stream` lets the adapters of :mod:`funcmode.functional.iter_move` and
:mod:`funcmode.functional.iter_ref` be written as a left-to-right chain of
method calls instead of nested function calls.

Example:
    >>> Stream([-1, -2, 3, -4, 5, -6]).filter_by_move(lambda x: x < 0).map_by_ref(abs).to_list()
    [1, 2, 4, 6]
"""

import typing as tp

from funcmode.functional import iter_move, iter_ref

__all__ = ["Stream"]

T = tp.TypeVar("T")
B = tp.TypeVar("B")


class Stream(tp.Generic[T]):
    """Chainable view over an iterable.

    Lazy methods return a new ``Stream``; terminal methods consume it. The
    wrapped source is pulled only as far as the terminal operation needs.
    """

    __slots__ = ("_source",)

    def __init__(self, iterable: tp.Iterable[T]) -> None:
        self._source = iterable

    def __iter__(self) -> tp.Iterator[T]:
        return iter(self._source)

    # --- Lazy adapters ---
    def filter_by_move(
        self,
        predicate: tp.Callable[[T], bool],
        duplicate: tp.Optional[tp.Callable[[T], T]] = None,
    ) -> "Stream[T]":
        return Stream(iter_move.filter_by_move(self._source, predicate, duplicate))

    def map_by_ref(self, func: tp.Callable[[T], B]) -> "Stream[B]":
        return Stream(iter_ref.map_by_ref(self._source, func))

    def map_by_mut_ref(self, func: tp.Callable[[T], B]) -> "Stream[B]":
        return Stream(iter_ref.map_by_mut_ref(self._source, func))

    def map_by_indirect_ref(self, func: tp.Callable[[tp.Any], B]) -> "Stream[B]":
        return Stream(iter_ref.map_by_indirect_ref(self._source, func))

    def map_by_indirect_mut_ref(self, func: tp.Callable[[tp.Any], B]) -> "Stream[B]":
        return Stream(iter_ref.map_by_indirect_mut_ref(self._source, func))

    # --- Terminal operations ---
    def find_by_move(
        self,
        predicate: tp.Callable[[T], bool],
        duplicate: tp.Optional[tp.Callable[[T], T]] = None,
    ) -> tp.Optional[T]:
        return iter_move.find_by_move(self._source, predicate, duplicate)

    def any_by_move(self, predicate: tp.Callable[[T], bool]) -> bool:
        return iter_move.any_by_move(self._source, predicate)

    def all_by_move(self, predicate: tp.Callable[[T], bool]) -> bool:
        return iter_move.all_by_move(self._source, predicate)

    def position_by_move(self, predicate: tp.Callable[[T], bool]) -> tp.Optional[int]:
        return iter_move.position_by_move(self._source, predicate)

    def reverse_position_by_move(self, predicate: tp.Callable[[T], bool]) -> tp.Optional[int]:
        """Only available while the stream still wraps a sized, reversible source."""
        return iter_move.reverse_position_by_move(self._source, predicate)

    def to_list(self) -> tp.List[T]:
        return list(self._source)

    def __repr__(self) -> str:
        return f"Stream({self._source!r})"
