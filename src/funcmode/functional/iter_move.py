"""Sequence adapters whose test function takes ownership of each element.

A consuming test function is free to mutate or keep whatever it receives. When
the element must survive the test (because it is yielded or returned), the
adapter hands the function a duplicate instead of the element itself. When the
element is not needed afterwards, the function receives it directly.

Operations:
    - **filter_by_move**: Lazily yield elements whose duplicate passes the test.
    - **find_by_move**: Return the first element whose duplicate passes the test.
    - **any_by_move** / **all_by_move**: Short-circuiting existential and
      universal tests, without duplication.
    - **position_by_move**: Index of the first element passing the test.
    - **reverse_position_by_move**: Index of the last element passing the test,
      found by scanning a sized, reversible sequence backwards.

Duplication uses the ``duplicate`` argument when given and otherwise the copy
function selected by ``settings.DUPLICATE_MODE`` (``copy.deepcopy`` by default).

Examples:
    >>> values = [-1, -2, 3, -4, 5, -6]
    >>> list(filter_by_move(values, lambda x: x < 0))
    [-1, -2, -4, -6]
    >>> find_by_move(values, lambda x: x > 0)
    3
    >>> position_by_move(values, lambda x: x > 0), reverse_position_by_move(values, lambda x: x > 0)
    (2, 4)
"""

import typing as tp

from funcmode.core.config import settings
from funcmode.core.types import ensure_callable
from funcmode.logger.logger import logger

__all__ = [
    "FilterMove",
    "filter_by_move",
    "find_by_move",
    "any_by_move",
    "all_by_move",
    "position_by_move",
    "reverse_position_by_move",
]

T = tp.TypeVar("T")


def _resolve_duplicator(
    duplicate: tp.Optional[tp.Callable[[T], T]],
) -> tp.Callable[[T], T]:
    if duplicate is None:
        return settings.DUPLICATE_MODE.duplicator()
    return ensure_callable(duplicate, name="duplicate")


class FilterMove(tp.Iterator[T]):
    """An iterator yielding the source elements whose duplicate passes ``predicate``.

    This class is created by :func:`filter_by_move`. It pulls from the source
    one element at a time and is exhausted once the source is, so it cannot be
    restarted after partial consumption.
    """

    __slots__ = ("_source", "_predicate", "_duplicate")

    def __init__(
        self,
        iterable: tp.Iterable[T],
        predicate: tp.Callable[[T], bool],
        duplicate: tp.Optional[tp.Callable[[T], T]] = None,
    ) -> None:
        self._predicate = ensure_callable(predicate, name="predicate")
        self._duplicate = _resolve_duplicator(duplicate)
        self._source = iter(iterable)

    def __iter__(self) -> "FilterMove[T]":
        return self

    def __next__(self) -> T:
        for item in self._source:
            if self._predicate(self._duplicate(item)):
                return item
        raise StopIteration

    def __repr__(self) -> str:
        return f"FilterMove({self._source!r}, {self._predicate!r})"


def filter_by_move(
    iterable: tp.Iterable[T],
    predicate: tp.Callable[[T], bool],
    duplicate: tp.Optional[tp.Callable[[T], T]] = None,
) -> FilterMove[T]:
    """Filter with a consuming predicate.

    Args:
        iterable: Source elements, finite or infinite.
        predicate: Test function receiving a duplicate of each element.
        duplicate: Copy function. Defaults to the configured duplication mode.

    Returns:
        A lazy iterator over the elements that passed, in source order.
    """
    return FilterMove(iterable, predicate, duplicate)


def find_by_move(
    iterable: tp.Iterable[T],
    predicate: tp.Callable[[T], bool],
    duplicate: tp.Optional[tp.Callable[[T], T]] = None,
) -> tp.Optional[T]:
    """Search for an element with a consuming predicate.

    Each element is duplicated before testing; the original is returned on a
    match. Elements after the match are left unconsumed when ``iterable`` is an
    iterator.

    Args:
        iterable: Source elements.
        predicate: Test function receiving a duplicate of each element.
        duplicate: Copy function. Defaults to the configured duplication mode.

    Returns:
        The first matching element, or None if no element matches.
    """
    predicate = ensure_callable(predicate, name="predicate")
    duplicate = _resolve_duplicator(duplicate)
    for item in iterable:
        if predicate(duplicate(item)):
            return item
    return None


def any_by_move(iterable: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """Test if any element matches a consuming predicate.

    Returns:
        True on the first match, False if the source is exhausted.
    """
    predicate = ensure_callable(predicate, name="predicate")
    for item in iterable:
        if predicate(item):
            return True
    return False


def all_by_move(iterable: tp.Iterable[T], predicate: tp.Callable[[T], bool]) -> bool:
    """Test if every element matches a consuming predicate.

    Returns:
        False on the first element that does not match, True if the source is
        exhausted.
    """
    predicate = ensure_callable(predicate, name="predicate")
    for item in iterable:
        if not predicate(item):
            return False
    return True


def position_by_move(
    iterable: tp.Iterable[T], predicate: tp.Callable[[T], bool]
) -> tp.Optional[int]:
    """Search for an element with a consuming predicate, returning its index.

    Returns:
        The zero-based index of the first match, or None.
    """
    predicate = ensure_callable(predicate, name="predicate")
    for index, item in enumerate(iterable):
        if predicate(item):
            return index
    return None


def reverse_position_by_move(
    sequence: tp.Sequence[T], predicate: tp.Callable[[T], bool]
) -> tp.Optional[int]:
    """Search backwards for an element with a consuming predicate.

    Args:
        sequence: Source supporting ``len()`` and ``reversed()``.
        predicate: Test function receiving each element directly.

    Returns:
        The index, counted from the front, of the last element that matches,
        or None.

    Raises:
        TypeError: If ``sequence`` has no known length or cannot be traversed
            backwards. Raised before the predicate is called.
    """
    predicate = ensure_callable(predicate, name="predicate")
    try:
        length = len(sequence)
        backward = reversed(sequence)
    except TypeError as err:
        raise TypeError(
            "reverse_position_by_move requires a sized, reversible sequence, "
            f"got {type(sequence).__name__!r}."
        ) from err

    logger.debug(f"Scanning {length} elements backwards")
    for offset, item in enumerate(backward):
        if predicate(item):
            return length - 1 - offset
    return None
