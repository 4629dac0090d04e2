"""Insert a separator between the elements of an iterable."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

_MISSING = object()


class IntersperseWith(Generic[T]):
    """Iterator that yields the items of an iterable with a generated value between them.

    The separator is produced by calling ``element`` with no arguments, once for
    each gap. The iterator is fused: once exhausted it stays exhausted.
    """

    def __init__(self, iterable: Iterable[T], element: Callable[[], T]) -> None:
        self._iter = iter(iterable)
        self._element = element
        self._done = False
        self._peek = self._pull()

    def _pull(self):
        if self._done:
            return _MISSING
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _MISSING

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._peek is not _MISSING:
            item, self._peek = self._peek, _MISSING
            return item
        self._peek = self._pull()
        if self._peek is _MISSING:
            raise StopIteration
        return self._element()


def intersperse(iterable: Iterable[T], element: T) -> IntersperseWith[T]:
    """Yield the items of ``iterable`` with ``element`` between each pair."""
    return IntersperseWith(iterable, lambda: element)


def intersperse_with(iterable: Iterable[T], element: Callable[[], T]) -> IntersperseWith[T]:
    """Yield the items of ``iterable`` with ``element()`` called for each gap."""
    return IntersperseWith(iterable, element)