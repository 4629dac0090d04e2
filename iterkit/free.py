"""Free functions that accept any iterable and wrap common iterator operations."""

from __future__ import annotations

import builtins
import copy
import functools
import itertools
import warnings
from collections.abc import Callable, Iterable, Iterator
from typing import Any, TypeVar

from iterkit import intersperse as _intersperse

T = TypeVar("T")
U = TypeVar("U")
B = TypeVar("B")

_MISSING = object()


def intersperse(iterable: Iterable[T], element: T) -> Iterator[T]:
    """Yield the items of ``iterable`` with ``element`` between each pair."""
    return _intersperse.intersperse(iterable, element)


def intersperse_with(iterable: Iterable[T], element: Callable[[], T]) -> Iterator[T]:
    """Yield the items of ``iterable`` with ``element()`` between each pair."""
    return _intersperse.intersperse_with(iterable, element)


def enumerate(iterable: Iterable[T]) -> Iterator[tuple[int, T]]:
    """Yield ``(index, item)`` pairs starting at zero."""
    return builtins.enumerate(iterable)


def rev(iterable: Iterable[T]) -> Iterator[T]:
    """Iterate a reversible iterable from the end."""
    return builtins.reversed(iterable)


def zip(first: Iterable[T], second: Iterable[U]) -> Iterator[tuple[T, U]]:
    """Pair items of two iterables, stopping at the shorter one.

    Deprecated: use the built-in ``zip`` instead.
    """
    warnings.warn("use the built-in zip instead", DeprecationWarning, stacklevel=2)
    return builtins.zip(first, second)


def chain(first: Iterable[T], second: Iterable[T]) -> Iterator[T]:
    """Yield the items of ``first`` and then those of ``second``."""
    return itertools.chain(first, second)


def cloned(iterable: Iterable[T]) -> Iterator[T]:
    """Yield a shallow copy of each item."""
    return builtins.map(copy.copy, iterable)


def fold(iterable: Iterable[T], init: B, function: Callable[[B, T], B]) -> B:
    """Combine the items left to right, starting from ``init``."""
    return functools.reduce(function, iterable, init)


def all(iterable: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """Return True if ``predicate`` holds for every item."""
    return builtins.all(predicate(item) for item in iterable)


def any(iterable: Iterable[T], predicate: Callable[[T], Any]) -> bool:
    """Return True if ``predicate`` holds for some item."""
    return builtins.any(predicate(item) for item in iterable)


def max(iterable: Iterable[T]) -> T | None:
    """Return the largest item, the last one among equals, or None if empty."""
    result: Any = _MISSING
    for item in iterable:
        if result is _MISSING or not result > item:
            result = item
    return None if result is _MISSING else result


def min(iterable: Iterable[T]) -> T | None:
    """Return the smallest item, the first one among equals, or None if empty."""
    result: Any = _MISSING
    for item in iterable:
        if result is _MISSING or item < result:
            result = item
    return None if result is _MISSING else result


def join(iterable: Iterable[Any], sep: str) -> str:
    """Format each item with ``str`` and join them with ``sep``."""
    return sep.join(builtins.map(str, iterable))


def sorted(iterable: Iterable[T]) -> Iterator[T]:
    """Return an iterator over the items in ascending order."""
    return iter(builtins.sorted(iterable))