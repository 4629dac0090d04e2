"""Group key/value pairs by key and fold each group in a single pass."""

from __future__ import annotations

import copy
import operator
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
R = TypeVar("R")

Compare = Callable[[Any, Any, Any], int]


@dataclass(frozen=True)
class OneElement(Generic[V]):
    """A group with a single element, which is both its minimum and maximum."""

    value: V


@dataclass(frozen=True)
class MinMax(Generic[V]):
    """The minimum and the maximum of a group with at least two elements."""

    min: V
    max: V


MinMaxResult = Union[OneElement[V], MinMax[V]]


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


class GroupingMap(Generic[K, V]):
    """Consumes ``(key, value)`` pairs once, grouping and folding them by key.

    Every method consumes the underlying iterator and returns a ``dict``
    from each key to the result for its group.
    """

    def __init__(self, pairs: Iterable[tuple[K, V]]) -> None:
        self._pairs: Iterator[tuple[K, V]] = iter(pairs)

    def aggregate(self, operation: Callable[[R | None, K, V], R | None]) -> dict[K, R]:
        """Fold each group with ``operation(acc, key, value)``.

        ``acc`` is None for the first element of a group or after a discard.
        When ``operation`` returns None the accumulator is discarded, and a
        group whose last step discards has no entry in the result.
        """
        destination: dict[K, R] = {}
        for key, value in self._pairs:
            acc = destination.pop(key, None)
            result = operation(acc, key, value)
            if result is not None:
                destination[key] = result
        return destination

    def fold(self, init: R, operation: Callable[[R, K, V], R]) -> dict[K, R]:
        """Fold each group starting from a shallow copy of ``init``."""
        destination: dict[K, R] = {}
        for key, value in self._pairs:
            acc = destination[key] if key in destination else copy.copy(init)
            destination[key] = operation(acc, key, value)
        return destination

    def fold_first(self, operation: Callable[[V, K, V], V]) -> dict[K, V]:
        """Fold each group, using its first element as the initial accumulator."""
        destination: dict[K, V] = {}
        for key, value in self._pairs:
            if key in destination:
                destination[key] = operation(destination[key], key, value)
            else:
                destination[key] = value
        return destination

    def collect(self, factory: Callable[[list[V]], Any] = list) -> dict[K, Any]:
        """Build ``factory(values)`` for each group, values in iteration order."""
        groups: dict[K, list[V]] = {}
        for key, value in self._pairs:
            groups.setdefault(key, []).append(value)
        return {key: factory(values) for key, values in groups.items()}

    def max(self) -> dict[K, V]:
        """Maximum of each group; the last of equal maxima wins."""
        return self.max_by(lambda _key, a, b: _cmp(a, b))

    def max_by(self, compare: Compare) -> dict[K, V]:
        """Maximum of each group by ``compare(key, a, b)``; the last of equals wins."""
        return self.fold_first(lambda acc, key, val: acc if compare(key, acc, val) > 0 else val)

    def max_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the largest ``key(group_key, value)``."""
        return self.max_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def min(self) -> dict[K, V]:
        """Minimum of each group; the first of equal minima wins."""
        return self.min_by(lambda _key, a, b: _cmp(a, b))

    def min_by(self, compare: Compare) -> dict[K, V]:
        """Minimum of each group by ``compare(key, a, b)``; the first of equals wins."""
        return self.fold_first(lambda acc, key, val: acc if compare(key, acc, val) <= 0 else val)

    def min_by_key(self, key: Callable[[K, V], Any]) -> dict[K, V]:
        """Element of each group with the smallest ``key(group_key, value)``."""
        return self.min_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def minmax(self) -> dict[K, MinMaxResult]:
        """Minimum and maximum of each group."""
        return self.minmax_by(lambda _key, a, b: _cmp(a, b))

    def minmax_by(self, compare: Compare) -> dict[K, MinMaxResult]:
        """Minimum and maximum of each group by ``compare(key, a, b)``.

        The first of equal minima and the last of equal maxima are picked.
        """

        def step(acc: MinMaxResult | None, key: K, val: V) -> MinMaxResult:
            if acc is None:
                return OneElement(val)
            if isinstance(acc, OneElement):
                if compare(key, val, acc.value) < 0:
                    return MinMax(val, acc.value)
                return MinMax(acc.value, val)
            if compare(key, val, acc.min) < 0:
                return MinMax(val, acc.max)
            if compare(key, val, acc.max) >= 0:
                return MinMax(acc.min, val)
            return acc

        return self.aggregate(step)

    def minmax_by_key(self, key: Callable[[K, V], Any]) -> dict[K, MinMaxResult]:
        """Elements of each group with the smallest and largest ``key(group_key, value)``."""
        return self.minmax_by(lambda k, a, b: _cmp(key(k, a), key(k, b)))

    def sum(self) -> dict[K, V]:
        """Sum of each group, combined with ``+`` from its first element."""
        return self.fold_first(lambda acc, _key, val: operator.add(acc, val))

    def product(self) -> dict[K, V]:
        """Product of each group, combined with ``*`` from its first element."""
        return self.fold_first(lambda acc, _key, val: operator.mul(acc, val))


def grouping_map(pairs: Iterable[tuple[K, V]]) -> GroupingMap[K, V]:
    """Create a ``GroupingMap`` over ``(key, value)`` pairs."""
    return GroupingMap(pairs)


def grouping_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> GroupingMap[K, V]:
    """Create a ``GroupingMap`` keyed by ``key(value)`` for each value."""
    return GroupingMap((key(value), value) for value in iterable)