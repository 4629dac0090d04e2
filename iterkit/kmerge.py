"""Merge any number of iterables into one ordered stream."""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")

LessThan = Callable[[Any, Any], bool]


class _HeadTail:
    """The next item of a source together with the rest of it."""

    __slots__ = ("head", "tail")

    def __init__(self, head, tail: Iterator) -> None:
        self.head = head
        self.tail = tail


def _sift_down(heap: list[_HeadTail], index: int, less_than: LessThan) -> None:
    pos = index
    child = 2 * pos + 1
    size = len(heap)
    while child + 1 < size:
        if less_than(heap[child + 1].head, heap[child].head):
            child += 1
        if not less_than(heap[child].head, heap[pos].head):
            return
        heap[pos], heap[child] = heap[child], heap[pos]
        pos = child
        child = 2 * pos + 1
    if child + 1 == size and less_than(heap[child].head, heap[pos].head):
        heap[pos], heap[child] = heap[child], heap[pos]


class KMergeBy(Generic[T]):
    """Iterator merging several iterables by a strict ``less_than`` predicate.

    If every source is sorted with respect to the predicate, so is the result.
    """

    def __init__(self, iterables: Iterable[Iterable[T]], less_than: LessThan) -> None:
        self._less_than = less_than
        self._heap: list[_HeadTail] = []
        for iterable in iterables:
            tail = iter(iterable)
            for head in tail:
                self._heap.append(_HeadTail(head, tail))
                break
        for index in reversed(range(len(self._heap) // 2)):
            _sift_down(self._heap, index, less_than)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if not self._heap:
            raise StopIteration
        top = self._heap[0]
        result = top.head
        try:
            top.head = next(top.tail)
        except StopIteration:
            last = self._heap.pop()
            if self._heap:
                self._heap[0] = last
        _sift_down(self._heap, 0, self._less_than)
        return result


def kmerge(iterables: Iterable[Iterable[T]]) -> KMergeBy[T]:
    """Merge the iterables in ascending order using ``<``."""
    return KMergeBy(iterables, operator.lt)


def kmerge_by(iterables: Iterable[Iterable[T]], less_than: LessThan) -> KMergeBy[T]:
    """Merge the iterables using ``less_than(a, b)`` as the ordering."""
    return KMergeBy(iterables, less_than)