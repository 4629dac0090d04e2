"""A buffer that pulls items from an iterator on demand."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import islice
from typing import Generic, TypeVar

T = TypeVar("T")


class LazyBuffer(Generic[T]):
    """Remember the items taken so far from an iterator and give indexed access to them.

    The underlying iterator is fused: once it is exhausted it is never polled again.
    """

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter = iter(iterable)
        self._buffer: list[T] = []
        self._exhausted = False

    def __len__(self) -> int:
        return len(self._buffer)

    def __getitem__(self, index):
        return self._buffer[index]

    def get_next(self) -> bool:
        """Buffer one more item; return False if the source is exhausted."""
        if self._exhausted:
            return False
        try:
            self._buffer.append(next(self._iter))
        except StopIteration:
            self._exhausted = True
            return False
        return True

    def prefill(self, length: int) -> None:
        """Buffer items until at least ``length`` are held or the source ends."""
        missing = length - len(self._buffer)
        if missing <= 0 or self._exhausted:
            return
        before = len(self._buffer)
        self._buffer.extend(islice(self._iter, missing))
        if len(self._buffer) - before < missing:
            self._exhausted = True

    def count(self) -> int:
        """Return buffered plus remaining items, draining the source."""
        remaining = 0 if self._exhausted else sum(1 for _ in self._iter)
        self._exhausted = True
        return len(self._buffer) + remaining