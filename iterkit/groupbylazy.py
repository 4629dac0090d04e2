"""Lazy grouping of consecutive elements by key, and lazy fixed-size chunking.

Groups (or chunks) share one underlying iterator. Elements are buffered only
when several group iterators are alive at the same time and are consumed out
of order. A group that is closed, or garbage collected, is no longer buffered.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")

_NONE: Any = object()


class _ChunkIndex:
    """Key function that assigns consecutive chunk numbers of a fixed size."""

    __slots__ = ("size", "index", "key")

    def __init__(self, size: int) -> None:
        self.size = size
        self.index = 0
        self.key = 0

    def __call__(self, _item: Any) -> int:
        if self.index == self.size:
            self.key += 1
            self.index = 0
        self.index += 1
        return self.key


class _GroupInner:
    """Shared state of a lazy grouping: the source, the current key and the buffers."""

    def __init__(self, iterable: Iterable[Any], key: Callable[[Any], Any]) -> None:
        self._key = key
        self._iter = iter(iterable)
        self._current_key: Any = _NONE
        self._current_elt: Any = _NONE
        self._done = False
        # Index of the group currently being buffered or visited.
        self._top_group = 0
        # Least group index for which elements are still buffered.
        self._oldest_buffered_group = 0
        # Group index of buffer[0].
        self._bottom_group = 0
        self._buffer: list[deque] = []
        # Highest index of a group that was dropped, or None.
        self._dropped_group: int | None = None

    def step(self, client: int) -> Any:
        """Return the next element of group ``client``, or the missing marker."""
        if client < self._oldest_buffered_group:
            return _NONE
        if client < self._top_group or (
            client == self._top_group
            and len(self._buffer) > self._top_group - self._bottom_group
        ):
            return self._lookup_buffer(client)
        if self._done:
            return _NONE
        if client == self._top_group:
            return self._step_current()
        return self._step_buffering(client)

    def _lookup_buffer(self, client: int) -> Any:
        if client < self._oldest_buffered_group:
            return _NONE
        bufidx = client - self._bottom_group
        elt = _NONE
        if bufidx < len(self._buffer) and self._buffer[bufidx]:
            elt = self._buffer[bufidx].popleft()
        if elt is _NONE and client == self._oldest_buffered_group:
            self._oldest_buffered_group += 1
            while True:
                idx = self._oldest_buffered_group - self._bottom_group
                if idx < len(self._buffer) and not self._buffer[idx]:
                    self._oldest_buffered_group += 1
                else:
                    break
            nclear = self._oldest_buffered_group - self._bottom_group
            if nclear > 0 and nclear >= len(self._buffer) // 2:
                del self._buffer[:nclear]
                self._bottom_group = self._oldest_buffered_group
        return elt

    def _next_element(self) -> Any:
        try:
            return next(self._iter)
        except StopIteration:
            self._done = True
            return _NONE

    def _step_buffering(self, client: int) -> Any:
        # A later group was requested: walk through the current group and
        # buffer its elements, unless that group has been dropped.
        keep = self._top_group != self._dropped_group
        group: list[Any] = []
        if self._current_elt is not _NONE:
            elt, self._current_elt = self._current_elt, _NONE
            if keep:
                group.append(elt)
        first_elt = _NONE
        while True:
            elt = self._next_element()
            if elt is _NONE:
                break
            key = self._key(elt)
            old_key, self._current_key = self._current_key, _NONE
            if old_key is not _NONE and old_key != key:
                self._current_key = key
                first_elt = elt
                break
            self._current_key = key
            if keep:
                group.append(elt)
        if keep:
            self._push_next_group(group)
        if first_elt is not _NONE:
            self._top_group += 1
        return first_elt

    def _push_next_group(self, group: list[Any]) -> None:
        while self._top_group - self._bottom_group > len(self._buffer):
            if not self._buffer:
                self._bottom_group += 1
                self._oldest_buffered_group += 1
            else:
                self._buffer.append(deque())
        self._buffer.append(deque(group))

    def _step_current(self) -> Any:
        if self._current_elt is not _NONE:
            elt, self._current_elt = self._current_elt, _NONE
            return elt
        elt = self._next_element()
        if elt is _NONE:
            return _NONE
        key = self._key(elt)
        old_key, self._current_key = self._current_key, _NONE
        if old_key is not _NONE and old_key != key:
            self._current_key = key
            self._current_elt = elt
            self._top_group += 1
            return _NONE
        self._current_key = key
        return elt

    def group_key(self, client: int) -> Any:
        """Return the key of the group just started, peeking one element ahead."""
        old_key, self._current_key = self._current_key, _NONE
        elt = self._next_element()
        if elt is not _NONE:
            key = self._key(elt)
            if old_key != key:
                self._top_group += 1
            self._current_key = key
            self._current_elt = elt
        return old_key

    def drop_group(self, client: int) -> None:
        if self._dropped_group is None or client > self._dropped_group:
            self._dropped_group = client


class _Member(Generic[T]):
    """Shared state of an iterator over one group or chunk."""

    def __init__(self, inner: _GroupInner, index: int, first: T) -> None:
        self._inner = inner
        self._index = index
        self._first: Any = first
        self._closed = False

    def _advance(self) -> T:
        if self._first is not _NONE:
            elt, self._first = self._first, _NONE
            return elt
        if self._closed:
            raise StopIteration
        elt = self._inner.step(self._index)
        if elt is _NONE:
            raise StopIteration
        return elt

    def _release(self) -> None:
        if not self._closed:
            self._closed = True
            self._first = _NONE
            self._inner.drop_group(self._index)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self._release()

    def __del__(self) -> None:
        try:
            self._release()
        except Exception:
            pass


class Group(_Member[T]):
    """Iterator over the elements of a single group."""

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Give up this iterator; its remaining elements are no longer buffered."""
        self._release()


class Chunk(_Member[T]):
    """Iterator over the elements of a single chunk."""

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self._advance()

    def close(self) -> None:
        """Give up this iterator; its remaining elements are no longer buffered."""
        self._release()


class GroupBy(Generic[K, T]):
    """Storage for a lazy grouping; iterate it to get ``(key, Group)`` pairs.

    All iterators over the same ``GroupBy`` share one position.
    """

    def __init__(self, iterable: Iterable[T], key: Callable[[T], K]) -> None:
        self._inner = _GroupInner(iterable, key)
        self._index = 0

    def __iter__(self) -> Groups[K, T]:
        return Groups(self)


class Groups(Generic[K, T]):
    """Iterator yielding ``(key, Group)`` for each run of equal keys."""

    def __init__(self, parent: GroupBy[K, T]) -> None:
        self._parent = parent

    def __iter__(self) -> Groups[K, T]:
        return self

    def __next__(self) -> tuple[K, Group[T]]:
        parent = self._parent
        index = parent._index
        parent._index += 1
        inner = parent._inner
        elt = inner.step(index)
        if elt is _NONE:
            raise StopIteration
        key = inner.group_key(index)
        return key, Group(inner, index, elt)


class IntoChunks(Generic[T]):
    """Storage for a lazy chunking; iterate it to get ``Chunk`` iterators."""

    def __init__(self, iterable: Iterable[T], size: int) -> None:
        if size < 1:
            raise ValueError("chunk size must be at least 1")
        self._inner = _GroupInner(iterable, _ChunkIndex(size))
        self._index = 0

    def __iter__(self) -> Chunks[T]:
        return Chunks(self)


class Chunks(Generic[T]):
    """Iterator yielding one ``Chunk`` per run of ``size`` elements."""

    def __init__(self, parent: IntoChunks[T]) -> None:
        self._parent = parent

    def __iter__(self) -> Chunks[T]:
        return self

    def __next__(self) -> Chunk[T]:
        parent = self._parent
        index = parent._index
        parent._index += 1
        elt = parent._inner.step(index)
        if elt is _NONE:
            raise StopIteration
        return Chunk(parent._inner, index, elt)


def group_by(iterable: Iterable[T], key: Callable[[T], K]) -> GroupBy[K, T]:
    """Group consecutive elements of ``iterable`` that have equal ``key(element)``."""
    return GroupBy(iterable, key)


def chunks(iterable: Iterable[T], size: int) -> IntoChunks[T]:
    """Split ``iterable`` lazily into chunks of ``size`` elements; the last may be shorter."""
    return IntoChunks(iterable, size)