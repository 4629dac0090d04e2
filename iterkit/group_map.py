"""Collect key/value pairs into a dictionary of lists."""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


def into_group_map(pairs: Iterable[tuple[K, V]]) -> dict[K, list[V]]:
    """Map each key to the list of its values, in iteration order."""
    lookup: dict[K, list[V]] = {}
    for key, value in pairs:
        lookup.setdefault(key, []).append(value)
    return lookup


def into_group_map_by(iterable: Iterable[V], key: Callable[[V], K]) -> dict[K, list[V]]:
    """Group the values of ``iterable`` under ``key(value)``."""
    return into_group_map((key(value), value) for value in iterable)