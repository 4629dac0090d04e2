"""Select the k smallest elements of an iterable."""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from typing import TypeVar

T = TypeVar("T")


def k_smallest(iterable: Iterable[T], k: int) -> list[T]:
    """Return the ``k`` smallest elements in ascending order.

    The whole iterable is consumed; at most ``k`` elements are held at a time.
    """
    if k < 0:
        raise ValueError("k must not be negative")
    if k == 0:
        return []
    return heapq.nsmallest(k, iterable)