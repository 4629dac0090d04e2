import pytest

from iterkit.intersperse import IntersperseWith, intersperse, intersperse_with


class _Resuming:
    """Iterator that signals exhaustion once, then yields again."""

    def __init__(self):
        self._calls = 0

    def __iter__(self):
        return self

    def __next__(self):
        self._calls += 1
        if self._calls == 2:
            raise StopIteration
        return self._calls


def test_intersperse_core_case():
    assert list(intersperse([1, 2, 3], 0)) == [1, 0, 2, 0, 3]


def test_intersperse_with_core_case():
    assert list(intersperse_with([1, 2, 3], lambda: 10)) == [1, 10, 2, 10, 3]


def test_intersperse_with_counter():
    state = {"i": 10}

    def gen():
        state["i"] -= 1
        return state["i"]

    assert list(intersperse_with(range(3), gen)) == [0, 9, 1, 8, 2]
    assert state["i"] == 8


def test_empty_and_single():
    assert list(intersperse([], 0)) == []
    assert list(intersperse([5], 0)) == [5]


def test_is_fused():
    it = IntersperseWith(_Resuming(), lambda: 0)
    assert list(it) == [1]
    with pytest.raises(StopIteration):
        next(it)


def test_iter_returns_self():
    it = intersperse("ab", "-")
    assert iter(it) is it
    assert "".join(it) == "a-b"