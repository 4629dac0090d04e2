import pytest

from iterkit import free


def test_intersperse_core_case():
    assert list(free.intersperse([1, 2, 3], 0)) == [1, 0, 2, 0, 3]


def test_intersperse_with_core_case():
    assert list(free.intersperse_with([1, 2, 3], lambda: 10)) == [1, 10, 2, 10, 3]


def test_intersperse_with_counter():
    state = {"i": 10}

    def gen():
        state["i"] -= 1
        return state["i"]

    assert list(free.intersperse_with(range(3), gen)) == [0, 9, 1, 8, 2]
    assert state["i"] == 8


def test_enumerate():
    assert list(free.enumerate([1, 2, 3])) == [(0, 1), (1, 2), (2, 3)]


def test_rev():
    assert list(free.rev([1, 2, 3])) == [3, 2, 1]


def test_zip_is_deprecated_and_stops_at_shorter():
    with pytest.warns(DeprecationWarning):
        result = list(free.zip([1, 2, 3, 4, 5], ["a", "b", "c"]))
    assert result == [(1, "a"), (2, "b"), (3, "c")]


def test_chain():
    assert list(free.chain([1, 2, 3], [4])) == [1, 2, 3, 4]


def test_cloned_bytes():
    assert next(free.cloned(b"abc")) == ord("a")


def test_cloned_copies_items():
    inner = [1, 2]
    (copied,) = list(free.cloned([inner]))
    assert copied == inner
    assert copied is not inner


def test_fold():
    assert free.fold([1.0, 2.0, 3.0], 0.0, max) == 3.0


def test_all_and_any():
    assert free.all([1, 2, 3], lambda x: x > 0) is True
    assert free.all([1, -2, 3], lambda x: x > 0) is False
    assert free.any([0, -1, 2], lambda x: x > 0) is True
    assert free.any([0, -1], lambda x: x > 0) is False


def test_max_and_min():
    assert free.max(range(10)) == 9
    assert free.min(range(10)) == 0
    assert free.max([]) is None
    assert free.min([]) is None


class _Item:
    def __init__(self, key, tag):
        self.key = key
        self.tag = tag

    def __lt__(self, other):
        return self.key < other.key

    def __gt__(self, other):
        return self.key > other.key


def test_max_picks_last_and_min_picks_first_among_equals():
    items = [_Item(1, "first"), _Item(1, "last")]
    assert free.max(items).tag == "last"
    assert free.min(items).tag == "first"


def test_join():
    assert free.join([1, 2, 3], ", ") == "1, 2, 3"
    assert free.join([], ", ") == ""


def test_sorted():
    assert "".join(free.sorted("rust")) == "rstu"