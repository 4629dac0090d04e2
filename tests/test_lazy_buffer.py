import pytest

from iterkit.lazy_buffer import LazyBuffer


def test_starts_empty():
    buf = LazyBuffer(iter("abc"))
    assert len(buf) == 0


def test_get_next_buffers_in_order():
    buf = LazyBuffer("abc")
    assert buf.get_next() is True
    assert buf.get_next() is True
    assert len(buf) == 2
    assert buf[0] == "a"
    assert buf[1] == "b"


def test_get_next_false_when_exhausted():
    buf = LazyBuffer([1])
    assert buf.get_next() is True
    assert buf.get_next() is False
    assert buf.get_next() is False
    assert len(buf) == 1


def test_prefill_grows_but_never_shrinks():
    buf = LazyBuffer(range(10))
    buf.prefill(4)
    assert len(buf) == 4
    buf.prefill(2)
    assert len(buf) == 4
    assert buf[0:4] == [0, 1, 2, 3]


def test_prefill_stops_at_end_of_source():
    buf = LazyBuffer([7, 8])
    buf.prefill(5)
    assert len(buf) == 2
    assert buf.get_next() is False


def test_index_out_of_range():
    buf = LazyBuffer([1, 2, 3])
    buf.prefill(1)
    assert buf[0] == 1
    with pytest.raises(IndexError):
        buf[1]
    assert len(buf) == 1


def test_count_includes_buffered_and_remaining():
    data = list(range(12))
    buf = LazyBuffer(iter(data))
    buf.prefill(5)
    assert buf.count() == len(data)
    assert buf.get_next() is False