import random

import pytest

from iterkit.kmerge import KMergeBy, kmerge, kmerge_by


def test_kmerge_documented_example():
    assert list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]])) == list(range(8))


def test_kmerge_empty_inputs():
    assert list(kmerge([])) == []
    assert list(kmerge([[], [], []])) == []


def test_kmerge_skips_empty_sources():
    assert list(kmerge([[], [2, 5], [], [1]])) == [1, 2, 5]


@pytest.mark.parametrize("seed", range(5))
def test_kmerge_sorted_sources_give_sorted_output(seed):
    rng = random.Random(seed)
    sources = [sorted(rng.randrange(50) for _ in range(rng.randrange(20))) for _ in range(7)]
    merged = list(kmerge(sources))
    assert merged == sorted(x for source in sources for x in source)


def test_kmerge_accepts_iterators():
    sources = (iter(range(i, 20, 4)) for i in range(4))
    assert list(kmerge(sources)) == list(range(20))


def test_kmerge_by_descending():
    sources = [[9, 5, 1], [8, 4], [7, 6, 3]]
    merged = list(kmerge_by(sources, lambda a, b: a > b))
    assert merged == sorted((x for s in sources for x in s), reverse=True)


def test_kmerge_by_key_keeps_all_items():
    sources = [[("a", 1), ("c", 3)], [("b", 2), ("d", 4)]]
    merged = list(kmerge_by(sources, lambda a, b: a[1] < b[1]))
    assert [item[1] for item in merged] == [1, 2, 3, 4]
    assert len(merged) == 4


def test_kmerge_is_fused():
    it = KMergeBy([[1]], lambda a, b: a < b)
    assert next(it) == 1
    with pytest.raises(StopIteration):
        next(it)
    with pytest.raises(StopIteration):
        next(it)