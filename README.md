# iterkit

Iterator helpers that work with any Python iterable. Pure Python, no
dependencies.

## Installation

```
pip install iterkit
```

## Modules

### `iterkit.intersperse`

- `intersperse(iterable, element)` yields the items with `element` between
  each neighbouring pair.
- `intersperse_with(iterable, element)` calls `element()` once for each gap.

Both return an `IntersperseWith` iterator, which stays exhausted once it has
ended.

### `iterkit.kmerge`

- `kmerge(iterables)` merges several iterables using `<`. If every input is
  sorted, the output is sorted.
- `kmerge_by(iterables, less_than)` merges using your own strict
  `less_than(a, b)` predicate.

Both return a `KMergeBy` iterator. Empty inputs are skipped.

### `iterkit.groupbylazy`

- `group_by(iterable, key)` returns a `GroupBy`. Iterating it yields
  `(key, Group)` pairs, one per run of consecutive elements with equal
  `key(element)`.
- `chunks(iterable, size)` returns an `IntoChunks`. Iterating it yields
  `Chunk` iterators of `size` elements each; the last chunk may be shorter.
  A `size` below 1 raises `ValueError`.

Every group and chunk reads from the same source iterator. Elements are
buffered only when you advance to a later group while an earlier one still
has elements you have not read. Call `close()` on a `Group` or `Chunk`, or
use it as a context manager, to say you will not read the rest of it. Its
remaining elements are then skipped instead of buffered. Dropping the last
reference to it has the same effect.

### `iterkit.grouping_map`

- `grouping_map(pairs)` takes `(key, value)` pairs.
- `grouping_map_by(iterable, key)` keys each value by `key(value)`.

Both return a `GroupingMap`. Each of its methods consumes the input once and
returns a `dict` that maps each key to the result for its group:

- `aggregate(operation)` calls `operation(acc, key, value)`. `acc` is `None`
  at the start of a group. If the operation returns `None`, the accumulator
  is discarded.
- `fold(init, operation)` starts each group from a shallow copy of `init`.
- `fold_first(operation)` starts each group from its first element.
- `collect(factory=list)` gives `factory(values)` for each group, with the
  values in iteration order.
- `sum()` and `product()` combine with `+` and `*`.
- `max()`, `max_by(compare)` and `max_by_key(key)`: the last of equal
  maxima wins.
- `min()`, `min_by(compare)` and `min_by_key(key)`: the first of equal
  minima wins.
- `minmax()`, `minmax_by(compare)` and `minmax_by_key(key)` give a
  `OneElement(value)` for a group of one element. For larger groups they
  give a `MinMax(min, max)`.

`compare(key, a, b)` returns a negative number, zero or a positive number.
The key functions of the `_by_key` methods take `(group_key, value)`.

### `iterkit.group_map`

- `into_group_map(pairs)` maps each key to the list of its values.
- `into_group_map_by(iterable, key)` does the same, keyed by `key(value)`.

### `iterkit.k_smallest`

- `k_smallest(iterable, k)` returns the `k` smallest elements in ascending
  order. A negative `k` raises `ValueError`.

### `iterkit.lazy_buffer`

`LazyBuffer(iterable)` keeps the items it has taken from an iterator and
gives indexed access to them with `len()` and `[]`. Its methods:

- `get_next()` buffers one more item. It returns `False` once the source is
  exhausted.
- `prefill(length)` buffers until `length` items are held or the source
  ends.
- `count()` returns the number of buffered items plus the remaining ones,
  draining the source.

### `iterkit.free`

Function forms of common operations, each taking any iterable:

- `intersperse`, `intersperse_with`, `enumerate`, `rev`, `chain`, `cloned`
  (shallow copies of each item) and `sorted` (which returns an iterator).
- `fold(iterable, init, function)`.
- `all(iterable, predicate)` and `any(iterable, predicate)`.
- `max` and `min`, which return `None` for an empty iterable. `max` picks
  the last of equal maxima and `min` the first of equal minima.
- `join(iterable, sep)` joins `str(item)` for each item.
- `zip(first, second)` is deprecated: it emits a `DeprecationWarning`. Use
  the built-in `zip` instead.

## Examples

```python
from iterkit.intersperse import intersperse
from iterkit.kmerge import kmerge
from iterkit.groupbylazy import group_by, chunks
from iterkit.grouping_map import grouping_map_by

list(intersperse(range(3), 8))                # [0, 8, 1, 8, 2]
list(kmerge([[0, 2, 4], [1, 3, 5], [6, 7]]))  # [0, 1, 2, 3, 4, 5, 6, 7]

for key, group in group_by([1, 3, 2, 4, 5], lambda x: x % 2):
    print(key, list(group))                   # 1 [1, 3] / 0 [2, 4] / 1 [5]

for chunk in chunks(range(7), 3):
    print(list(chunk))                        # [0, 1, 2] / [3, 4, 5] / [6]

grouping_map_by(range(1, 8), lambda n: n % 3).fold(0, lambda acc, key, val: acc + val)
# {1: 12, 2: 7, 0: 9}
```

## Scope

iterkit is a library only. It has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```