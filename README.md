# indexedset

A hash set that iterates in the order values were inserted and removed. The
order does not depend on hash values. Each value also sits at a position in
the compact range `0 .. len(set)`. You can find a value by membership or by
its index.

The package needs nothing outside the standard library.

## Installation

```
pip install indexedset
```

## Usage

```python
from indexedset.indexset import IndexSet

letters = IndexSet("a short treatise on fungi")
assert "s" in letters
assert "y" not in letters

words = IndexSet()
for word in "Lorem ipsum dolor sit amet".split():
    words.insert(word)

assert words[0] == "Lorem"
assert words.get_index_of("dolor") == 2

words.reverse()
assert words[0] == "amet"
words.sort()
assert words[0] == "Lorem"
```

### Inserting and looking up

- `insert(value)` returns `False` when an equal value is already present. That
  value keeps its place.
- `insert_full(value)` also returns the value's index, as `(index, inserted)`.
- `replace(value)` and `replace_full(value)` store the new value in place of an
  equal one and return the value they replaced, or `None`.
- `get`, `get_full` and `get_index_of` look a value up by equality.
- `get_index`, `first` and `last` work by position and return `None` when there
  is nothing there. `set[i]` raises `IndexError` instead.

### Removing values

- `swap_remove`, `swap_take`, `swap_remove_full` and `swap_remove_index` move
  the last value into the removed value's place.
- `shift_remove`, `shift_take`, `shift_remove_full` and `shift_remove_index`
  shift every later value down by one, so the remaining order is kept.
- `remove` and `take` do the same as their swap variants.
- `pop` removes the last value. It returns `None` when the set is empty.
- `clear`, `truncate(length)`, `drain(range)` and `split_off(at)` work on
  ranges of positions.

### Ranges and slices

A range can be a `slice`, a step-1 `range`, or a pair of `Bound` values from
`indexedset.util`:

```python
from indexedset.util import Bound

s = IndexSet([0, 1, 4, 9, 16])
s[1:3]                                     # Slice([1, 4])
s[(Bound.excluded(1), Bound.unbounded())]  # Slice([4, 9, 16])
s.get_range(range(2, 10))                  # None: out of bounds
```

Indexing a set with a range that does not fit raises `IndexError`.
`get_range` returns `None` in that case.

A `Slice` (from `as_slice`, `get_range` or range indexing) is an immutable
sequence. It compares in order, supports `<`, `<=`, `>` and `>=`, and is
hashable. It also offers `get_index`, `get_range`, `first`, `last`,
`split_at`, `split_first` and `split_last`.

### Reordering

- `retain(keep)` keeps only the values for which `keep` returns true.
- `sort()` and `sort_unstable()` use the values' natural ordering.
- `sort_by(cmp)` and `sort_unstable_by(cmp)` take a comparison function that
  returns a negative number, zero or a positive number.
- `sorted_by(cmp)` and `sorted_unstable_by(cmp)` return an iterator over the
  sorted values and leave the set unchanged.
- `sort_by_cached_key(sort_key)` computes the key once per value.
- `reverse`, `move_index(from_index, to_index)` and `swap_indices(a, b)`
  rearrange values. The last two raise `IndexError` for an out-of-range index.

### Set operations

`difference`, `intersection`, `symmetric_difference` and `union` return lazy
views. You can iterate them or call `reversed()` on them.

- `difference` and `intersection` follow the order of the first set.
- `union` gives the first set, then the values that are only in the second set.
- `symmetric_difference` gives the first set's unique values, then the second
  set's unique values.

The operators `&`, `|`, `^` and `-` collect these results into new sets.
`is_disjoint`, `is_subset` and `is_superset` compare two sets.

Two sets are equal when they hold the same values, in any order.

### Serialization

`indexedset.serialization` converts to and from plain ordered data:

- `serialize_set` and `serialize_slice` return the values as a list, in order.
- `deserialize_set` builds a set from a list or tuple. It ignores later
  duplicates and raises `TypeError` for any other input.
- `dumps` writes a JSON array.
- `loads` reads a JSON array back into a set. Nested arrays become tuples so
  that they can be stored.

### Bulk helpers

`indexedset.parallel` splits the work into contiguous chunks and runs them on
a thread pool. It provides:

- `par_eq`, `par_is_subset`, `par_is_superset` and `par_is_disjoint`, which
  return booleans.
- `par_difference`, `par_intersection`, `par_symmetric_difference` and
  `par_union`, which return lists in the same order as the views above.
- `par_extend(target, iterable)` and `from_par_iter(iterable)`.

`indexedset.parallel_sort` sorts sets in the same chunked way and merges the
chunks stably. It provides `par_sort`, `par_sort_by`, `par_sorted_by`,
`par_sort_unstable`, `par_sort_unstable_by`, `par_sorted_unstable_by` and
`par_sort_by_cached_key`. Each takes the set as its first argument.

## What it does not do

This package provides a set only. It has no ordered map type keyed by
position. It has no control over capacity or over the hash function: values
are hashed with Python's own `hash`.