"""Set comparisons and set operations on index sets, computed in parallel.

Work is split into contiguous chunks that run on a thread pool.  The
results are put back together in chunk order, so every function yields the
same order as its sequential counterpart.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Hashable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any, TypeVar

from .base import IndexSetBase
from .indexset import IndexSet

_R = TypeVar("_R")

_MIN_CHUNK = 1024


def _worker_count() -> int:
    return max(1, os.cpu_count() or 1)


def _chunks(values: Sequence[Any]) -> list[Sequence[Any]]:
    """Split ``values`` into contiguous chunks, one per worker at most."""
    count = len(values)
    if count == 0:
        return []
    workers = _worker_count()
    size = max(_MIN_CHUNK, -(-count // workers))
    return [values[start:start + size] for start in range(0, count, size)]


def _map_chunks(func: Callable[[Sequence[Any]], _R], values: Sequence[Any]) -> list[_R]:
    """Apply ``func`` to each chunk of ``values`` and return results in chunk order."""
    chunks = _chunks(values)
    if len(chunks) <= 1:
        return [func(chunk) for chunk in chunks]
    with ThreadPoolExecutor(max_workers=min(len(chunks), _worker_count())) as pool:
        return list(pool.map(func, chunks))


def _values(items: Iterable[Any]) -> list[Any]:
    return list(items)


def _collect(iterable: Iterable[Any]) -> list[list[Any]]:
    """Gather ``iterable`` into ordered chunk lists."""
    return _map_chunks(list, _values(iterable))


def _filter_by_membership(
    first: IndexSetBase, other: IndexSetBase, keep_members: bool
) -> list[Any]:
    def work(chunk: Sequence[Any]) -> list[Any]:
        return [value for value in chunk if (value in other) == keep_members]

    return [value for part in _map_chunks(work, _values(first)) for value in part]


def par_is_subset(first: IndexSetBase, other: IndexSetBase) -> bool:
    """Return True if every value of ``first`` is in ``other``."""
    if len(first) > len(other):
        return False
    return all(
        _map_chunks(lambda chunk: all(value in other for value in chunk), _values(first))
    )


def par_is_superset(first: IndexSetBase, other: IndexSetBase) -> bool:
    """Return True if every value of ``other`` is in ``first``."""
    return par_is_subset(other, first)


def par_is_disjoint(first: IndexSetBase, other: IndexSetBase) -> bool:
    """Return True if the two sets share no value."""
    if len(first) <= len(other):
        smaller, larger = first, other
    else:
        smaller, larger = other, first
    return all(
        _map_chunks(
            lambda chunk: not any(value in larger for value in chunk), _values(smaller)
        )
    )


def par_eq(first: IndexSetBase, other: IndexSetBase) -> bool:
    """Return True if both sets hold the same values, whatever their order."""
    return len(first) == len(other) and par_is_subset(first, other)


def par_difference(first: IndexSetBase, other: IndexSetBase) -> list[Any]:
    """Values of ``first`` not in ``other``, in the order of ``first``."""
    return _filter_by_membership(first, other, keep_members=False)


def par_intersection(first: IndexSetBase, other: IndexSetBase) -> list[Any]:
    """Values of ``first`` also in ``other``, in the order of ``first``."""
    return _filter_by_membership(first, other, keep_members=True)


def par_symmetric_difference(first: IndexSetBase, other: IndexSetBase) -> list[Any]:
    """Values in exactly one set: those of ``first`` in order, then ``other``."""
    return par_difference(first, other) + par_difference(other, first)


def par_union(first: IndexSetBase, other: IndexSetBase) -> list[Any]:
    """All values of ``first`` in order, then those only in ``other``."""
    return _values(first) + par_difference(other, first)


def par_extend(target: IndexSetBase, iterable: Iterable[Hashable]) -> None:
    """Insert the values of ``iterable`` into ``target`` in their order."""
    for chunk in _collect(iterable):
        target.extend(chunk)


def from_par_iter(iterable: Iterable[Hashable]) -> IndexSet:
    """Build a new set from ``iterable``, keeping first occurrences in order."""
    result = IndexSet()
    par_extend(result, iterable)
    return result