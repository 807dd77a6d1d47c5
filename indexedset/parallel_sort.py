"""Sorting of index sets, with the work spread over a thread pool.

Chunks of the set are sorted on their own and then merged in chunk order.
The merge takes ties from the earlier chunk first, so the stable variants
keep equal values in their original relative order.
"""

from __future__ import annotations

import functools
import heapq
import operator
from collections.abc import Callable, Iterator
from typing import Any

from .ordered import OrderedIndexSet
from .parallel import _map_chunks

_Cmp = Callable[[Any, Any], int]


def _parallel_sorted(values: list[Any], key: Callable[[Any], Any] | None) -> list[Any]:
    """Return ``values`` sorted stably by ``key``, sorting chunks in parallel."""
    runs = _map_chunks(lambda chunk: sorted(chunk, key=key), values)
    if not runs:
        return []
    if len(runs) == 1:
        return runs[0]
    return list(heapq.merge(*runs, key=key))


def _reorder(target: OrderedIndexSet, values: list[Any]) -> None:
    target.clear()
    target.extend(values)


def par_sort(target: OrderedIndexSet) -> None:
    """Sort the values of ``target`` in place by their natural ordering."""
    _reorder(target, _parallel_sorted(list(target), None))


def par_sort_by(target: OrderedIndexSet, cmp: _Cmp) -> None:
    """Sort the values of ``target`` in place with the comparison function ``cmp``.

    The sort is stable.
    """
    _reorder(target, _parallel_sorted(list(target), functools.cmp_to_key(cmp)))


def par_sorted_by(target: OrderedIndexSet, cmp: _Cmp) -> Iterator[Any]:
    """Return an iterator over the values of ``target`` sorted with ``cmp``.

    The set itself is left unchanged. The sort is stable.
    """
    return iter(_parallel_sorted(list(target), functools.cmp_to_key(cmp)))


def par_sort_unstable(target: OrderedIndexSet) -> None:
    """Sort the values of ``target`` in place by their natural ordering."""
    par_sort(target)


def par_sort_unstable_by(target: OrderedIndexSet, cmp: _Cmp) -> None:
    """Sort the values of ``target`` in place with the comparison function ``cmp``."""
    par_sort_by(target, cmp)


def par_sorted_unstable_by(target: OrderedIndexSet, cmp: _Cmp) -> Iterator[Any]:
    """Return an iterator over the values of ``target`` sorted with ``cmp``."""
    return par_sorted_by(target, cmp)


def par_sort_by_cached_key(
    target: OrderedIndexSet, sort_key: Callable[[Any], Any]
) -> None:
    """Sort ``target`` in place by a key computed once per value (stable)."""
    keyed_parts = _map_chunks(
        lambda chunk: [(sort_key(value), value) for value in chunk], list(target)
    )
    keyed = [pair for part in keyed_parts for pair in part]
    ordered = _parallel_sorted(keyed, operator.itemgetter(0))
    _reorder(target, [value for _, value in ordered])