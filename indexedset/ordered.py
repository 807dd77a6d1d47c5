"""Index set operations that rearrange the order of its values."""

from __future__ import annotations

import functools
import operator
from collections.abc import Callable, Iterator
from typing import Any

from .base import IndexSetBase


class OrderedIndexSet(IndexSetBase):
    """An index set whose order can be filtered, sorted and rearranged.

    Comparison functions take two values and return a negative number,
    zero or a positive number, as ``functools.cmp_to_key`` expects.
    """

    def _set_order(self, values: list[Any]) -> None:
        self._entries = values
        self._indices = {value: pos for pos, value in enumerate(values)}

    def _check_index(self, index: int) -> int:
        index = operator.index(index)
        if not self._in_bounds(index):
            raise IndexError(
                f"index {index} out of bounds for set of length {len(self._entries)}"
            )
        return index

    def retain(self, keep: Callable[[Any], bool]) -> None:
        """Keep only the values for which ``keep`` is true, in their order."""
        self._set_order([value for value in self._entries if keep(value)])

    def sort(self) -> None:
        """Sort the values by their natural ordering (stable)."""
        self._set_order(sorted(self._entries))

    def sort_by(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort the values in place with the comparison function ``cmp`` (stable)."""
        self._set_order(sorted(self._entries, key=functools.cmp_to_key(cmp)))

    def sorted_by(self, cmp: Callable[[Any, Any], int]) -> Iterator[Any]:
        """Return an iterator over the values sorted with ``cmp`` (stable)."""
        return iter(sorted(self._entries, key=functools.cmp_to_key(cmp)))

    def sort_unstable(self) -> None:
        """Sort the values by their natural ordering."""
        self.sort()

    def sort_unstable_by(self, cmp: Callable[[Any, Any], int]) -> None:
        """Sort the values in place with the comparison function ``cmp``."""
        self.sort_by(cmp)

    def sorted_unstable_by(self, cmp: Callable[[Any, Any], int]) -> Iterator[Any]:
        """Return an iterator over the values sorted with ``cmp``."""
        return self.sorted_by(cmp)

    def sort_by_cached_key(self, sort_key: Callable[[Any], Any]) -> None:
        """Sort by a key computed once per value (stable)."""
        self._set_order(sorted(self._entries, key=sort_key))

    def reverse(self) -> None:
        """Reverse the order of the values in place."""
        self._entries.reverse()
        self._reindex()

    def move_index(self, from_index: int, to_index: int) -> None:
        """Move a value to another position, shifting the values in between.

        Raises IndexError if either index is out of bounds.
        """
        from_index = self._check_index(from_index)
        to_index = self._check_index(to_index)
        if from_index == to_index:
            return
        value = self._entries.pop(from_index)
        self._entries.insert(to_index, value)
        self._reindex(min(from_index, to_index))

    def swap_indices(self, a: int, b: int) -> None:
        """Swap the values at positions ``a`` and ``b``.

        Raises IndexError if either index is out of bounds.
        """
        a = self._check_index(a)
        b = self._check_index(b)
        entries = self._entries
        entries[a], entries[b] = entries[b], entries[a]
        self._indices[entries[a]] = a
        self._indices[entries[b]] = b