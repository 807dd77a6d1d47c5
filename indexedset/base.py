"""Core storage for a hash set that keeps its values in a stable order."""

from __future__ import annotations

import itertools
import operator
from collections.abc import Hashable, Iterable, Iterator
from typing import Any

from .slice import Slice
from .util import simplify_range, try_simplify_range


class IndexSetBase:
    """Insertion-ordered set whose values sit at positions ``0..len``.

    Re-inserting a value that is already present keeps its position.
    """

    def __init__(self, iterable: Iterable[Hashable] | None = None) -> None:
        self._entries: list[Any] = []
        self._indices: dict[Any, int] = {}
        if iterable is not None:
            self.extend(iterable)

    # -- internal helpers -------------------------------------------------

    def _reindex(self, start: int = 0) -> None:
        for pos, value in enumerate(itertools.islice(self._entries, start, None), start):
            self._indices[value] = pos

    def _swap_remove_at(self, index: int) -> Any:
        value = self._entries[index]
        del self._indices[value]
        last = self._entries.pop()
        if index < len(self._entries):
            self._entries[index] = last
            self._indices[last] = index
        return value

    def _shift_remove_at(self, index: int) -> Any:
        value = self._entries.pop(index)
        del self._indices[value]
        self._reindex(index)
        return value

    def _in_bounds(self, index: int) -> bool:
        return 0 <= index < len(self._entries)

    # -- container protocol -----------------------------------------------

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, value: object) -> bool:
        return value in self._indices

    def __iter__(self) -> Iterator[Any]:
        return iter(self._entries)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._entries)

    def __getitem__(self, index):
        if isinstance(index, (slice, range, tuple)):
            r = simplify_range(index, len(self._entries))
            return Slice(self._entries[r.start:r.stop])
        i = operator.index(index)
        if not self._in_bounds(i):
            raise IndexError("IndexSet: index out of bounds")
        return self._entries[i]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"

    def copy(self):
        return type(self)(self._entries)

    # -- size and bulk changes ---------------------------------------------

    def is_empty(self) -> bool:
        return not self._entries

    def clear(self) -> None:
        self._entries.clear()
        self._indices.clear()

    def truncate(self, length: int) -> None:
        """Keep the first ``length`` values; longer lengths have no effect."""
        length = operator.index(length)
        if length < 0:
            raise ValueError("length must not be negative")
        if length < len(self._entries):
            for value in self._entries[length:]:
                del self._indices[value]
            del self._entries[length:]

    def drain(self, rng=None) -> list[Any]:
        """Remove the values in ``rng`` (all by default) and return them in order.

        Raises IndexError when the range does not fit the set.
        """
        r = simplify_range(slice(None) if rng is None else rng, len(self._entries))
        removed = self._entries[r.start:r.stop]
        del self._entries[r.start:r.stop]
        for value in removed:
            del self._indices[value]
        self._reindex(r.start)
        return removed

    def split_off(self, at: int):
        """Move the values ``[at, len)`` into a new set and return it."""
        if not 0 <= at <= len(self._entries):
            raise IndexError(
                f"split_off index (is {at}) should be <= len (is {len(self._entries)})"
            )
        tail = self._entries[at:]
        self.truncate(at)
        return type(self)(tail)

    def extend(self, iterable: Iterable[Hashable]) -> None:
        for value in iterable:
            self.insert(value)

    # -- insertion and lookup ---------------------------------------------

    def insert(self, value: Hashable) -> bool:
        """Add ``value``; return False if an equal value was already present."""
        return self.insert_full(value)[1]

    def insert_full(self, value: Hashable) -> tuple[int, bool]:
        index = self._indices.get(value)
        if index is not None:
            return index, False
        index = len(self._entries)
        self._entries.append(value)
        self._indices[value] = index
        return index, True

    def get(self, value: Hashable) -> Any:
        """Return the stored value equal to ``value``, or None."""
        index = self._indices.get(value)
        return None if index is None else self._entries[index]

    def get_full(self, value: Hashable) -> tuple[int, Any] | None:
        index = self._indices.get(value)
        return None if index is None else (index, self._entries[index])

    def get_index_of(self, value: Hashable) -> int | None:
        return self._indices.get(value)

    def replace(self, value: Hashable) -> Any:
        """Store ``value`` in place of an equal one; return the one replaced or None."""
        return self.replace_full(value)[1]

    def replace_full(self, value: Hashable) -> tuple[int, Any]:
        index = self._indices.get(value)
        if index is None:
            index = len(self._entries)
            self._entries.append(value)
            self._indices[value] = index
            return index, None
        old = self._entries[index]
        del self._indices[old]
        self._indices[value] = index
        self._entries[index] = value
        return index, old

    # -- removal by value ---------------------------------------------------

    def remove(self, value: Hashable) -> bool:
        """Same as :meth:`swap_remove`."""
        return self.swap_remove(value)

    def swap_remove(self, value: Hashable) -> bool:
        return self.swap_remove_full(value) is not None

    def shift_remove(self, value: Hashable) -> bool:
        return self.shift_remove_full(value) is not None

    def take(self, value: Hashable) -> Any:
        """Same as :meth:`swap_take`."""
        return self.swap_take(value)

    def swap_take(self, value: Hashable) -> Any:
        found = self.swap_remove_full(value)
        return None if found is None else found[1]

    def shift_take(self, value: Hashable) -> Any:
        found = self.shift_remove_full(value)
        return None if found is None else found[1]

    def swap_remove_full(self, value: Hashable) -> tuple[int, Any] | None:
        """Remove ``value`` by moving the last value into its place."""
        index = self._indices.get(value)
        if index is None:
            return None
        return index, self._swap_remove_at(index)

    def shift_remove_full(self, value: Hashable) -> tuple[int, Any] | None:
        """Remove ``value`` and shift the following values down by one."""
        index = self._indices.get(value)
        if index is None:
            return None
        return index, self._shift_remove_at(index)

    def pop(self) -> Any:
        """Remove and return the last value, or None when empty."""
        if not self._entries:
            return None
        value = self._entries.pop()
        del self._indices[value]
        return value

    # -- positional access ----------------------------------------------------

    def as_slice(self) -> Slice:
        return Slice(self._entries)

    def get_index(self, index: int) -> Any:
        return self._entries[index] if self._in_bounds(index) else None

    def get_range(self, rng) -> Slice | None:
        r = try_simplify_range(rng, len(self._entries))
        if r is None:
            return None
        return Slice(self._entries[r.start:r.stop])

    def first(self) -> Any:
        return self._entries[0] if self._entries else None

    def last(self) -> Any:
        return self._entries[-1] if self._entries else None

    def swap_remove_index(self, index: int) -> Any:
        return self._swap_remove_at(index) if self._in_bounds(index) else None

    def shift_remove_index(self, index: int) -> Any:
        return self._shift_remove_at(index) if self._in_bounds(index) else None