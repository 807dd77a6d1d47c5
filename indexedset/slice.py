"""An ordered, immutable view of values taken from an index set."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

from .util import simplify_range, try_simplify_range


class Slice(Sequence):
    """A sequence of values in set order.

    Unlike the set itself, a slice compares by order, supports ordering
    comparisons and is hashable.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._values = tuple(values)

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._values)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._values)

    def __getitem__(self, index):
        if isinstance(index, (slice, range, tuple)):
            r = simplify_range(index, len(self._values))
            return Slice(self._values[r.start:r.stop])
        i = operator.index(index)
        if not 0 <= i < len(self._values):
            raise IndexError(
                f"index {i} out of bounds for slice of length {len(self._values)}"
            )
        return self._values[i]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._values == other._values
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._values < other._values
        return NotImplemented

    def __le__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._values <= other._values
        return NotImplemented

    def __gt__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._values > other._values
        return NotImplemented

    def __ge__(self, other: object) -> bool:
        if isinstance(other, Slice):
            return self._values >= other._values
        return NotImplemented

    def __hash__(self) -> int:
        return hash((len(self._values), self._values))

    def __repr__(self) -> str:
        return f"Slice({list(self._values)!r})"

    def is_empty(self) -> bool:
        return not self._values

    def get_index(self, index: int) -> Any:
        """Return the value at ``index``, or None when it is out of range."""
        if 0 <= index < len(self._values):
            return self._values[index]
        return None

    def get_range(self, rng) -> Slice | None:
        """Return the sub-slice for ``rng``, or None when it does not fit."""
        r = try_simplify_range(rng, len(self._values))
        if r is None:
            return None
        return Slice(self._values[r.start:r.stop])

    def first(self) -> Any:
        return self._values[0] if self._values else None

    def last(self) -> Any:
        return self._values[-1] if self._values else None

    def split_at(self, index: int) -> tuple[Slice, Slice]:
        """Divide into ``[0, index)`` and ``[index, len)``."""
        if not 0 <= index <= len(self._values):
            raise IndexError(
                f"split index {index} out of bounds for slice of length {len(self._values)}"
            )
        return Slice(self._values[:index]), Slice(self._values[index:])

    def split_first(self) -> tuple[Any, Slice] | None:
        if not self._values:
            return None
        return self._values[0], Slice(self._values[1:])

    def split_last(self) -> tuple[Any, Slice] | None:
        if not self._values:
            return None
        return self._values[-1], Slice(self._values[:-1])