"""Lazy, order-preserving views over the set operations of two index sets."""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from typing import Any


class _SetOperation:
    """Shared state and formatting for the set operation views."""

    __slots__ = ("_first", "_other")

    def __init__(self, first, other) -> None:
        self._first = first
        self._other = other

    def __iter__(self) -> Iterator[Any]:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class Difference(_SetOperation):
    """Values of ``first`` that are not in ``other``, in the order of ``first``."""

    __slots__ = ()

    def __init__(self, first, other) -> None:
        super().__init__(first, other)

    def __iter__(self) -> Iterator[Any]:
        other = self._other
        return (value for value in self._first if value not in other)

    def __reversed__(self) -> Iterator[Any]:
        other = self._other
        return (value for value in reversed(self._first) if value not in other)

    def __repr__(self) -> str:
        return super().__repr__()


class Intersection(_SetOperation):
    """Values of ``first`` that are also in ``other``, in the order of ``first``."""

    __slots__ = ()

    def __init__(self, first, other) -> None:
        super().__init__(first, other)

    def __iter__(self) -> Iterator[Any]:
        other = self._other
        return (value for value in self._first if value in other)

    def __reversed__(self) -> Iterator[Any]:
        other = self._other
        return (value for value in reversed(self._first) if value in other)

    def __repr__(self) -> str:
        return super().__repr__()


class SymmetricDifference(_SetOperation):
    """Values in exactly one of the sets.

    Values from ``first`` come in their order, followed by values from
    ``other`` in theirs.
    """

    __slots__ = ()

    def __init__(self, first, other) -> None:
        super().__init__(first, other)

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain(
            Difference(self._first, self._other),
            Difference(self._other, self._first),
        )

    def __reversed__(self) -> Iterator[Any]:
        return itertools.chain(
            reversed(Difference(self._other, self._first)),
            reversed(Difference(self._first, self._other)),
        )

    def __repr__(self) -> str:
        return super().__repr__()


class Union(_SetOperation):
    """All values of ``first`` in order, then those only in ``other`` in order."""

    __slots__ = ()

    def __init__(self, first, other) -> None:
        super().__init__(first, other)

    def __iter__(self) -> Iterator[Any]:
        return itertools.chain(self._first, Difference(self._other, self._first))

    def __reversed__(self) -> Iterator[Any]:
        return itertools.chain(
            reversed(Difference(self._other, self._first)),
            reversed(self._first),
        )

    def __repr__(self) -> str:
        return super().__repr__()