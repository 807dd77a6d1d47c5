"""The public index set type: ordered storage plus set algebra."""

from __future__ import annotations

from .base import IndexSetBase
from .ordered import OrderedIndexSet
from .setops import Difference, Intersection, SymmetricDifference, Union


class IndexSet(OrderedIndexSet):
    """A hash set whose iteration order does not depend on the hash values.

    Values keep the order in which they were inserted, except where a
    method such as ``swap_remove`` or a sort changes it.  Equality ignores
    order: two sets are equal when they hold the same values.

    The operators ``&``, ``|``, ``^`` and ``-`` build new sets.  Their order
    follows the matching view: ``union`` and ``symmetric_difference`` put the
    values of ``self`` first and then those of ``other``, while
    ``intersection`` and ``difference`` keep the order of ``self``.
    """

    __hash__ = None  # mutable container

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexSetBase):
            return NotImplemented
        return len(self) == len(other) and self.is_subset(other)

    def __and__(self, other: object) -> "IndexSet":
        if not isinstance(other, IndexSetBase):
            return NotImplemented
        return type(self)(self.intersection(other))

    def __or__(self, other: object) -> "IndexSet":
        if not isinstance(other, IndexSetBase):
            return NotImplemented
        return type(self)(self.union(other))

    def __xor__(self, other: object) -> "IndexSet":
        if not isinstance(other, IndexSetBase):
            return NotImplemented
        return type(self)(self.symmetric_difference(other))

    def __sub__(self, other: object) -> "IndexSet":
        if not isinstance(other, IndexSetBase):
            return NotImplemented
        return type(self)(self.difference(other))

    def difference(self, other: IndexSetBase) -> Difference:
        """Values in ``self`` but not in ``other``, in the order of ``self``."""
        return Difference(self, other)

    def symmetric_difference(self, other: IndexSetBase) -> SymmetricDifference:
        """Values in exactly one set: those of ``self`` first, then ``other``."""
        return SymmetricDifference(self, other)

    def intersection(self, other: IndexSetBase) -> Intersection:
        """Values in both sets, in the order of ``self``."""
        return Intersection(self, other)

    def union(self, other: IndexSetBase) -> Union:
        """Values of ``self`` in order, then those only in ``other``."""
        return Union(self, other)

    def is_disjoint(self, other: IndexSetBase) -> bool:
        """Return True if the sets have no value in common."""
        if len(self) <= len(other):
            smaller, larger = self, other
        else:
            smaller, larger = other, self
        return not any(value in larger for value in smaller)

    def is_subset(self, other: IndexSetBase) -> bool:
        """Return True if every value of ``self`` is in ``other``."""
        return len(self) <= len(other) and all(value in other for value in self)

    def is_superset(self, other: IndexSetBase) -> bool:
        """Return True if every value of ``other`` is in ``self``."""
        if isinstance(other, IndexSet):
            return other.is_subset(self)
        return len(other) <= len(self) and all(value in self for value in other)