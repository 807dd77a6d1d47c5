"""Range bounds and their normalisation against a sequence length."""

from __future__ import annotations

import enum
import operator
from dataclasses import dataclass
from typing import Tuple, Union


class BoundKind(enum.Enum):
    """How one end of a range is delimited."""

    INCLUDED = "Included"
    EXCLUDED = "Excluded"
    UNBOUNDED = "Unbounded"


@dataclass(frozen=True)
class Bound:
    """One end of an index range."""

    kind: BoundKind
    value: int | None = None

    def __post_init__(self) -> None:
        if self.kind is BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError("an unbounded bound carries no value")
        else:
            if self.value is None:
                raise ValueError(f"a {self.kind.value.lower()} bound needs a value")
            object.__setattr__(self, "value", operator.index(self.value))

    @classmethod
    def included(cls, value: int) -> "Bound":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: int) -> "Bound":
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> "Bound":
        return cls(BoundKind.UNBOUNDED)

    def __str__(self) -> str:
        if self.kind is BoundKind.UNBOUNDED:
            return self.kind.value
        return f"{self.kind.value}({self.value})"


RangeLike = Union[slice, range, Tuple[Bound, Bound]]


def _to_bounds(rng: RangeLike) -> tuple[Bound, Bound]:
    if isinstance(rng, slice):
        if rng.step not in (None, 1):
            raise ValueError("ranges with a step are not supported")
        start = Bound.unbounded() if rng.start is None else Bound.included(rng.start)
        end = Bound.unbounded() if rng.stop is None else Bound.excluded(rng.stop)
        return start, end
    if isinstance(rng, range):
        if rng.step != 1:
            raise ValueError("ranges with a step are not supported")
        return Bound.included(rng.start), Bound.excluded(rng.stop)
    if (
        isinstance(rng, tuple)
        and len(rng) == 2
        and all(isinstance(bound, Bound) for bound in rng)
    ):
        return rng[0], rng[1]
    raise TypeError(f"expected a slice, a range or a pair of Bound, got {rng!r}")


def _start_index(bound: Bound, length: int) -> int | None:
    if bound.kind is BoundKind.UNBOUNDED:
        return 0
    i = bound.value
    if bound.kind is BoundKind.INCLUDED and 0 <= i <= length:
        return i
    if bound.kind is BoundKind.EXCLUDED and 0 <= i < length:
        return i + 1
    return None


def _end_index(bound: Bound, length: int) -> int | None:
    if bound.kind is BoundKind.UNBOUNDED:
        return length
    i = bound.value
    if bound.kind is BoundKind.EXCLUDED and 0 <= i <= length:
        return i
    if bound.kind is BoundKind.INCLUDED and 0 <= i < length:
        return i + 1
    return None


def simplify_range(rng: RangeLike, length: int) -> range:
    """Resolve ``rng`` to a step-1 range within ``0..length``.

    Raises IndexError when the range does not fit the length.
    """
    start_bound, end_bound = _to_bounds(rng)
    start = _start_index(start_bound, length)
    if start is None:
        raise IndexError(f"range start {start_bound} should be <= length {length}")
    end = _end_index(end_bound, length)
    if end is None:
        raise IndexError(f"range end {end_bound} should be <= length {length}")
    if start > end:
        raise IndexError(
            f"range start {start_bound} should be <= range end {end_bound}"
        )
    return range(start, end)


def try_simplify_range(rng: RangeLike, length: int) -> range | None:
    """Like :func:`simplify_range`, but return None for a range that does not fit."""
    start_bound, end_bound = _to_bounds(rng)
    start = _start_index(start_bound, length)
    end = _end_index(end_bound, length)
    if start is None or end is None or start > end:
        return None
    return range(start, end)