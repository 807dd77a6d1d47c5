"""Conversion of index sets to and from ordered plain-data sequences."""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from .indexset import IndexSet


def serialize_set(values: Iterable[Any]) -> list[Any]:
    """Return the values of a set as a list, in set order."""
    return list(values)


def serialize_slice(values: Iterable[Any]) -> list[Any]:
    """Return the values of a slice as a list, in slice order."""
    return list(values)


def deserialize_set(sequence: Any) -> IndexSet:
    """Build a set from a sequence; later duplicates are ignored.

    Raises TypeError when ``sequence`` is not a list or tuple.
    """
    if not isinstance(sequence, (list, tuple)):
        raise TypeError(
            f"invalid type: {type(sequence).__name__}, expected a set"
        )
    return IndexSet(sequence)


def _freeze(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_freeze(item) for item in value)
    return value


def dumps(values: Iterable[Any]) -> str:
    """Encode a set or slice as a JSON array in order."""
    return json.dumps(serialize_set(values))


def loads(text: str) -> IndexSet:
    """Decode a JSON array into a set; nested arrays become tuples."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise TypeError(f"invalid type: {type(data).__name__}, expected a set")
    return deserialize_set([_freeze(item) for item in data])