import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from indexedset.indexset import IndexSet
from indexedset.parallel_sort import (
    par_sort,
    par_sort_by,
    par_sort_by_cached_key,
    par_sort_unstable,
    par_sort_unstable_by,
    par_sorted_by,
    par_sorted_unstable_by,
)


def _ascending(a, b):
    return (a > b) - (a < b)


def _descending(a, b):
    return (b > a) - (b < a)


def _shuffled(count, seed=7):
    values = list(range(count))
    random.Random(seed).shuffle(values)
    return values


def _indices_consistent(target):
    return all(target.get_index_of(value) == pos for pos, value in enumerate(target))


@given(st.lists(st.integers(), unique=True))
def test_par_sort_matches_sorted(values):
    target = IndexSet(values)
    par_sort(target)
    assert list(target) == sorted(values)
    assert _indices_consistent(target)


@given(st.lists(st.integers(), unique=True))
def test_par_sort_unstable_matches_sorted(values):
    target = IndexSet(values)
    par_sort_unstable(target)
    assert list(target) == sorted(values)
    assert len(target) == len(values)


@pytest.mark.parametrize("count", [0, 1, 50, 5000])
def test_par_sort_large_and_small(count):
    values = _shuffled(count)
    target = IndexSet(values)
    par_sort(target)
    assert list(target) == list(range(count))
    assert _indices_consistent(target)


def test_par_sort_by_descending():
    values = _shuffled(3000)
    target = IndexSet(values)
    par_sort_by(target, _descending)
    assert list(target) == sorted(values, reverse=True)
    assert _indices_consistent(target)


def test_par_sort_unstable_by_descending():
    values = _shuffled(200)
    target = IndexSet(values)
    par_sort_unstable_by(target, _descending)
    assert list(target) == sorted(values, reverse=True)


def test_par_sort_by_is_stable():
    values = _shuffled(4000, seed=11)
    target = IndexSet(values)

    def by_tens(a, b):
        return (a // 10 > b // 10) - (a // 10 < b // 10)

    par_sort_by(target, by_tens)
    result = list(target)
    assert [v // 10 for v in result] == sorted(v // 10 for v in values)
    for tens in range(400):
        group = [v for v in result if v // 10 == tens]
        assert group == [v for v in values if v // 10 == tens]


def test_par_sorted_by_leaves_target_unchanged():
    values = _shuffled(2500)
    target = IndexSet(values)
    result = list(par_sorted_by(target, _ascending))
    assert result == sorted(values)
    assert list(target) == values


def test_par_sorted_unstable_by_leaves_target_unchanged():
    values = ["pear", "apple", "fig"]
    target = IndexSet(values)
    result = list(par_sorted_unstable_by(target, _descending))
    assert result == sorted(values, reverse=True)
    assert list(target) == values


def test_par_sort_by_cached_key_calls_once_per_value():
    values = _shuffled(3000, seed=3)
    target = IndexSet(values)
    calls = []

    def key(value):
        calls.append(value)
        return -value

    par_sort_by_cached_key(target, key)
    assert len(calls) == len(values)
    assert sorted(calls) == sorted(values)
    assert list(target) == sorted(values, reverse=True)
    assert _indices_consistent(target)


def test_par_sort_by_cached_key_is_stable():
    words = ["bb", "a", "ccc", "dd", "e", "fff"]
    target = IndexSet(words)
    par_sort_by_cached_key(target, len)
    assert list(target) == ["a", "e", "bb", "dd", "ccc", "fff"]


def test_par_sort_strings():
    target = IndexSet(["Lorem", "ipsum", "dolor", "sit", "amet"])
    par_sort(target)
    assert target[0] == "Lorem"
    assert target[1] == "amet"
    assert target.get_index_of("sit") == len(target) - 1


def test_par_sort_empty_set():
    target = IndexSet()
    par_sort(target)
    par_sort_by_cached_key(target, lambda value: value)
    assert list(target) == []
    assert list(par_sorted_by(target, _ascending)) == []


def test_sorted_set_keeps_membership():
    values = _shuffled(1500)
    target = IndexSet(values)
    par_sort_by(target, _descending)
    assert all(value in target for value in values)
    assert target.insert(values[0]) is False
    assert len(target) == len(values)