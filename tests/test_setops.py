import itertools

import pytest
from hypothesis import given
from hypothesis import strategies as st

from indexedset.base import IndexSetBase
from indexedset.setops import Difference, Intersection, SymmetricDifference, Union


def chain(*parts):
    return list(itertools.chain(*parts))


@pytest.fixture
def sets():
    set_a = IndexSetBase(range(0, 3))
    set_b = IndexSetBase(range(3, 6))
    set_c = IndexSetBase(range(0, 6))
    set_d = IndexSetBase(reversed(range(3, 9)))
    return set_a, set_b, set_c, set_d


def test_same_set(sets):
    set_a, _, _, _ = sets
    assert list(Difference(set_a, set_a)) == []
    assert list(SymmetricDifference(set_a, set_a)) == []
    assert list(Intersection(set_a, set_a)) == list(range(0, 3))
    assert list(Union(set_a, set_a)) == list(range(0, 3))


def test_disjoint_sets(sets):
    set_a, set_b, _, _ = sets
    assert list(Difference(set_a, set_b)) == list(range(0, 3))
    assert list(Difference(set_b, set_a)) == list(range(3, 6))
    assert list(SymmetricDifference(set_a, set_b)) == list(range(0, 6))
    assert list(SymmetricDifference(set_b, set_a)) == chain(range(3, 6), range(0, 3))
    assert list(Intersection(set_a, set_b)) == []
    assert list(Intersection(set_b, set_a)) == []
    assert list(Union(set_a, set_b)) == list(range(0, 6))
    assert list(Union(set_b, set_a)) == chain(range(3, 6), range(0, 3))


def test_subset(sets):
    set_a, _, set_c, _ = sets
    assert list(Difference(set_a, set_c)) == []
    assert list(Difference(set_c, set_a)) == list(range(3, 6))
    assert list(SymmetricDifference(set_a, set_c)) == list(range(3, 6))
    assert list(SymmetricDifference(set_c, set_a)) == list(range(3, 6))
    assert list(Intersection(set_a, set_c)) == list(range(0, 3))
    assert list(Intersection(set_c, set_a)) == list(range(0, 3))
    assert list(Union(set_a, set_c)) == list(range(0, 6))
    assert list(Union(set_c, set_a)) == list(range(0, 6))


def test_overlapping_reversed(sets):
    _, _, set_c, set_d = sets
    assert list(Difference(set_c, set_d)) == list(range(0, 3))
    assert list(Difference(set_d, set_c)) == list(reversed(range(6, 9)))
    assert list(SymmetricDifference(set_c, set_d)) == chain(
        range(0, 3), reversed(range(6, 9))
    )
    assert list(SymmetricDifference(set_d, set_c)) == chain(
        reversed(range(6, 9)), range(0, 3)
    )
    assert list(Intersection(set_c, set_d)) == list(range(3, 6))
    assert list(Intersection(set_d, set_c)) == list(reversed(range(3, 6)))
    assert list(Union(set_c, set_d)) == chain(range(0, 6), reversed(range(6, 9)))
    assert list(Union(set_d, set_c)) == chain(reversed(range(3, 9)), range(0, 3))


@pytest.mark.parametrize("op", [Difference, Intersection, SymmetricDifference, Union])
def test_reversed_matches_forward(sets, op):
    for first, other in itertools.product(sets, repeat=2):
        view = op(first, other)
        assert list(reversed(view)) == list(view)[::-1]


def test_views_are_reiterable(sets):
    set_a, set_b, _, _ = sets
    view = Union(set_a, set_b)
    assert list(view) == [0, 1, 2, 3, 4, 5]
    assert list(view) == [0, 1, 2, 3, 4, 5]


def test_view_is_lazy(sets):
    set_a, set_b, _, _ = sets
    view = Difference(set_a, set_b)
    set_a.insert(10)
    assert list(view) == [0, 1, 2, 10]


def test_repr_lists_values(sets):
    set_a, set_b, _, _ = sets
    assert repr(Difference(set_a, set_b)) == "Difference([0, 1, 2])"
    assert repr(Intersection(set_a, set_b)) == "Intersection([])"


small = st.lists(st.integers(min_value=0, max_value=20), max_size=15)


@given(small, small)
def test_matches_builtin_sets(xs, ys):
    first, other = IndexSetBase(xs), IndexSetBase(ys)
    assert set(Difference(first, other)) == set(xs) - set(ys)
    assert set(Intersection(first, other)) == set(xs) & set(ys)
    assert set(SymmetricDifference(first, other)) == set(xs) ^ set(ys)
    assert set(Union(first, other)) == set(xs) | set(ys)
    union = list(Union(first, other))
    assert len(union) == len(set(union))
    assert union[: len(first)] == list(first)