"""
Property checks over randomly generated finite lists.

Run with: pytest tests/test_properties.py --hypothesis-show-statistics
"""

from hypothesis import given, strategies as st

from lazylist import (
    lazy_list, from_iterable, to_list, take, drop, append,
    length, reverse, sort, sort_by, compare_values, flat_map, pure, then,
    compare, is_eq, cycle, index, LT, GT, EQ
)

values = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@given(values)
def test_round_trip(items):
    assert to_list(lazy_list(*items)) == items
    assert to_list(from_iterable(items)) == items
    xs = lazy_list(*items)
    assert lazy_list(*to_list(xs)) == xs

@given(values, st.integers(min_value=0, max_value=70))
def test_take_drop(items, n):
    xs = lazy_list(*items)
    assert append(take(n, xs), drop(n, xs)) == xs
    assert length(take(n, xs)) == min(n, len(items))

@given(values)
def test_reverse(items):
    xs = lazy_list(*items)
    assert to_list(reverse(xs)) == items[::-1]
    assert reverse(reverse(xs)) == xs

@given(values)
def test_sort_matches_sorted(items):
    assert to_list(sort(lazy_list(*items))) == sorted(items)

@given(st.lists(st.tuples(st.integers(0, 5), st.integers()), max_size=60))
def test_sort_stable(pairs):
    by_first = lambda a, b: compare_values(a[0], b[0])
    assert to_list(sort_by(by_first, lazy_list(*pairs))) == sorted(pairs, key=lambda p: p[0])

@given(values)
def test_monad(items):
    xs = lazy_list(*items)
    assert flat_map(pure, xs) == xs
    assert to_list(flat_map(lambda x: lazy_list(x, x + 1), xs)) == [
        y for x in items for y in (x, x + 1)
    ]

@given(values, values)
def test_then(first, second):
    xs, ys = lazy_list(*first), lazy_list(*second)
    assert to_list(then(xs, ys)) == second * len(first)

@given(values, values)
def test_compare(first, second):
    expected = LT if first < second else (GT if first > second else EQ)
    assert compare(lazy_list(*first), lazy_list(*second)) is expected
    assert is_eq(lazy_list(*first), lazy_list(*second)) == (first == second)

@given(st.lists(st.integers(), min_size=1, max_size=10), st.integers(0, 10000))
def test_cycle_index(items, n):
    assert index(cycle(lazy_list(*items)), n) == items[n % len(items)]
