from lazylist import *

from pytest import raises


def test_list_range():
    assert list_range(0, 10) == lazy_list(0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10)
    assert list_range(10, 0) == lazy_list(10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
    assert list_range(1, 1) == lazy_list(1)
    assert length(list_range(0, 10)) == 11

def test_list_range_by():
    assert list_range_by(0, 50, lambda x: x + 5) == lazy_list(0, 5, 10, 15, 20, 25, 30, 35, 40, 45, 50)
    assert list_range_by(10, 0, lambda x: x - 1) == lazy_list(10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
    assert list_range_by(0, 10, lambda x: x + 3) == lazy_list(0, 3, 6, 9)
    assert list_range_by(1, 1) == lazy_list(1)
    assert list_range_by(1, 1, lambda x: x * 100) == lazy_list(1)

def test_range_is_lazy():
    calls = []
    def step(x):
        calls.append(x)
        return x + 1

    xs = list_range_by(0, 1000, step)
    assert head(xs) == 0
    assert calls == []
    assert index(xs, 3) == 3
    assert calls == [0, 1, 2]

    # Forcing the same nodes again doesn't step again
    assert list(take(4, xs)) == [0, 1, 2, 3]
    assert calls == [0, 1, 2]

def test_list_inf():
    assert take(5, list_inf(3)) == lazy_list(3, 4, 5, 6, 7)
    assert index(list_inf(0), 500) == 500
    assert take(4, list_inf_by(1, lambda x: x * 3)) == lazy_list(1, 3, 9, 27)

def test_iterate():
    xs = iterate(lambda x: x * 2, 1)
    assert take(10, xs) == lazy_list(1, 2, 4, 8, 16, 32, 64, 128, 256, 512)
    assert index(xs, 10) == 1024

def test_repeat():
    xs = repeat(3)
    assert take(10, xs) == lazy_list(3, 3, 3, 3, 3, 3, 3, 3, 3, 3)
    assert index(xs, 100) == 3

def test_replicate():
    assert replicate(10, 3) == lazy_list(3, 3, 3, 3, 3, 3, 3, 3, 3, 3)
    assert replicate(0, 3) is empty_list
    assert replicate(-1, 3) is empty_list

def test_cycle():
    c = cycle(lazy_list(1, 2, 3))
    assert take(9, c) == lazy_list(1, 2, 3, 1, 2, 3, 1, 2, 3)
    assert index(c, 100) == 2
    assert cycle(lazy_list(7))[1000] == 7

    with raises(EmptyListError): cycle(empty_list)

def test_cycle_shares_nodes():
    c = cycle(lazy_list(1, 2, 3))
    assert drop(3, c) is c
    for k in range(3):
        assert drop(k, c) is drop(k + 3, c) is drop(k + 300, c)

def test_cycle_lazy_input():
    pulled = []
    def gen():
        for x in 'abc':
            pulled.append(x)
            yield x

    c = cycle(from_iterable(gen()))
    assert pulled == ['a']
    assert to_string(take(7, c)) == 'abcabca'
    assert pulled == ['a', 'b', 'c']
    assert index(c, 10 ** 5) == 'b'

def test_list_range_filtered():
    evens = lambda x: x % 2 == 0
    assert list_range_by(0, 100, lambda x: x + 5, evens) == list_range_by(0, 100, lambda x: x + 10)
    assert list_range_by(1, 9, filt=lambda x: x > 100) is empty_list
    assert list_filter(1, 30, evens) == list_range_by(2, 30, lambda x: x + 2)
    assert list_filter(10, 0, evens) == lazy_list(10, 8, 6, 4, 2)

def test_until():
    assert until(lambda x: x > 10, lambda x: x + 1, 1) == 11
    assert until(lambda x: x > 10, lambda x: x + 1, 50) == 50
    assert until(lambda x: x >= 1000, lambda x: x * 2, 1) == 1024
