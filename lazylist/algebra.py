"""
Structural operations over lazy lists.

Everything that builds a list builds it lazily: the head of the result is
computed right away, and the rest sits behind a Thunk until someone asks
for it.  So these work on infinite lists as long as the caller only looks
at a finite part of the result.

Operations which walk along a list without building one (length, index,
drop...) are written as loops so long lists don't blow the stack.
"""

import functools

from .node import Cons, Thunk, empty_list
from .ord import EQ, LT, GT, compare_values
from .errors import EmptyListError, OutOfRangeError

__all__ = [
    'last', 'init', 'length', 'index',
    'map', 'filter', 'reverse', 'append', 'concat',
    'take', 'drop', 'take_while', 'drop_while',
    'foldr', 'foldl', 'fmap', 'pure', 'ap', 'flat_map', 'then', 'traverse',
    'is_eq', 'compare'
]


def last(xs):
    if not xs:
        raise EmptyListError.empty(operation='last')
    while rest := xs.tail:
        xs = rest
    return xs.head


def init(xs):
    if not xs:
        raise EmptyListError.empty(operation='init')
    rest = xs.tail
    if not rest:
        return empty_list
    return Cons(xs.head, Thunk(lambda: init(rest)))


def length(xs):
    n = 0
    while xs:
        n += 1
        xs = xs.tail
    return n


def index(xs, n):
    if n < 0:
        raise OutOfRangeError.out_of_range(operation='index', index=n)

    i = n
    while xs and i > 0:
        xs = xs.tail
        i -= 1

    if not xs:
        raise OutOfRangeError.out_of_range(operation='index', index=n)
    return xs.head


def map(f, xs):
    if not xs:
        return empty_list
    return Cons(f(xs.head), Thunk(lambda: map(f, xs.tail)))


def filter(p, xs):
    # Never terminates on an infinite list with no matches, and that's fine
    while xs and not p(xs.head):
        xs = xs.tail
    if not xs:
        return empty_list
    return Cons(xs.head, Thunk(lambda: filter(p, xs.tail)))


def reverse(xs):
    acc = empty_list
    while xs:
        acc = Cons(xs.head, acc)
        xs = xs.tail
    return acc


def append(xs, ys):
    if not xs:
        return ys
    if not ys:
        return xs
    return Cons(xs.head, Thunk(lambda: append(xs.tail, ys)))


def _concat(xs, node):
    # node is the outer list node that xs came from.  Its tail is only
    # forced once xs has run out.
    while not xs:
        node = node.tail
        if not node:
            return empty_list
        xs = node.head
    return Cons(xs.head, Thunk(lambda: _concat(xs.tail, node)))


def concat(xss):
    if not xss:
        return empty_list
    return _concat(xss.head, xss)


def take(n, xs):
    if n <= 0 or not xs:
        return empty_list
    if n == 1:
        # Don't touch the tail of xs at all
        return Cons(xs.head, empty_list)
    return Cons(xs.head, Thunk(lambda: take(n - 1, xs.tail)))


def drop(n, xs):
    while n > 0 and xs:
        xs = xs.tail
        n -= 1
    return xs


def take_while(p, xs):
    if not xs or not p(xs.head):
        return empty_list
    return Cons(xs.head, Thunk(lambda: take_while(p, xs.tail)))


def drop_while(p, xs):
    while xs and p(xs.head):
        xs = xs.tail
    return xs


def foldr(f, acc, xs):
    """
    Right fold: f(x0, f(x1, ... f(xn, acc))).

    Needs the whole list before f is ever called, so xs must be finite.
    """
    for x in reversed(tuple(xs)):
        acc = f(x, acc)
    return acc


def foldl(f, acc, xs):
    return functools.reduce(f, xs, acc)


def fmap(f, xs):
    return map(f, xs)


def pure(value):
    return Cons(value, empty_list)


def ap(fs, xs):
    # Every value under the first function, then every value under the
    # second one, and so on
    return flat_map(lambda f: map(f, xs), fs)


def flat_map(f, xs):
    return concat(map(f, xs))


def then(xs, ys):
    return flat_map(lambda _: ys, xs)


def traverse(f, xs):
    """
    Apply f (returning a list) to each element and collect every way of
    picking one result per element, as a list of lists.
    """
    def step(x, rests):
        return ap(map(lambda y: lambda zs: Cons(y, zs), f(x)), rests)
    return foldr(step, pure(empty_list), xs)


def is_eq(xs, ys):
    while xs and ys:
        if xs is ys:
            return True
        if xs.head != ys.head:
            return False
        xs, ys = xs.tail, ys.tail
    return not xs and not ys


def compare(xs, ys):
    while True:
        if not xs:
            return EQ if not ys else LT
        if not ys:
            return GT
        if xs is ys:
            return EQ

        order = compare_values(xs.head, ys.head)
        if order is not EQ:
            return order
        xs, ys = xs.tail, ys.tail
