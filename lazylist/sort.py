"""
Natural merge sort over lazy lists.

The input is cut into runs which are already in order: ascending runs
(ties count as ascending, which keeps the sort stable) are kept as is and
strictly descending runs are flipped.  Neighbouring runs are then merged
pairwise until only one is left.  Sorted or reverse sorted input is a
single run, so it costs one pass.

The merge itself is lazy, so the smallest element is available before
the rest of the list has been merged.
"""

import logging

from .node import Cons, Thunk, empty_list
from .ord import GT, compare_values

__all__ = ['sort', 'sort_by']

logger = logging.getLogger(__name__)


def _ascending_run(items):
    run = empty_list
    for x in reversed(items):
        run = Cons(x, run)
    return run


def _sequences(cmp, xs):
    runs = []
    while xs:
        a = xs.head
        xs = xs.tail
        if not xs:
            runs.append(Cons(a, empty_list))
            break

        b = xs.head
        xs = xs.tail
        if cmp(a, b) is GT:
            # Consing as we go reverses the run for free
            run = Cons(a, empty_list)
            a = b
            while xs and cmp(a, xs.head) is GT:
                run = Cons(a, run)
                a = xs.head
                xs = xs.tail
            runs.append(Cons(a, run))
        else:
            items = [a]
            a = b
            while xs and cmp(a, xs.head) is not GT:
                items.append(a)
                a = xs.head
                xs = xs.tail
            items.append(a)
            runs.append(_ascending_run(items))
    return runs


def _merge(cmp, xs, ys):
    if not xs:
        return ys
    if not ys:
        return xs
    if cmp(xs.head, ys.head) is GT:
        return Cons(ys.head, Thunk(lambda: _merge(cmp, xs, ys.tail)))
    return Cons(xs.head, Thunk(lambda: _merge(cmp, xs.tail, ys)))


def _merge_pairs(cmp, runs):
    merged = [_merge(cmp, a, b) for a, b in zip(runs[::2], runs[1::2])]
    if len(runs) % 2:
        merged.append(runs[-1])
    return merged


def _merge_all(cmp, runs):
    while len(runs) > 1:
        runs = _merge_pairs(cmp, runs)
    return runs[0]


def sort_by(cmp, xs):
    """
    Stably sort a finite lazy list with cmp, a function of two values
    returning an Ordering.  The input is left untouched.
    """
    if not xs:
        return xs
    runs = _sequences(cmp, xs)
    logger.debug(f'sort_by: merging {len(runs)} runs')
    return _merge_all(cmp, runs)


def sort(xs):
    return sort_by(compare_values, xs)
