import logging

from .node import Cons, Thunk, empty_list, cons
from .algebra import take, filter as filter_list
from .errors import EmptyListError

__all__ = [
    'list_range', 'list_range_by', 'list_filter', 'list_inf', 'list_inf_by',
    'iterate', 'repeat', 'replicate', 'cycle', 'until'
]

logger = logging.getLogger(__name__)


def _unfold(x, step, within):
    def rest():
        nxt = step(x)
        return _unfold(nxt, step, within) if within(nxt) else empty_list
    return Cons(x, Thunk(rest))


def _forever(x):
    return True


def list_range_by(start, end, step=None, filt=None):
    """
    Build a lazy list from start towards end, applying step to get each
    successive value.

    Ascending ranges keep every value up to and including end, while
    descending ranges stop before reaching end:
        list_range_by(0, 50, lambda x: x + 5)   # 0, 5, ..., 50
        list_range_by(10, 0, lambda x: x - 1)   # 10, 9, ..., 1
    If start == end the result is a singleton no matter what step does.
    Only values passing filt are kept when it is given.
    """
    xs = _range(start, end, step)
    return xs if filt is None else filter_list(filt, xs)


def _range(start, end, step):
    if start == end:
        return cons(start, empty_list)

    if start < end:
        if step is None:
            step = lambda x: x + 1
        return _unfold(start, step, lambda x: x <= end)

    if step is None:
        step = lambda x: x - 1
    return _unfold(start, step, lambda x: x > end)


def list_range(start, end):
    return list_range_by(start, end)


def list_filter(start, end, filt):
    return list_range_by(start, end, filt=filt)


def list_inf_by(start, step):
    return _unfold(start, step, _forever)


def list_inf(start):
    return list_inf_by(start, lambda x: x + 1)


def iterate(f, x):
    """x, f(x), f(f(x)), ..."""
    return list_inf_by(x, f)


def repeat(x):
    return cons(x, iterate(lambda a: a, x))


def replicate(n, x):
    return take(n, repeat(x))


def cycle(xs):
    """
    Repeat a finite list forever.

    The first pass copies the nodes of xs as they are demanded, and the
    last copy's tail is the first copy, so every later pass walks over
    the very same nodes instead of computing new ones.
    """
    if not xs:
        raise EmptyListError.empty(operation='cycle')

    def period(ys):
        if not ys:
            logger.debug('cycle wrapped around to its first node')
            return first
        return Cons(ys.head, Thunk(lambda: period(ys.tail)))

    first = Cons(xs.head, Thunk(lambda: period(xs.tail)))
    return first


def until(p, f, x):
    """Apply f to x until p holds, eg until(lambda x: x > 10, inc, 1) == 11"""
    while not p(x):
        x = f(x)
    return x
