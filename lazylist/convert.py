from .node import Cons, Thunk, empty_list

__all__ = ['lazy_list', 'from_iterable', 'to_list', 'from_string', 'to_string']


def lazy_list(*values):
    acc = empty_list
    for value in reversed(values):
        acc = Cons(value, acc)
    return acc


def _pull(iterator):
    try:
        value = next(iterator)
    except StopIteration:
        return empty_list
    return Cons(value, Thunk(lambda: _pull(iterator)))


def from_iterable(iterable):
    """
    Wrap any iterable, generators included, in a lazy list.  Each node
    pulls the next item the first time its tail is looked at, so infinite
    generators are fine.
    """
    return _pull(iter(iterable))


def to_list(xs):
    return list(xs)


def from_string(string):
    return lazy_list(*string)


def to_string(xs):
    return ''.join(xs)
