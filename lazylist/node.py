from .errors import EmptyListError

__all__ = [
    'LazyList', 'Cons', 'Nil', 'Thunk', 'empty_list',
    'cons', 'head', 'tail', 'is_empty', 'is_list'
]


class Thunk:
    """
    A deferred tail: a zero argument rule producing the rest of a list.

    A thunk only ever sits in the tail slot of a Cons, which calls
    solidify() at most once and keeps the result in place of the thunk.
    """
    __slots__ = '_rule',

    def __init__(self, rule):
        self._rule = rule

    def solidify(self):
        return self._rule()

    def __repr__(self):
        return '...'

    def __bool__(self):
        raise ValueError('Thunk must be solidified')


class LazyList:
    __slots__ = ()
    __hash__ = None

    # Indirectly implemented as static method because it seems bound
    # generators retain a reference to self even if you reassign it, so
    # nodes would not get GC'd even if they are no longer needed.
    @staticmethod
    def _iter(ll):
        while ll:
            yield ll.head
            ll = ll.tail

    def __iter__(self):
        return self._iter(self)

    def __getitem__(self, n):
        from .algebra import index
        if not isinstance(n, int):
            raise TypeError(f'lazy list indices must be integers, not {type(n).__name__}')
        return index(self, n)

    def __add__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.mappend(other)

    def __eq__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.is_eq(other)

    def __lt__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.is_less_than_or_equal(other)

    def __gt__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other):
        if not isinstance(other, LazyList):
            return NotImplemented
        return self.is_greater_than_or_equal(other)

    # Eq / Ord
    def is_eq(self, other):
        from .algebra import is_eq
        return is_eq(self, other)

    def compare(self, other):
        from .algebra import compare
        return compare(self, other)

    def is_less_than(self, other):
        from .ord import LT
        return self.compare(other) is LT

    def is_less_than_or_equal(self, other):
        from .ord import GT
        return self.compare(other) is not GT

    def is_greater_than(self, other):
        from .ord import GT
        return self.compare(other) is GT

    def is_greater_than_or_equal(self, other):
        from .ord import LT
        return self.compare(other) is not LT

    # Monoid
    def mempty(self):
        return empty_list

    def mappend(self, other):
        from .algebra import append
        return append(self, other)

    # Foldable / Traversable
    def foldr(self, f, acc):
        from .algebra import foldr
        return foldr(f, acc, self)

    def traverse(self, f):
        from .algebra import traverse
        return traverse(f, self)

    # Functor / Applicative / Monad
    def fmap(self, f):
        from .algebra import fmap
        return fmap(f, self)

    def pure(self, value):
        from .algebra import pure
        return pure(value)

    def ap(self, values):
        from .algebra import ap
        return ap(self, values)

    def flat_map(self, f):
        from .algebra import flat_map
        return flat_map(f, self)

    def then(self, other):
        from .algebra import then
        return then(self, other)


class Cons(LazyList):
    __slots__ = 'head', '_tail'
    __match_args__ = 'head', 'tail'

    def __init__(self, head, tail):
        self.head = head
        self._tail = tail

    @property
    def tail(self):
        if isinstance(self._tail, Thunk):
            self._tail = self._tail.solidify()
        return self._tail

    @property
    def forced(self):
        return not isinstance(self._tail, Thunk)

    def __repr__(self):
        # Only show what has already been computed, and stop at the first
        # node we have seen before since cycles loop back on themselves.
        items = []
        seen = set()
        node = self
        while isinstance(node, Cons):
            if id(node) in seen:
                items.append('...')
                break
            seen.add(id(node))
            items.append(repr(node.head))
            if not node.forced:
                items.append('...')
                break
            node = node._tail
        return f'lazy_list({", ".join(items)})'

    def __bool__(self):
        return True


class Nil(LazyList):
    __slots__ = ()
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def head(self):
        raise EmptyListError.empty(operation='head')

    @property
    def tail(self):
        raise EmptyListError.empty(operation='tail')

    forced = True

    def __repr__(self):
        return 'empty_list'

    def __bool__(self):
        return False


empty_list = Nil()


def cons(x, xs):
    return Cons(x, xs)

def head(xs):
    return xs.head

def tail(xs):
    return xs.tail

def is_empty(xs):
    return xs is empty_list

def is_list(a):
    return isinstance(a, LazyList)
