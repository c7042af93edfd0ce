def _message(m):
    @classmethod
    def builder(cls, *args, **format_vars):
        return cls(m.format(**format_vars), *args)
    return builder

class LazyListError(Exception):
    pass


class EmptyListError(LazyListError):
    empty = _message('{operation}: empty list')

# IndexError too, for xs[n]
class OutOfRangeError(LazyListError, IndexError):
    out_of_range = _message('{operation}: index {index} out of range')
