"""
Square roots by Newton-Raphson over an infinite list of approximations,
after "Why Functional Programming Matters" (Hughes).

iterate() produces the never ending list of better and better guesses,
and within() / relative() decide how far along it to look.
"""

from .generators import iterate
from .algebra import index, drop

__all__ = ['sqrt', 'relative_sqrt', 'within', 'relative']


def _next_guess(n, x):
    return (x + n / x) / 2


def _approximations(n, a0):
    return iterate(lambda x: _next_guess(n, x), a0)


def within(eps, approxs):
    while True:
        a = index(approxs, 0)
        b = index(approxs, 1)
        if abs(a - b) <= eps:
            return b
        approxs = drop(1, approxs)


# Better for very large and very small numbers
def relative(eps, approxs):
    while True:
        a = index(approxs, 0)
        b = index(approxs, 1)
        if abs(a - b) <= eps * abs(b):
            return b
        approxs = drop(1, approxs)


def sqrt(n, a0=1.0, eps=1e-10):
    if n == 0:
        return 0.0
    return within(eps, _approximations(n, a0))


def relative_sqrt(n, a0=1.0, eps=1e-10):
    # Guesses would shrink all the way to 0.0 and divide by it
    if n == 0:
        return 0.0
    return relative(eps, _approximations(n, a0))
