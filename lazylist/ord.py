import enum

__all__ = ['Ordering', 'LT', 'GT', 'EQ', 'compare_values']


class Ordering(enum.Enum):
    LT = '<'
    GT = '>'
    EQ = '='

    def __str__(self):
        return self.name

    def invert(self):
        if self is Ordering.LT:
            return Ordering.GT
        if self is Ordering.GT:
            return Ordering.LT
        return self


LT = Ordering.LT
GT = Ordering.GT
EQ = Ordering.EQ


def compare_values(a, b):
    # Plain < and == so anything Python can order works, lazy lists included
    if a == b:
        return EQ
    return LT if a < b else GT
