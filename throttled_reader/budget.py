import operator
from typing import NamedTuple, Union


class _Unlimited(object):
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "Unlimited"

    def __reduce__(self):
        return (_Unlimited, ())


UNLIMITED = _Unlimited()


class Limited(NamedTuple):
    remaining: int

    @property
    def exhausted(self) -> bool:
        return self.remaining == 0

    def spend(self) -> 'Limited':
        if self.exhausted:
            raise ValueError("Cannot spend from an exhausted budget.")
        return Limited(self.remaining - 1)


Budget = Union[_Unlimited, Limited]


def limited(n: int) -> Limited:
    """
    Build a validated Limited budget.

    :raises TypeError: n is not an integer (bools included).
    :raises ValueError: n is negative.
    """
    if isinstance(n, bool):
        raise TypeError(f"Read limit must be an integer, got {n!r}")
    n = operator.index(n)
    if n < 0:
        raise ValueError(f"Read limit must be non-negative, got {n!r}")
    return Limited(n)
