"""Pure building blocks.

Every function here returns a value determined solely by its explicit
arguments and touches nothing outside its own local scope. They are the
reference examples for the rest of the package: ``factorial`` is built by
composing ``range_inclusive`` with ``multiply``, ``add`` is the function the
currying and logging helpers are demonstrated on.

Examples:
    >>> from purefn.functional.pure import add, factorial, range_inclusive
    >>> add(3, 4)
    7
    >>> range_inclusive(1, 5)
    [1, 2, 3, 4, 5]
    >>> factorial(6)
    720
"""

import operator
import typing as tp
from functools import reduce

__all__ = [
    "add",
    "duplicate",
    "range_inclusive",
    "multiply",
    "factorial",
]

Number = tp.Union[int, float]


def add(a: Number, b: Number) -> Number:
    """Return ``a + b``."""
    return a + b


def duplicate(text: str, times: int) -> str:
    """Repeat ``text`` ``times`` times.

    Args:
        text: String to repeat.
        times: Number of copies, zero yields an empty string.

    Raises:
        ValueError: If ``times`` is negative.
    """
    if times < 0:
        raise ValueError(f"times must be non-negative, got {times}")
    return text * times


def range_inclusive(start: int, end: int) -> tp.List[int]:
    """Integers from ``start`` to ``end`` with both ends included.

    An empty list is returned when ``start > end``.
    """
    return list(range(start, end + 1))


def multiply(values: tp.Iterable[Number]) -> Number:
    """Product of ``values``; the empty product is ``1``."""
    return reduce(operator.mul, values, 1)


def factorial(n: int) -> int:
    """Compute ``n!`` as the product of ``range_inclusive(1, n)``.

    Raises:
        ValueError: If ``n`` is negative.
    """
    if n < 0:
        raise ValueError(f"factorial is undefined for negative n, got {n}")
    return multiply(range_inclusive(1, n))
