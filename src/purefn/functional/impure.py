"""Impure counter-examples.

These functions are kept to show what purity rules out: ``get_id`` reads a
module-level mutable value, so the same argument can yield different results
over time, and ``consume`` iterates only to trigger side effects.
"""

import typing as tp

__all__ = ["SECRET", "get_id", "set_secret", "consume"]

T = tp.TypeVar("T")

SECRET = "s3cr3t"


def get_id(user: str) -> str:
    """Build an id for ``user`` from the current module ``SECRET``."""
    return f"{user}:{SECRET}"


def set_secret(value: str) -> str:
    """Replace ``SECRET`` and return the previous value."""
    global SECRET
    previous, SECRET = SECRET, value
    return previous


def consume(iterable: tp.Iterable[T], effect: tp.Callable[[T], tp.Any]) -> None:
    """Force iteration over ``iterable`` running ``effect`` on every item.

    Whatever ``effect`` returns is discarded.
    """
    for item in iterable:
        effect(item)
