"""Function composition."""

import typing as tp
from functools import reduce

__all__ = ["identity", "compose", "pipe"]

T = tp.TypeVar("T")


def identity(x: T) -> T:
    return x


def _check_callables(fns: tp.Sequence[tp.Any]) -> None:
    for position, fn in enumerate(fns):
        if not callable(fn):
            raise TypeError(
                f"argument {position} is not callable: {type(fn).__name__}"
            )


def compose(*fns: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Compose functions right-to-left: ``compose(f, g)(x) == f(g(x))``.

    The rightmost function receives the call's arguments as given; every other
    function receives the single result of its right neighbour. With no
    functions the result is :func:`identity`.

    Raises:
        TypeError: If any argument is not callable.
    """
    _check_callables(fns)
    if not fns:
        return identity

    *outer, inner = fns

    def composed(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        return reduce(lambda acc, fn: fn(acc), reversed(outer), inner(*args, **kwargs))

    composed.__name__ = "compose(" + ", ".join(
        getattr(fn, "__name__", repr(fn)) for fn in fns
    ) + ")"
    return composed


def pipe(*fns: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Compose functions left-to-right: ``pipe(g, f)(x) == f(g(x))``."""
    return compose(*reversed(fns))
