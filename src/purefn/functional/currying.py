"""Currying and partial application.

A curried function collects its arguments across successive calls and runs
the original once enough have arrived. Every call returns a fresh partially
applied function, so a partial result can be stored and reused freely::

    >>> from purefn.functional.currying import curried_add
    >>> add3 = curried_add(3)
    >>> add3(4), add3(10)
    (7, 13)
"""

import functools
import inspect
import typing as tp

from .pure import add

__all__ = ["curry", "curried_add"]


def _required_positional(fn: tp.Callable[..., tp.Any]) -> int:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"cannot infer arity of {fn!r}; pass arity explicitly"
        ) from exc
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
        and p.default is p.empty
    )


def curry(
    fn: tp.Callable[..., tp.Any], arity: tp.Optional[int] = None
) -> tp.Callable[..., tp.Any]:
    """Curry ``fn`` over its first ``arity`` positional arguments.

    Args:
        fn: Function to curry.
        arity: Number of positional arguments to collect before calling
            ``fn``. Defaults to the count of required positional parameters.

    Returns:
        A function accepting one or more of the remaining arguments per call.

    Raises:
        TypeError: If ``fn`` is not callable, or a curried call receives no
            arguments or more than remain.
        ValueError: If ``arity`` is below one or cannot be inferred.
    """
    if not callable(fn):
        raise TypeError(f"curry expects a callable, got {type(fn).__name__}")
    if arity is None:
        arity = _required_positional(fn)
    if arity < 1:
        raise ValueError(f"arity must be at least 1, got {arity}")

    name = getattr(fn, "__qualname__", repr(fn))

    def collect(collected: tp.Tuple[tp.Any, ...]) -> tp.Callable[..., tp.Any]:
        remaining = arity - len(collected)

        @functools.wraps(fn)
        def curried(*args: tp.Any) -> tp.Any:
            if not args:
                raise TypeError(
                    f"{name} curried call needs at least one argument"
                )
            if len(args) > remaining:
                raise TypeError(
                    f"{name} expected at most {remaining} more "
                    f"argument(s), got {len(args)}"
                )
            so_far = collected + args
            if len(so_far) == arity:
                return fn(*so_far)
            return collect(so_far)

        curried.remaining = remaining
        return curried

    return collect(())


curried_add = curry(add)
