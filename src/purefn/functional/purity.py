"""Properties that follow from purity: repeatable results and safe caching."""

import functools
import typing as tp

import jax
import numpy as np

from purefn.config import settings
from purefn.core.models import PurityReport
from purefn.logger import get_logger

__all__ = ["check_determinism", "memoize"]

_logger = get_logger(__name__)

_ARRAY_TYPES = (np.ndarray, jax.Array)


def _same_output(a: tp.Any, b: tp.Any) -> bool:
    if isinstance(a, _ARRAY_TYPES) or isinstance(b, _ARRAY_TYPES):
        return bool(np.array_equal(np.asarray(a), np.asarray(b)))
    return bool(a == b)


def check_determinism(
    fn: tp.Callable[..., tp.Any], *args: tp.Any, trials: int = 3, **kwargs: tp.Any
) -> PurityReport:
    """Call ``fn`` ``trials`` times with the same inputs and compare outputs.

    Outputs are compared with ``==``, or element by element for numpy and
    JAX arrays. The check is empirical: an impure function that happens to
    return equal values during the trials is reported as pure.

    Args:
        fn: Function under test.
        *args: Positional arguments passed on every call.
        trials: Number of calls, at least two.
        **kwargs: Keyword arguments passed on every call.

    Returns:
        A :class:`PurityReport` holding the distinct outputs seen.

    Raises:
        ValueError: If ``trials`` is below two.
    """
    if trials < 2:
        raise ValueError(f"trials must be at least 2, got {trials}")

    outputs: tp.List[tp.Any] = []
    for _ in range(trials):
        out = fn(*args, **kwargs)
        if not any(_same_output(out, seen) for seen in outputs):
            outputs.append(out)

    report = PurityReport(
        function=getattr(fn, "__qualname__", repr(fn)),
        trials=trials,
        outputs=outputs,
    )
    _logger.debug(
        "%s: %d distinct output(s) over %d trials -> %s",
        report.function,
        len(outputs),
        trials,
        report.verdict.value,
    )
    return report


def memoize(
    fn: tp.Optional[tp.Callable[..., tp.Any]] = None,
    maxsize: tp.Optional[int] = None,
) -> tp.Any:
    """Cache results of a pure function keyed on its arguments.

    Arguments must be hashable. ``maxsize`` defaults to
    ``settings.MEMO_MAXSIZE``; ``None`` there means an unbounded cache and
    an explicit ``0`` disables caching.
    The returned function exposes ``cache_info()`` and ``cache_clear()``.
    """
    if fn is None:
        return functools.partial(memoize, maxsize=maxsize)
    if not callable(fn):
        raise TypeError(f"memoize expects a callable, got {type(fn).__name__}")

    cached = functools.lru_cache(
        maxsize=settings.MEMO_MAXSIZE if maxsize is None else maxsize
    )(fn)
    name = getattr(fn, "__qualname__", repr(fn))

    @functools.wraps(fn)
    def wrapper(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        hits = cached.cache_info().hits
        result = cached(*args, **kwargs)
        if cached.cache_info().hits > hits:
            _logger.debug("cache hit for %s%r", name, args)
        return result

    wrapper.cache_info = cached.cache_info
    wrapper.cache_clear = cached.cache_clear
    return wrapper
