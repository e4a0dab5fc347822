"""Higher-order wrappers that add behaviour without touching a function body."""

import functools
import logging
import typing as tp

from purefn.config import settings
from purefn.core.models import InvocationRecord
from purefn.logger import get_logger

__all__ = ["with_log", "tap"]

T = tp.TypeVar("T")

_logger = get_logger(__name__)


def with_log(
    fn: tp.Optional[tp.Callable[..., T]] = None,
    logger: tp.Optional[logging.Logger] = None,
    level: int = logging.INFO,
) -> tp.Any:
    """Wrap ``fn`` so every call is logged before it is delegated.

    The wrapper returns exactly what ``fn`` returns. The result is logged at
    DEBUG when ``settings.LOG_RESULTS`` is enabled, and exceptions are logged
    with their traceback and re-raised unchanged. The most recent call is kept
    on ``wrapper.last_call`` as an :class:`InvocationRecord`.

    Works both as ``with_log(fn)`` and as a decorator, with or without
    keyword arguments::

        @with_log(level=logging.DEBUG)
        def add(a, b):
            return a + b

    Args:
        fn: Function to wrap.
        logger: Logger receiving the messages. Defaults to the package logger.
        level: Level of the invocation message.

    Raises:
        TypeError: If ``fn`` is not callable.
    """
    if fn is None:
        return functools.partial(with_log, logger=logger, level=level)
    if not callable(fn):
        raise TypeError(f"with_log expects a callable, got {type(fn).__name__}")

    log = logger or _logger
    name = getattr(fn, "__qualname__", repr(fn))

    @functools.wraps(fn)
    def wrapper(*args: tp.Any, **kwargs: tp.Any) -> T:
        record = InvocationRecord(function=name, args=args, kwargs=kwargs)
        log.log(level, "Calling %s", record.describe())
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            wrapper.last_call = record.model_copy(update={"error": repr(exc)})
            log.exception("%s raised %r", name, exc)
            raise
        wrapper.last_call = record.model_copy(update={"result": result})
        if settings.LOG_RESULTS:
            log.debug("%s returned %r", name, result)
        return result

    wrapper.last_call = None
    return wrapper


def tap(effect: tp.Callable[[T], tp.Any]) -> tp.Callable[[T], T]:
    """Return a function that runs ``effect(x)`` and hands ``x`` back.

    Lets a side effect such as printing sit between stages of a
    :func:`purefn.functional.composition.pipe` without altering the value.
    """

    def _tap(x: T) -> T:
        effect(x)
        return x

    return _tap
