"""Package-wide logger configuration for purefn.

A single stdout handler is attached to the ``purefn`` logger and every module
logs through a child of it (``purefn.higher_order``, ``purefn.purity``...), so
one call to :func:`set_level` adjusts the whole package. The handler purefn
installs is tagged, which keeps setup idempotent even when other tooling
(pytest's log capture, for instance) has already attached handlers of its own.
"""

import logging
import sys
import typing as tp

from purefn.config import settings

__all__ = ["logger", "setup_logger", "get_logger", "set_level", "package_handler"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_TAG = "_purefn_handler"


def package_handler(target: logging.Logger) -> tp.Optional[logging.Handler]:
    """The handler installed by :func:`setup_logger` on ``target``, if any."""
    for handler in target.handlers:
        if getattr(handler, _HANDLER_TAG, False):
            return handler
    return None


def setup_logger(
    name: str = "purefn",
    level: tp.Optional[str] = None,
    format_string: tp.Optional[str] = None,
    stream: tp.Optional[tp.TextIO] = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name (the package name for the root purefn logger)
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Falls back
            to ``settings.LOG_LEVEL``.
        format_string: Custom format string
        stream: Destination of the records, ``sys.stdout`` by default

    Returns:
        Configured logger instance
    """
    target = logging.getLogger(name)
    if package_handler(target) is not None:
        return target

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        logging.Formatter(fmt=format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)
    )
    setattr(handler, _HANDLER_TAG, True)

    target.addHandler(handler)
    target.setLevel((level or settings.LOG_LEVEL).upper())
    target.propagate = False
    return target


def get_logger(module: str) -> logging.Logger:
    """Child of the package logger, e.g. ``purefn.higher_order``."""
    return logger.getChild(module.rsplit(".", 1)[-1])


def set_level(level: tp.Union[str, int]) -> None:
    """Change the level of the package logger and thus of every child."""
    logger.setLevel(level.upper() if isinstance(level, str) else level)


logger = setup_logger()
