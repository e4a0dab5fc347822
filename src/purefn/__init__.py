"""purefn: pure functions, higher-order helpers, currying and composition."""

from purefn.core import InvocationRecord, Purity, PurityReport
from purefn.functional.composition import compose, identity, pipe
from purefn.functional.currying import curried_add, curry
from purefn.functional.higher_order import tap, with_log
from purefn.functional.impure import consume, get_id, set_secret
from purefn.functional.pure import add, duplicate, factorial, multiply, range_inclusive
from purefn.functional.purity import check_determinism, memoize

__version__ = "0.1.0"

__all__ = [
    "add",
    "duplicate",
    "range_inclusive",
    "multiply",
    "factorial",
    "get_id",
    "set_secret",
    "consume",
    "with_log",
    "tap",
    "curry",
    "curried_add",
    "identity",
    "compose",
    "pipe",
    "check_determinism",
    "memoize",
    "Purity",
    "InvocationRecord",
    "PurityReport",
]
