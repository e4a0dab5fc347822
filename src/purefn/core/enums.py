"""Enumerations describing function behaviour."""

from enum import Enum


class Purity(Enum):
    """Verdict of an empirical purity check."""

    PURE = "pure"
    IMPURE = "impure"
