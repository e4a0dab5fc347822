"""Core data structures shared by the functional helpers."""

from purefn.core.enums import Purity
from purefn.core.models import InvocationRecord, PurityReport

__all__ = ["Purity", "InvocationRecord", "PurityReport"]
