"""Data models recorded by the functional helpers.

The models are plain Pydantic v2 containers. They store arbitrary Python
values (arguments and results of user functions), so validation is limited to
the metadata fields: names, counts and verdicts.
"""

import datetime as dt
import typing as tp

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import Purity

__all__ = ["InvocationRecord", "PurityReport"]


class InvocationRecord(BaseModel):
    """A single call observed by :func:`purefn.functional.higher_order.with_log`.

    Attributes:
        function: Qualified name of the wrapped function.
        args: Positional arguments of the call.
        kwargs: Keyword arguments of the call.
        result: Returned value, ``None`` when the call raised.
        error: ``repr`` of the raised exception, if any.
        called_at: UTC timestamp taken before the call.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    function: str = Field(..., description="Qualified name of the wrapped function.")
    args: tp.Tuple[tp.Any, ...] = Field(default_factory=tuple)
    kwargs: tp.Dict[str, tp.Any] = Field(default_factory=dict)
    result: tp.Any = None
    error: tp.Optional[str] = None
    called_at: dt.datetime = Field(
        default_factory=lambda: dt.datetime.now(dt.timezone.utc)
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def succeeded(self) -> bool:
        return self.error is None

    def describe(self) -> str:
        """Render the call the way it would be written in source."""
        parts = [repr(a) for a in self.args]
        parts += [f"{k}={v!r}" for k, v in self.kwargs.items()]
        return f"{self.function}({', '.join(parts)})"


class PurityReport(BaseModel):
    """Outcome of calling a function repeatedly with identical inputs.

    A ``PURE`` verdict only means no differing output was observed across
    ``trials`` calls; it cannot rule out hidden side effects.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    function: str
    trials: int = Field(..., ge=2)
    outputs: tp.List[tp.Any] = Field(
        ..., description="Distinct outputs in the order they were first seen."
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def verdict(self) -> Purity:
        return Purity.PURE if len(self.outputs) == 1 else Purity.IMPURE
