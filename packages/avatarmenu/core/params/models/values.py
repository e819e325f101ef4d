"""Typed parameter values and the immutable parameter map."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from avatarmenu.core.params.models.enums import ParameterType


class FloatValue(BaseModel):
    """Float parameter. Conceptually in [0, 1]; range is enforced by the UI layer."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["float"] = "float"
    value: float = 0.0

    @property
    def type(self) -> ParameterType:
        return ParameterType.FLOAT


class IntValue(BaseModel):
    """Unsigned 8-bit integer parameter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["int"] = "int"
    value: int = Field(default=0, ge=0, le=255)

    @property
    def type(self) -> ParameterType:
        return ParameterType.INT


class BoolValue(BaseModel):
    """Boolean parameter."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["bool"] = "bool"
    value: bool = False

    @property
    def type(self) -> ParameterType:
        return ParameterType.BOOL


ParameterValue = Annotated[FloatValue | IntValue | BoolValue, Field(discriminator="kind")]


def default_value(ptype: ParameterType) -> ParameterValue:
    """Return the zero value for a parameter type."""
    if ptype is ParameterType.FLOAT:
        return FloatValue()
    if ptype is ParameterType.INT:
        return IntValue()
    return BoolValue()


class ParameterMap(Mapping[str, ParameterValue]):
    """Read-only snapshot mapping parameter name to typed value.

    Built once per load and never mutated; consumers that need to edit
    values keep their own working copy.

    Example:
        >>> pmap = ParameterMap({"Jump": BoolValue(value=True)})
        >>> pmap["Jump"].value
        True
    """

    __slots__ = ("_values",)

    def __init__(
        self, values: Mapping[str, ParameterValue] | Iterable[tuple[str, ParameterValue]] = ()
    ) -> None:
        self._values: dict[str, ParameterValue] = dict(values)

    def __getitem__(self, name: str) -> ParameterValue:
        return self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ParameterMap({self._values!r})"

    def sorted_items(self, prefix: str = "") -> list[tuple[str, ParameterValue]]:
        """Name-sorted (name, value) pairs whose name starts with ``prefix``."""
        return sorted(
            (item for item in self._values.items() if item[0].startswith(prefix)),
            key=lambda item: item[0],
        )

    def to_dict(self) -> dict[str, ParameterValue]:
        """Return a mutable copy of the underlying mapping."""
        return dict(self._values)
