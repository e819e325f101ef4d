"""Raw records produced by the definition and saved-state scanners."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from avatarmenu.core.params.models.enums import ParameterType


def normalize_name(name: str) -> str:
    """Turn a human-readable parameter name into an addressable identifier."""
    return name.replace(" ", "_")


class ParameterDefinition(BaseModel):
    """A parameter name paired with the type string declared for it.

    The declared string is kept verbatim; ``type`` is None when it is not
    one of float/int/bool, in which case reconciliation drops the parameter.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    declared_type: str

    @property
    def type(self) -> ParameterType | None:
        return ParameterType.parse(self.declared_type)


class SavedEntry(BaseModel):
    """Last known numeric value of a parameter, regardless of its real type."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    raw_value: float
