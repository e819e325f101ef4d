"""Parameter data models."""

from avatarmenu.core.params.models.enums import ParameterType, ScanEvent, ScanState
from avatarmenu.core.params.models.records import (
    ParameterDefinition,
    SavedEntry,
    normalize_name,
)
from avatarmenu.core.params.models.values import (
    BoolValue,
    FloatValue,
    IntValue,
    ParameterMap,
    ParameterValue,
    default_value,
)

__all__ = [
    "BoolValue",
    "FloatValue",
    "IntValue",
    "ParameterDefinition",
    "ParameterMap",
    "ParameterType",
    "ParameterValue",
    "SavedEntry",
    "ScanEvent",
    "ScanState",
    "default_value",
    "normalize_name",
]
