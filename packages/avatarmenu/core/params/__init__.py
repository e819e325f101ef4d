"""Avatar parameter scanning and reconciliation."""

from avatarmenu.core.params.loader import (
    load_definitions,
    load_parameter_map,
    load_saved_state,
    read_source_text,
)
from avatarmenu.core.params.models import (
    BoolValue,
    FloatValue,
    IntValue,
    ParameterDefinition,
    ParameterMap,
    ParameterType,
    ParameterValue,
    SavedEntry,
)
from avatarmenu.core.params.reconcile import apply_raw_value, reconcile
from avatarmenu.core.params.scanners import DefinitionScanner, SavedStateScanner

__all__ = [
    "BoolValue",
    "DefinitionScanner",
    "FloatValue",
    "IntValue",
    "ParameterDefinition",
    "ParameterMap",
    "ParameterType",
    "ParameterValue",
    "SavedEntry",
    "SavedStateScanner",
    "apply_raw_value",
    "load_definitions",
    "load_parameter_map",
    "load_saved_state",
    "read_source_text",
    "reconcile",
]
