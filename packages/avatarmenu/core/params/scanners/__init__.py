"""Lenient line/fragment scanners for avatar parameter files."""

from avatarmenu.core.params.scanners.base import TRANSITIONS, TwoSlotScanner, next_state
from avatarmenu.core.params.scanners.definition import DefinitionScanner, scan_definitions
from avatarmenu.core.params.scanners.saved_state import (
    SavedStateScanner,
    parse_f32,
    scan_saved_state,
)

__all__ = [
    "TRANSITIONS",
    "DefinitionScanner",
    "SavedStateScanner",
    "TwoSlotScanner",
    "next_state",
    "parse_f32",
    "scan_definitions",
    "scan_saved_state",
]
