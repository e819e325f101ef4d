"""Shared enums for parameter models.

Use enums for categorical values that are reused, filtered, or passed
between scanning, reconciliation and transport components.
"""

from __future__ import annotations

from enum import Enum


class ParameterType(str, Enum):
    """Declared type of an avatar parameter."""

    FLOAT = "float"
    INT = "int"
    BOOL = "bool"

    @classmethod
    def parse(cls, declared: str) -> ParameterType | None:
        """Parse a declared type string case-insensitively.

        Returns None for anything outside float/int/bool.
        """
        try:
            return cls(declared.lower())
        except ValueError:
            return None


class ScanState(str, Enum):
    """State of a two-slot record scanner after consuming a fragment."""

    AWAITING_NAME = "awaiting_name"
    HAVE_NAME = "have_name"
    EMIT_READY = "emit_ready"


class ScanEvent(str, Enum):
    """What a single fragment matched."""

    NONE = "none"
    NAME = "name"
    SECOND = "second"
    NAME_AND_SECOND = "name_and_second"

    @classmethod
    def classify(cls, has_name: bool, has_second: bool) -> ScanEvent:
        if has_name and has_second:
            return cls.NAME_AND_SECOND
        if has_name:
            return cls.NAME
        if has_second:
            return cls.SECOND
        return cls.NONE
