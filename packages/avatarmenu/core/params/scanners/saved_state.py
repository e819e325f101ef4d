"""Scanner for local avatar data files (saved parameter values).

The saved state is single-line JSON such as
``{"animationParameters":[{"name":"VRCEmote","value":0.0},...],...}``.
It is split on commas so that each record spans a name fragment and a value
fragment.
"""

from __future__ import annotations

import math
import re

from avatarmenu.core.params.models.records import SavedEntry, normalize_name
from avatarmenu.core.params.scanners.base import TwoSlotScanner
from avatarmenu.core.utils.math import to_f32

_NAME_PATTERN = re.compile(r'\{"name":"(.+)"')
_VALUE_PATTERN = re.compile(r'"value":(.+)\}')
_FLOAT_TOKEN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity)",
    re.IGNORECASE,
)


def parse_f32(token: str) -> float | None:
    """Parse a bare numeric token as a 32-bit float.

    Returns None for anything that is not a plain decimal or infinity literal,
    including NaN, padded tokens and digit separators.

    Example:
        >>> parse_f32("1.0")
        1.0
        >>> parse_f32("abc") is None
        True
    """
    if _FLOAT_TOKEN.fullmatch(token) is None:
        return None
    value = to_f32(float(token))
    if math.isnan(value):
        return None
    return value


class SavedStateScanner(TwoSlotScanner[float, SavedEntry]):
    """Extract (name, raw value) pairs from saved-state text.

    Example:
        >>> SavedStateScanner().scan('[{"name":"Jump","value":1.0}]')
        [SavedEntry(name='Jump', raw_value=1.0)]
    """

    record_kind = "saved entry"

    def split(self, text: str) -> list[str]:
        return text.split(",")

    def match_name(self, fragment: str) -> str | None:
        match = _NAME_PATTERN.search(fragment)
        if match is None:
            return None
        return normalize_name(match.group(1))

    def match_second(self, fragment: str) -> float | None:
        match = _VALUE_PATTERN.search(fragment)
        if match is None:
            return None
        return parse_f32(match.group(1))

    def build(self, name: str, second: float) -> SavedEntry:
        return SavedEntry(name=name, raw_value=second)


def scan_saved_state(text: str) -> list[SavedEntry]:
    """Scan saved-state text with a fresh SavedStateScanner."""
    return SavedStateScanner().scan(text)
