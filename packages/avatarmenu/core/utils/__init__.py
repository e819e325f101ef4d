"""Shared utilities for avatarmenu."""

from avatarmenu.core.utils.json import read_json
from avatarmenu.core.utils.math import clamp, saturating_u8, to_f32

__all__ = [
    "clamp",
    "read_json",
    "saturating_u8",
    "to_f32",
]
