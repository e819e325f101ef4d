"""Math utilities for parameter value conversion."""

from __future__ import annotations

import math
from typing import TypeVar

import numpy as np

Number = TypeVar("Number", int, float, np.number)

U8_MIN = 0
U8_MAX = 255


def clamp(value: Number, min_val: Number, max_val: Number) -> Number:
    """Clamp value to range [min_val, max_val].

    Args:
        value: Value to clamp
        min_val: Minimum allowed value
        max_val: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_val, min(max_val, value))


def to_f32(value: float) -> float:
    """Round a Python float to single precision.

    Values beyond the f32 range become +/-inf.
    """
    with np.errstate(over="ignore"):
        return float(np.float32(value))


def saturating_u8(value: float) -> int:
    """Truncate toward zero into 0..=255, saturating at both ends.

    NaN maps to 0. Never raises.
    """
    if math.isnan(value):
        return U8_MIN
    if value >= U8_MAX:
        return U8_MAX
    if value <= U8_MIN:
        return U8_MIN
    return math.trunc(value)
