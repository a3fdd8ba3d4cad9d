# File: utils/math_utils.py
"""Math and calculation utilities for Daily Quest.

Pure Python math functions with ZERO Home Assistant dependencies.

Functions:
    - clamp: Bound a value to a range
    - coerce_number: Parse a raw goal value into a finite number
    - calculate_percentage: Progress percentage calculations
"""

from __future__ import annotations

import math
from typing import Any

# Float precision for percentage rounding
DATA_FLOAT_PRECISION = 2


def clamp(value: float, min_val: float, max_val: float) -> float:
    """Clamp a value between minimum and maximum bounds.

    Examples:
        clamp(999, 0, 16) → 16
        clamp(-3, 0, 16) → 0
    """
    return max(min_val, min(value, max_val))


def coerce_number(raw: Any) -> float | int | None:
    """Convert raw input into a finite number, or None when it is not numeric.

    Booleans are rejected so that ``True`` is never read as a counter value of 1.
    Numeric strings ("10", "2.5") are accepted. Integral floats are returned as
    ints so stored counters stay whole.
    """
    if isinstance(raw, bool) or raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        value = raw
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value


def calculate_percentage(
    current: float,
    target: float,
    precision: int = DATA_FLOAT_PRECISION,
) -> float:
    """Calculate a 0-100 progress percentage.

    Returns 0.0 when target is not positive and never exceeds 100.

    Examples:
        calculate_percentage(50, 100) → 50.0
        calculate_percentage(1, 3) → 33.33
        calculate_percentage(16, 8) → 100.0
    """
    if target <= 0:
        return 0.0
    return round(min(100.0, (current / target) * 100), precision)
