from __future__ import annotations

import math
import re
from typing import Any, Optional

# Calories burned per minute for a typical adult.
CALORIES_PER_MINUTE = {
    "running": 11.5,  # ~690 per hour
    "walking": 5.0,  # ~300 per hour
    "swimming": 8.3,  # ~500 per hour
    "cycling": 7.5,  # ~450 per hour
    "yoga": 4.0,  # ~240 per hour
    "weightlifting": 5.0,  # ~300 per hour
    "hiit": 12.5,  # ~750 per hour
    "dancing": 6.7,  # ~400 per hour
}
DEFAULT_CALORIES_PER_MINUTE = 6.0  # ~360 per hour

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_label(label: str) -> str:
    return label.strip().lower()


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def parse_leading_int(value: Any) -> Optional[int]:
    """Parse an integer the way a lenient form field would.

    Integers pass through, integral floats are accepted, and strings use their
    leading digits (``"30 min"`` -> 30). Anything else yields None.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def _rate_for_workout(workout: str) -> float:
    return CALORIES_PER_MINUTE.get(normalize_label(workout), DEFAULT_CALORIES_PER_MINUTE)


def estimate_calories(workout: str, duration_min: int) -> int:
    """Deterministic calorie estimate for ``duration_min`` minutes of ``workout``."""
    return round_half_up(_rate_for_workout(workout) * duration_min)
