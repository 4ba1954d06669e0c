import math
from typing import Tuple


def clamp(raw: float, min_val: float, max_val: float) -> float:
    lower = min(min_val, max_val)
    upper = max(min_val, max_val)
    clamped = max(lower, min(upper, raw))

    return clamped


def color_to_hex(color: Tuple[int, int, int]) -> str:
    hex_color = "#"
    for item in color:
        hex_color += hex(item)[2:].upper().zfill(2)

    return hex_color


def normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    normalized = math.fmod(angle, 360.0)
    # Also maps -0.0 to 0.0
    if normalized <= 0:
        normalized += 360.0

    # -1e-15 + 360 rounds up to 360.0
    if normalized >= 360.0:
        normalized = 0.0

    return normalized


def floor_to_multiple(value: int, step: int) -> int:
    return value - (value % step)


def clockwise_distance(from_angle: float, to_angle: float) -> float:
    """Degrees travelled going clockwise from from_angle to to_angle, in [0, 360)."""
    return normalize_angle(to_angle - from_angle)
