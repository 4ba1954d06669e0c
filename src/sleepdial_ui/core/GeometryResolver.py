"""
Conversion between pointer coordinates and ring angles.

Coordinates are in the widget's local space, where the ring center sits at
(center_offset, center_offset). Angles are in degrees, 0 at the top of the
ring and increasing clockwise, like the hands of a clock.
"""
import math
from typing import Tuple

from sleepdial_helper import normalize_angle


def resolve_angle(pointer_x: float, pointer_y: float, center_offset: float) -> float:
    dx = pointer_x - center_offset
    dy = pointer_y - center_offset

    # atan2(0, 0) carries no direction
    if dx == 0 and dy == 0:
        return 0.0

    angle = (math.atan2(dy, dx) + math.pi / 2) / math.pi * 180

    return normalize_angle(angle)


def point_for_angle(angle: float, radius: float, center_offset: float) -> Tuple[float, float]:
    radians = math.radians(angle)
    x = center_offset + radius * math.sin(radians)
    y = center_offset - radius * math.cos(radians)

    return x, y


class GeometryResolver:
    def __init__(self, center_offset: float) -> None:
        self.center_offset = center_offset

    def resolve(self, pointer_x: float, pointer_y: float) -> float:
        return resolve_angle(pointer_x, pointer_y, self.center_offset)

    def knob_position(self, angle: float, radius: float) -> Tuple[float, float]:
        return point_for_angle(angle, radius, self.center_offset)
