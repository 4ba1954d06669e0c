from sleepdial_helper.helper import (
  clamp,
  clockwise_distance,
  color_to_hex,
  floor_to_multiple,
  normalize_angle,
)
from sleepdial_helper.exceptions import (
  MalformedTimeString,
)

__all__ = [
  "clamp",
  "clockwise_distance",
  "color_to_hex",
  "floor_to_multiple",
  "normalize_angle",
  "MalformedTimeString",
]
