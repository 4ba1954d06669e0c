from .SliderConfig import SliderConfig
from .GeometryResolver import GeometryResolver
from .TimeRangeModel import TimeRangeModel

__all__ = [
  "SliderConfig",
  "GeometryResolver",
  "TimeRangeModel",
]
