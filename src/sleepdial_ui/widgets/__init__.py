from .CircularTimeSliderWidget import CircularTimeSliderWidget
from .Widget import Widget

__all__ = [
  "CircularTimeSliderWidget",
  "Widget",
]
