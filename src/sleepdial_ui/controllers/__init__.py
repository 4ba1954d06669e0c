from .DragController import DragController, DragTarget
from .EventController import EventController

__all__ = [
  "DragController",
  "DragTarget",
  "EventController",
]
