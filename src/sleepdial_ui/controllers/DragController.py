"""Applies drag gestures on the slider to the time range model."""
from enum import Enum
import logging
from typing import Optional

from sleepdial_ui.core.GeometryResolver import GeometryResolver
from sleepdial_ui.core.TimeRangeModel import TimeRangeModel


class DragTarget(Enum):
    START = "start"
    END = "end"
    CONNECTOR = "connector"


class DragController:
    def __init__(
        self,
        model: TimeRangeModel,
        resolver: GeometryResolver,
        guarded: bool = False
    ) -> None:
        self.model = model
        self.resolver = resolver
        self.guarded = guarded

        self.active: Optional[DragTarget] = None

    @property
    def dragging(self) -> bool:
        return self.active is not None

    def begin(self, target: DragTarget) -> None:
        """Starting a new drag replaces whatever drag was active before."""
        if self.active is not None and self.active != target:
            logging.debug(f"Drag on {self.active.value} replaced by {target.value}")

        self.active = target
        logging.debug(f"Drag started on {target.value}")

    def end(self) -> None:
        if self.active is not None:
            logging.debug(f"Drag ended on {self.active.value}")

        self.active = None

    def move(self, x: float, y: float) -> None:
        if self.active is None:
            return

        self.drag(self.active, x, y)

    def drag(self, target: DragTarget, x: float, y: float) -> None:
        angle = self.resolver.resolve(x, y)

        match target:
            case DragTarget.START:
                if self.guarded:
                    self.model.set_start_angle_guarded(angle)
                else:
                    self.model.set_start_angle(angle)

            case DragTarget.END:
                if self.guarded:
                    self.model.set_end_angle_guarded(angle)
                else:
                    self.model.set_end_angle(angle)

            case DragTarget.CONNECTOR:
                # Delta against the current state, consecutive events add up
                delta = angle - self.model.start_angle
                self.model.rotate_both_by(delta)
