import math
from typing import Optional, Tuple

import numpy as np
import numpy.typing as npt
import pygame
import pygame.freetype
from pygame import Surface, SRCALPHA
from pygame.freetype import Font

from sleepdial_ui.controllers.DragController import DragTarget
from sleepdial_ui.core.GeometryResolver import GeometryResolver
from sleepdial_ui.core.TimeRangeModel import TimeRangeModel
from sleepdial_ui.utils.colors import (
  BACKGROUND,
  CYAN,
  GREY,
  ORANGE,
  TICK_SHADOW,
  WHITE,
)
from sleepdial_ui.utils.helpers import get_icon, hour_label, render_centered
from sleepdial_ui.widgets.Widget import Widget


class CircularTimeSliderWidget(Widget):
    """
    Clock face with a start and an end knob.

    The widget surface is a square holding the ring, with the duration and the
    start/end times rendered below it. Pointer positions handed to the
    resolver are relative to the top-left corner of the widget, so the ring
    center sits at (center_offset, center_offset).
    """
    INACTIVE_COLOR = GREY
    ACTIVE_COLOR = ORANGE
    TEXT_PRIMARY_COLOR = CYAN
    TEXT_SECONDARY_COLOR = GREY
    TEXT_TERTIARY_COLOR = ORANGE

    QUARTER_MARKS = 24 * 4
    HOUR_LABEL_INSET = 65
    HOUR_LABEL_BAND = 12
    TEXT_AREA_HEIGHT = 120
    ARC_SEGMENTS_PER_TURN = 180

    def __init__(
        self,
        position: Tuple[int, int],
        model: TimeRangeModel,
        font: Optional[Font] = None,
        caption_font: Optional[Font] = None
    ) -> None:
        super().__init__()

        self.position = position
        self.model = model
        self.config = model.config

        self.ring_size = int(math.ceil(self.config.diameter + self.config.knob_diameter))
        self.center_offset = self.ring_size / 2
        self.resolver = GeometryResolver(self.center_offset)

        self.width = self.ring_size
        self.height = self.ring_size + self.TEXT_AREA_HEIGHT

        self.font = font or pygame.freetype.SysFont("sans", 26, bold=True)
        self.caption_font = caption_font or pygame.freetype.SysFont("sans", 13, bold=True)

        icon_size = max(1, int(self.config.knob_radius / 1.6 * 2))
        self.start_icon = get_icon("schedule", size=icon_size, color=WHITE)
        self.end_icon = get_icon("flag", size=icon_size, color=WHITE)

        radius = self.config.radius
        knob_radius = self.config.knob_radius
        self.minor_ticks = self._tick_segments(
            self.config.count_steps,
            radius - knob_radius * 0.45,
            radius + knob_radius * 0.45
        )
        self.quarter_ticks = self._tick_segments(self.QUARTER_MARKS, radius - 42, radius - 38)
        self.hour_ticks = self._tick_segments(self.QUARTER_MARKS // 4, radius - 46, radius - 38)

    def draw(self, screen: Surface) -> None:
        surface = Surface((self.width, self.height), SRCALPHA)
        surface.fill(BACKGROUND)

        self._draw_ring(surface)
        self._draw_connector(surface)
        self._draw_ticks(surface)
        self._draw_hour_labels(surface)
        self._draw_knob(surface, self.model.start_angle, self.start_icon)
        self._draw_knob(surface, self.model.end_angle, self.end_icon)
        self._draw_texts(surface)

        screen.blit(surface, self.position)

    def to_local(self, pos: Tuple[int, int]) -> Tuple[float, float]:
        return pos[0] - self.position[0], pos[1] - self.position[1]

    def knob_center(self, target: DragTarget) -> Tuple[float, float]:
        angle = self.model.end_angle if target == DragTarget.END else self.model.start_angle

        return self.resolver.knob_position(angle, self.config.radius)

    def hit_test(self, pos: Tuple[int, int]) -> Optional[DragTarget]:
        """
        Map a screen position to the part of the slider it grabs. The end knob
        is drawn on top, so it wins when both knobs overlap.
        """
        x, y = self.to_local(pos)

        for target in (DragTarget.END, DragTarget.START):
            knob_x, knob_y = self.knob_center(target)
            if math.hypot(x - knob_x, y - knob_y) <= self.config.knob_radius:
                return target

        distance = math.hypot(x - self.center_offset, y - self.center_offset)
        label_radius = self.config.radius - self.HOUR_LABEL_INSET
        if abs(distance - label_radius) <= self.HOUR_LABEL_BAND:
            return DragTarget.CONNECTOR

        return None

    def _tick_segments(self, count: int, inner: float, outer: float) -> npt.NDArray[np.float64]:
        """Start and end point of count evenly spaced radial ticks, shape (count, 2, 2)."""
        angles = np.radians(np.arange(1, count + 1) * 360.0 / count)
        sin = np.sin(angles)
        cos = np.cos(angles)

        inner_points = np.column_stack((self.center_offset + inner * sin, self.center_offset - inner * cos))
        outer_points = np.column_stack((self.center_offset + outer * sin, self.center_offset - outer * cos))

        return np.stack((inner_points, outer_points), axis=1)

    def _arc_polygon(self, start_angle: float, sweep: float) -> npt.NDArray[np.float64]:
        segments = max(2, int(self.ARC_SEGMENTS_PER_TURN * sweep / 360.0) + 1)
        angles = np.radians(np.linspace(start_angle, start_angle + sweep, segments))
        sin = np.sin(angles)
        cos = np.cos(angles)

        outer = self.config.radius + self.config.knob_radius
        inner = self.config.radius - self.config.knob_radius
        outer_points = np.column_stack((self.center_offset + outer * sin, self.center_offset - outer * cos))
        inner_points = np.column_stack((self.center_offset + inner * sin, self.center_offset - inner * cos))

        return np.concatenate((outer_points, inner_points[::-1]))

    def _draw_ring(self, surface: Surface) -> None:
        center = (self.center_offset, self.center_offset)
        outer = self.config.radius + self.config.knob_radius
        pygame.draw.circle(surface, self.INACTIVE_COLOR, center, outer, width=int(self.config.knob_diameter))

    def _draw_connector(self, surface: Surface) -> None:
        fraction = self.model.connector_fraction()
        if fraction <= 0:
            return

        polygon = self._arc_polygon(self.model.start_angle, fraction * 360.0)
        pygame.draw.polygon(surface, self.ACTIVE_COLOR, polygon.tolist())

    def _draw_ticks(self, surface: Surface) -> None:
        for start, end in self.minor_ticks.tolist():
            pygame.draw.line(surface, TICK_SHADOW, start, end, 3)

        for start, end in self.quarter_ticks.tolist():
            pygame.draw.line(surface, self.TEXT_SECONDARY_COLOR, start, end, 2)

        for start, end in self.hour_ticks.tolist():
            pygame.draw.line(surface, self.TEXT_SECONDARY_COLOR, start, end, 2)

    def _draw_hour_labels(self, surface: Surface) -> None:
        label_radius = self.config.radius - self.HOUR_LABEL_INSET
        for hour in range(1, 25):
            label = hour_label(hour)
            if not label:
                continue

            center = self.resolver.knob_position(360.0 / 24 * hour, label_radius)
            render_centered(surface, self.caption_font, label, self.TEXT_SECONDARY_COLOR, center)

    def _draw_knob(self, surface: Surface, angle: float, icon: Surface) -> None:
        center = self.resolver.knob_position(angle, self.config.radius)
        pygame.draw.circle(surface, self.ACTIVE_COLOR, center, self.config.knob_radius)

        icon_rect = icon.get_rect(center=(int(center[0]), int(center[1])))
        surface.blit(icon, icon_rect)

    def _draw_texts(self, surface: Surface) -> None:
        top = self.ring_size
        center_x = self.width / 2
        quarter_x = self.width / 4

        render_centered(surface, self.font, self.model.formatted_duration(), self.TEXT_PRIMARY_COLOR, (center_x, top + 24))

        render_centered(surface, self.caption_font, "START TIME", self.TEXT_TERTIARY_COLOR, (quarter_x, top + 64))
        render_centered(surface, self.font, self.model.start_time, self.TEXT_PRIMARY_COLOR, (quarter_x, top + 92))

        render_centered(surface, self.caption_font, "END TIME", self.TEXT_TERTIARY_COLOR, (center_x + quarter_x, top + 64))
        render_centered(surface, self.font, self.model.end_time, self.TEXT_PRIMARY_COLOR, (center_x + quarter_x, top + 92))
