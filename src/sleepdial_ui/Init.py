import logging
from typing import Tuple

import pygame
from pygame import display, time

from sleepdial_helper import MalformedTimeString

from sleepdial_ui.core.SliderConfig import SliderConfig
from sleepdial_ui.core.TimeRangeModel import TimeRangeModel
from sleepdial_ui.utils.Settings import Settings


class Init:
    """
    Factory to help with initialization of core components
    """

    @classmethod
    def settings(cls, path: str = "settings.toml") -> Settings:
        """
        Initialize settings from a file. Create settings file in case it does
        not exist.
        """
        settings = Settings(path)
        settings.save()

        return settings

    @classmethod
    def config(cls, settings: Settings) -> SliderConfig:
        slider = settings.get("slider", {})
        defaults = SliderConfig()

        return SliderConfig(
            radius=float(slider.get("radius", defaults.radius)),
            knob_radius=float(slider.get("knob_radius", defaults.knob_radius)),
            min_duration_hours=float(slider.get("min_duration_hours", defaults.min_duration_hours)),
            count_steps=int(slider.get("count_steps", defaults.count_steps)),
        )

    @classmethod
    def model(cls, settings: Settings, config: SliderConfig) -> TimeRangeModel:
        """
        Create the time range model with the initial range from settings.
        Malformed times are logged and the default angle is kept.
        """
        model = TimeRangeModel(config)

        time_range = settings.get("range", {})
        start_time = time_range.get("start_time")
        end_time = time_range.get("end_time")

        if start_time is not None:
            try:
                model.set_start_time(start_time)
            except MalformedTimeString as e:
                logging.error(f"Ignoring start time from settings: {e}")

        if end_time is not None:
            try:
                model.set_end_time(end_time)
            except MalformedTimeString as e:
                logging.error(f"Ignoring end time from settings: {e}")

        return model

    @classmethod
    def ui(cls, size: Tuple[int, int], title: str) -> Tuple[pygame.Surface, pygame.time.Clock]:
        pygame.init()

        flags = pygame.DOUBLEBUF | pygame.SCALED
        screen = display.set_mode(size, flags)
        display.set_caption(title)
        clock = time.Clock()

        return screen, clock
