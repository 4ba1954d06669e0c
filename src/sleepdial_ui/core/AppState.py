import logging

import pygame

from sleepdial_ui.Init import Init
from sleepdial_ui.controllers.DragController import DragController
from sleepdial_ui.controllers.EventController import EventController
from sleepdial_ui.utils.colors import BACKGROUND
from sleepdial_ui.utils.Settings import Settings
from sleepdial_ui.widgets.CircularTimeSliderWidget import CircularTimeSliderWidget


class AppState:
    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.running = True

        video = settings.get("video")
        self.size = (video.get("width"), video.get("height"))
        self.title = settings.get("settings").get("title")
        self.main_loop_fps = settings.get("timing", {}).get("main_loop_fps", 60)

        self.screen, self.clock = Init.ui(self.size, self.title)

        config = Init.config(settings)
        self.model = Init.model(settings, config)
        self.model.add_duration_observer(self._on_duration_change)

        self.slider = CircularTimeSliderWidget((0, 0), self.model)
        self.slider.position = (
            (self.size[0] - self.slider.width) // 2,
            (self.size[1] - self.slider.height) // 2
        )

        guarded = settings.get("slider", {}).get("guarded", False)
        self.drag_controller = DragController(self.model, self.slider.resolver, guarded=guarded)

        self.event_controller = EventController(
            on_quit=self._on_quit,
            drag_controller=self.drag_controller,
            hit_test=self.slider.hit_test,
            to_local=self.slider.to_local
        )

    def handle_events(self) -> bool:
        return self.event_controller.handle_events()

    def render(self) -> None:
        self.screen.fill(BACKGROUND)
        self.slider.draw(self.screen)
        pygame.display.flip()

    def tick(self) -> None:
        self.clock.tick(self.main_loop_fps)

    def shutdown(self) -> None:
        logging.info(
            f"Selected {self.model.start_time} - {self.model.end_time} "
            f"({self.model.formatted_duration()})"
        )
        pygame.quit()

    def _on_quit(self) -> None:
        self.running = False

    def _on_duration_change(self, duration: str) -> None:
        logging.debug(f"Duration changed: {duration}")