"""Event handling controller for pygame events."""
from typing import Callable, Optional, Tuple

import pygame

from sleepdial_ui.controllers.DragController import DragController, DragTarget


class EventController:
    def __init__(
        self,
        on_quit: Callable[[], None],
        drag_controller: DragController,
        hit_test: Callable[[Tuple[int, int]], Optional[DragTarget]],
        to_local: Callable[[Tuple[int, int]], Tuple[float, float]]
    ):
        self.on_quit = on_quit
        self.drag_controller = drag_controller
        self.hit_test = hit_test
        self.to_local = to_local

    def handle_events(self) -> bool:
        """Returns False if application should quit."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False

        return True

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.QUIT:
            self.on_quit()
            return False

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            target = self.hit_test(event.pos)
            if target is not None:
                self.drag_controller.begin(target)
                self.drag_controller.move(*self.to_local(event.pos))

        elif event.type == pygame.MOUSEMOTION and self.drag_controller.dragging:
            self.drag_controller.move(*self.to_local(event.pos))

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.drag_controller.end()

        return True
