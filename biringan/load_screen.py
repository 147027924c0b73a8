"""Screen offering to load a saved game."""

from __future__ import annotations

import enum
import math
import time
from typing import Any, Callable, Optional

import pygame

from .about import BLACK, _highlight, _is_left_click, _Label, _MenuScreen

Point = tuple[float, float]


class LoadState(enum.Enum):
    LOAD_SUCCESS = enum.auto()
    BACK = enum.auto()


class LoadScreen(_MenuScreen):
    """Shows a Load Saved Game button and a Back button."""

    def __init__(
        self,
        window: Any,
        title_font: Optional[str] = None,
        body_font: Optional[str] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        **options: Any,
    ) -> None:
        super().__init__(window, **options)
        self._clock = clock
        self._started_at = clock()
        self.title = _Label(title_font, 64, "", (220, 80))
        self.load_button = _Label(body_font, 50, "Load Saved Game", (50, 70), BLACK)
        self.back_button = _Label(body_font, 40, "Back", (80, 700), BLACK)

    @property
    def title_position(self) -> Point:
        return self.title.position

    def run(self) -> LoadState:
        """Run until the player goes back or the window is closed."""
        while not self.closed:
            self.animate_title(self._clock() - self._started_at)
            mouse_pos = self._mouse_position()
            self.handle_mouse_hover(mouse_pos)
            state = self.handle_events(mouse_pos)
            if state is not LoadState.LOAD_SUCCESS:
                return state
            self.draw()
        return LoadState.BACK

    def handle_events(self, mouse_pos: Point) -> LoadState:
        for event in self._events():
            if event.type == pygame.QUIT:
                self.closed = True
                return LoadState.BACK
            if _is_left_click(event):
                if self.load_button.contains(mouse_pos):
                    print("Loading saved game...")
                    return LoadState.LOAD_SUCCESS
                if self.back_button.contains(mouse_pos):
                    return LoadState.BACK
        return LoadState.LOAD_SUCCESS

    def handle_mouse_hover(self, mouse_pos: Point) -> None:
        _highlight((self.load_button, self.back_button), mouse_pos)

    def animate_title(self, time: float) -> None:
        """Bob the title up and down along a sine wave."""
        offset = math.sin(time * 2) * 5
        self.title.position = (220, 80 + offset)

    def draw(self) -> None:
        self._render(self.title, self.load_button, self.back_button)