"""Title screen with the main menu."""

from __future__ import annotations

import logging
import math
import time
from typing import Any, Callable, Iterable, Optional

import pygame

from .about import BLACK, DEFAULT_BACKGROUND, RED, WHITE, _is_left_click, _Label, _load_backdrop
from .progress import GameState
from .sound import SoundLoadError, SoundManager

log = logging.getLogger(__name__)

TITLE_MUSIC = "BeginMusic.ogg"

Point = tuple[float, float]


def title_motion(time: float) -> tuple[float, float, float, float]:
    """Vertical offsets and scales of the two title lines at a time in seconds.

    Returns (offset_y1, scale1, offset_y2, scale2).
    """
    offset_y1 = math.sin(time * 3.0) * 2.0
    scale1 = 1.0 + math.sin(time * 2.0) * 0.01
    offset_y2 = math.sin(time * 2.5 + 1.0) * 5.0
    scale2 = 1.0 + math.sin(time * 3.5 + 0.5) * 0.02
    return offset_y1, scale1, offset_y2, scale2


class TitleScreen:
    """Animated game title with Play, About, Load and Quit buttons."""

    def __init__(
        self,
        window: Any,
        title_font: Optional[str] = None,
        body_font: Optional[str] = None,
        sound_manager: Optional[SoundManager] = None,
        *,
        background=DEFAULT_BACKGROUND,
        events: Callable[[], Iterable[Any]] = pygame.event.get,
        mouse_position: Callable[[], Point] = pygame.mouse.get_pos,
        present: Callable[[], Any] = pygame.display.flip,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._window = window
        self.sound_manager = sound_manager if sound_manager is not None else SoundManager.get_instance()
        self._events = events
        self._mouse_position = mouse_position
        self._present = present
        self._clock = clock
        self.closed = False
        self._backdrop = _load_backdrop(window, background, stretch=True)

        self.title_line1 = _Label(title_font, 80, "Escape from", (50, 30), RED)
        self.title_line2 = _Label(title_font, 100, "Biringan City", (30, 100), RED)
        self.play_button = _Label(body_font, 48, "Play", (80, 300), WHITE)
        self.about_button = _Label(body_font, 48, "About", (80, 400), WHITE)
        self.load_button = _Label(body_font, 48, "Load", (80, 500), WHITE)
        self.quit_button = _Label(body_font, 48, "Quit", (80, 600), WHITE)

    @property
    def _buttons(self) -> tuple[_Label, ...]:
        return (self.play_button, self.about_button, self.load_button, self.quit_button)

    def run(self) -> GameState:
        """Run the menu until the player picks an entry or closes the window."""
        started_at = self._clock()
        try:
            self.sound_manager.play_music(TITLE_MUSIC, True)
        except SoundLoadError as exc:
            log.error("%s", exc)
        while not self.closed:
            state = self.handle_events()
            if state is not GameState.TITLE:
                return state
            self.animate_titles(self._clock() - started_at)
            self.draw()
        return GameState.QUIT

    def handle_mouse_hover(self, mouse_pos: Point) -> None:
        for button in self._buttons:
            button.color = RED if button.contains(mouse_pos) else BLACK

    def handle_events(self) -> GameState:
        for event in self._events():
            if event.type == pygame.QUIT:
                self.closed = True
            if _is_left_click(event):
                mouse_pos = self._mouse_position()
                if self.play_button.contains(mouse_pos):
                    self.sound_manager.stop_music()
                    return GameState.GAMEPLAY
                if self.about_button.contains(mouse_pos):
                    return GameState.ABOUT
                if self.load_button.contains(mouse_pos):
                    return GameState.LOAD
                if self.quit_button.contains(mouse_pos):
                    self.closed = True
                    return GameState.QUIT
        self.handle_mouse_hover(self._mouse_position())
        return GameState.TITLE

    def animate_titles(self, time: float) -> None:
        offset_y1, scale1, offset_y2, scale2 = title_motion(time)
        self.title_line1.position = (50, 30 + offset_y1)
        self.title_line2.position = (30, 100 + offset_y2)
        self.title_line1.scale = (scale1, scale1)
        self.title_line2.scale = (scale2, scale2)

    def draw(self) -> None:
        self._window.fill(BLACK)
        if self._backdrop is not None:
            image, position = self._backdrop
            self._window.blit(image, position)
        self.title_line1.draw(self._window)
        self.title_line2.draw(self._window)
        for button in self._buttons:
            button.draw(self._window)
        self._present()