"""Notices and chapter card shown before play begins."""

from __future__ import annotations

import enum
from typing import Any, Callable, Iterable, Optional

import pygame

from .about import BLACK, WHITE, _is_left_click, _Label

MESSAGES = (
    "Notice: This game is still under development.\n"
    "You may experience bugs or incomplete features.",
    "Disclaimer: This game is for players 18 and older.\n"
    "It may contain gore and disturbing imagery.",
    "Chapter 1: Biringan",
)

_MESSAGE_SIZE = 24
_CHAPTER_SIZE = 48


class IntroState(enum.Enum):
    DONE = enum.auto()
    QUIT = enum.auto()


class PlayIntroScreen:
    """Steps through the intro messages, one per left click."""

    def __init__(
        self,
        window: Any,
        title_font: Optional[str] = None,
        body_font: Optional[str] = None,
        *,
        events: Callable[[], Iterable[Any]] = pygame.event.get,
        present: Callable[[], Any] = pygame.display.flip,
    ) -> None:
        self._window = window
        self.title_font = title_font
        self._events = events
        self._present = present
        self._messages = list(MESSAGES)
        self._index = 0
        self._message = _Label(body_font, _MESSAGE_SIZE, self._messages[0], (0, 0), WHITE)
        self._recenter()

    def _recenter(self) -> None:
        width, height = self._window.get_size()
        self._message.center_on((width / 2.0, height / 2.0))

    @property
    def current_message(self) -> str:
        return self._messages[min(self._index, len(self._messages) - 1)]

    @property
    def character_size(self) -> int:
        return self._message.size

    def advance(self) -> bool:
        """Move to the next message. Returns False once every message has been shown."""
        self._index += 1
        if self._index >= len(self._messages):
            return False
        last = self._index == len(self._messages) - 1
        self._message.size = _CHAPTER_SIZE if last else _MESSAGE_SIZE
        self._message.text = self._messages[self._index]
        self._recenter()
        return True

    def run(self) -> IntroState:
        while True:
            for event in self._events():
                if event.type == pygame.QUIT:
                    return IntroState.QUIT
                if _is_left_click(event) and not self.advance():
                    return IntroState.DONE
            self._window.fill(BLACK)
            self._message.draw(self._window)
            self._present()