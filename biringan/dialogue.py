"""Typewriter-style dialogue box with a speaker tag."""

from __future__ import annotations

import os
import time
from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

import pygame

_WHITE = (255, 255, 255)
_BOX_WIDTH = 900.0
_BOX_HEIGHT = 150.0
_BOTTOM_MARGIN = 30.0
_SPEAKER_WIDTH = 220.0
_SPEAKER_HEIGHT = 45.0
_PANEL_WIDTH = 80.0
_OUTLINE = 2


@dataclass(frozen=True)
class DialogueEntry:
    """One line of dialogue and who says it."""

    text: str
    speaker: str


class DialogueBox:
    """Shows a queue of dialogue lines, revealing each one character by character.

    ``font`` is a font file path, or None for pygame's default font.
    ``clock`` returns the current time in seconds.
    """

    def __init__(
        self,
        window: Any,
        font: Optional[str] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._window = window
        self._font_source = font
        self._fonts: Optional[tuple[pygame.font.Font, pygame.font.Font]] = None
        self._clock = clock
        self.type_speed = 50.0

        width, height = window.get_size()
        box_x = (width - _BOX_WIDTH) / 2.0
        box_y = height - _BOX_HEIGHT - _BOTTOM_MARGIN
        speaker_y = box_y - _SPEAKER_HEIGHT - 10.0
        self._box = (box_x, box_y, _BOX_WIDTH, _BOX_HEIGHT)
        self._text_position = (box_x + 20.0, box_y + 20.0)
        self._speaker_box = (box_x, speaker_y, _SPEAKER_WIDTH, _SPEAKER_HEIGHT)
        self._speaker_position = (box_x + 10.0, speaker_y + 8.0)
        self._panel = (box_x + _BOX_WIDTH + 10.0, box_y, _PANEL_WIDTH, _BOX_HEIGHT)

        self._queue: deque[DialogueEntry] = deque()
        self._full_text = ""
        self._speaker = ""
        self._char_index = 0
        self._started_at = clock()
        self._visible = False
        self._finished = False
        self._background: Optional[pygame.Surface] = None

    def start_dialogue(self, entries: Iterable[DialogueEntry]) -> None:
        """Replace the queue with entries and show the first one."""
        self._queue = deque(entries)
        self._next_dialogue()
        self._visible = True

    def _next_dialogue(self) -> None:
        if not self._queue:
            self._visible = False
            return
        entry = self._queue.popleft()
        self._full_text = entry.text
        self._speaker = entry.speaker
        self._char_index = 0
        self._started_at = self._clock()
        self._finished = False

    def update(self) -> None:
        """Reveal the characters due by now."""
        if not self._visible or self._finished:
            return
        elapsed = self._clock() - self._started_at
        target = int(elapsed * self.type_speed)
        if target > self._char_index:
            self._char_index = min(target, len(self._full_text))
            if self._char_index >= len(self._full_text):
                self._finished = True

    def handle_input(self, event: Any) -> None:
        """A mouse click or Space finishes the current line, or moves to the next."""
        if not self._visible:
            return
        pressed = event.type == pygame.MOUSEBUTTONDOWN or (
            event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_SPACE
        )
        if not pressed:
            return
        if not self._finished:
            self._char_index = len(self._full_text)
            self._finished = True
        else:
            self._next_dialogue()

    def _get_fonts(self) -> tuple[pygame.font.Font, pygame.font.Font]:
        if self._fonts is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._fonts = (
                pygame.font.Font(self._font_source, 22),
                pygame.font.Font(self._font_source, 20),
            )
        return self._fonts

    def _draw_panel(self, rect: tuple[float, float, float, float], alpha: int) -> None:
        x, y, width, height = (round(v) for v in rect)
        fill = pygame.Surface((width, height), pygame.SRCALPHA)
        fill.fill((0, 0, 0, alpha))
        self._window.blit(fill, (x, y))
        outline = pygame.Rect(x - _OUTLINE, y - _OUTLINE, width + 2 * _OUTLINE, height + 2 * _OUTLINE)
        pygame.draw.rect(self._window, _WHITE, outline, _OUTLINE)

    def _draw_text(self, font: pygame.font.Font, text: str, position: tuple[float, float]) -> None:
        x, y = position
        for line in text.split("\n"):
            if line:
                self._window.blit(font.render(line, True, _WHITE), (round(x), round(y)))
            y += font.get_linesize()

    def draw(self) -> None:
        if not self._visible:
            return
        text_font, speaker_font = self._get_fonts()
        self._draw_panel(self._box, 180)
        self._draw_text(text_font, self.displayed_text, self._text_position)
        if self._speaker:
            self._draw_panel(self._speaker_box, 200)
            self._draw_text(speaker_font, self._speaker, self._speaker_position)
        self._draw_panel(self._panel, 150)

    def set_background(self, image_path) -> None:
        """Load an image stretched to the window.

        Raises FileNotFoundError or pygame.error if it cannot be loaded; no
        background is drawn afterwards.
        """
        try:
            texture = pygame.image.load(os.fspath(image_path))
        except (pygame.error, OSError):
            self._background = None
            raise
        self._background = pygame.transform.scale(texture, self._window.get_size())

    def draw_background(self) -> None:
        if self._background is not None:
            self._window.blit(self._background, (0, 0))

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def displayed_text(self) -> str:
        """The part of the current line revealed so far."""
        return self._full_text[: self._char_index]

    @property
    def current_dialogue(self) -> str:
        return self._full_text

    @property
    def current_speaker(self) -> str:
        return self._speaker