"""About screen, plus the text labels and backdrops shared by the menu screens."""

from __future__ import annotations

import enum
import logging
import math
import os
from typing import Any, Callable, Iterable, Optional

import pygame

from .background import cover_fit

log = logging.getLogger(__name__)

RED = (255, 0, 0)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

DEFAULT_BACKGROUND = "simba.png"
ABOUT_TEXT = "This is a story-driven visual novel...\nMade with Python and pygame."

Point = tuple[float, float]


def _make_font(source: Optional[str], size: int, bold: bool = False) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(source, size)
    font.set_bold(bold)
    return font


class _Label:
    """A block of text at a position, with a fill colour and a scale."""

    def __init__(
        self,
        font_source: Optional[str],
        size: int,
        text: str,
        position: Point,
        color: tuple[int, int, int] = WHITE,
        *,
        bold: bool = False,
    ) -> None:
        self._font_source = font_source
        self._bold = bold
        self._size = size
        self.font = _make_font(font_source, size, bold)
        self.text = text
        self.position = position
        self.color = color
        self.scale: Point = (1.0, 1.0)

    @property
    def size(self) -> int:
        return self._size

    @size.setter
    def size(self, value: int) -> None:
        self._size = value
        self.font = _make_font(self._font_source, value, self._bold)

    def _natural_size(self) -> tuple[list[str], int, int]:
        lines = self.text.split("\n")
        width = max(self.font.size(line)[0] for line in lines)
        height = self.font.get_linesize() * (len(lines) - 1) + self.font.get_height()
        return lines, width, height

    @property
    def rect(self) -> tuple[float, float, float, float]:
        """Screen rectangle as (left, top, width, height)."""
        x, y = self.position
        if not self.text:
            return (x, y, 0.0, 0.0)
        _, width, height = self._natural_size()
        scale_x, scale_y = self.scale
        return (x, y, width * scale_x, height * scale_y)

    def contains(self, point: Point) -> bool:
        left, top, width, height = self.rect
        px, py = point
        return left <= px < left + width and top <= py < top + height

    def center_on(self, point: Point) -> None:
        _, _, width, height = self.rect
        self.position = (point[0] - width / 2.0, point[1] - height / 2.0)

    def draw(self, window: Any) -> None:
        left, top, width, height = self.rect
        if width < 1 or height < 1:
            return
        lines, natural_width, natural_height = self._natural_size()
        block = pygame.Surface((max(1, natural_width), max(1, natural_height)), pygame.SRCALPHA)
        for row, line in enumerate(lines):
            if line:
                block.blit(
                    self.font.render(line, True, self.color),
                    (0, row * self.font.get_linesize()),
                )
        if self.scale != (1.0, 1.0):
            block = pygame.transform.smoothscale(
                block, (max(1, math.ceil(width)), max(1, math.ceil(height)))
            )
        window.blit(block, (round(left), round(top)))


def _load_backdrop(window: Any, path, *, stretch: bool = False):
    """Load an image sized to the window; returns (surface, position) or None."""
    try:
        texture = pygame.image.load(os.fspath(path))
    except (pygame.error, OSError):
        log.error("Failed to load %s", path)
        return None
    if stretch:
        return pygame.transform.scale(texture, window.get_size()), (0, 0)
    width, height = texture.get_size()
    scale, (x, y) = cover_fit(window.get_size(), (width, height))
    image = pygame.transform.scale(texture, (round(width * scale), round(height * scale)))
    return image, (round(x), round(y))


def _is_left_click(event: Any) -> bool:
    return event.type == pygame.MOUSEBUTTONDOWN and getattr(event, "button", None) == 1


def _highlight(buttons: Iterable[_Label], mouse_pos: Point) -> None:
    """Colour each button red under the mouse and black otherwise."""
    for button in buttons:
        button.color = RED if button.contains(mouse_pos) else BLACK


class _MenuScreen:
    """Window, input sources and backdrop common to the menu screens."""

    def __init__(
        self,
        window: Any,
        *,
        background=DEFAULT_BACKGROUND,
        events: Callable[[], Iterable[Any]] = pygame.event.get,
        mouse_position: Callable[[], Point] = pygame.mouse.get_pos,
        present: Callable[[], Any] = pygame.display.flip,
    ) -> None:
        self._window = window
        self._events = events
        self._mouse_position = mouse_position
        self._present = present
        self.closed = False
        self._backdrop = _load_backdrop(window, background)

    def _render(self, *labels: _Label) -> None:
        self._window.fill(BLACK)
        if self._backdrop is not None:
            image, position = self._backdrop
            self._window.blit(image, position)
        for label in labels:
            label.draw(self._window)
        self._present()


class AboutState(enum.Enum):
    """What the About screen asks the game to do next."""

    ABOUT = enum.auto()
    BACK = enum.auto()


class AboutScreen(_MenuScreen):
    """Shows a short description of the game and a Back button."""

    def __init__(
        self,
        window: Any,
        title_font: Optional[str] = None,
        body_font: Optional[str] = None,
        **options: Any,
    ) -> None:
        super().__init__(window, **options)
        self.title_font = title_font
        self.about_text = _Label(body_font, 50, ABOUT_TEXT, (90, 140), BLACK)
        self.back_button = _Label(body_font, 40, "Back", (80, 700), BLACK)

    def run(self) -> AboutState:
        """Run until the player goes back or the window is closed."""
        while not self.closed:
            state = self.handle_events()
            if state is not AboutState.ABOUT:
                return state
            self.draw()
        return AboutState.BACK

    def handle_mouse_hover(self, mouse_pos: Point) -> None:
        _highlight((self.back_button,), mouse_pos)

    def handle_events(self) -> AboutState:
        for event in self._events():
            if event.type == pygame.QUIT:
                self.closed = True
            if _is_left_click(event) and self.back_button.contains(self._mouse_position()):
                return AboutState.BACK
        self.handle_mouse_hover(self._mouse_position())
        return AboutState.ABOUT

    def draw(self) -> None:
        self._render(self.about_text, self.back_button)