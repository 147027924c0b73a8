"""Full-screen chapter title card."""

from __future__ import annotations

from typing import Any, Optional

import pygame

from .about import BLACK, WHITE, _Label


def _present() -> None:
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        pygame.display.flip()


def transition_to_chapter(window: Any, font: Optional[str], title_text: str) -> bool:
    """Show title_text centred on black until a key or mouse button is pressed.

    Returns True when the player continued, False when the window was closed.
    """
    text = _Label(font, 70, title_text, (0, 0), WHITE, bold=True)
    width, height = window.get_size()
    text.center_on((width / 2.0, height / 2.0))

    waiting = True
    while waiting:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type in (pygame.KEYDOWN, pygame.MOUSEBUTTONDOWN):
                waiting = False
        window.fill(BLACK)
        text.draw(window)
        _present()
    return True