"""Character portrait sprite."""

from __future__ import annotations

import os
from typing import Any, Optional

import pygame


class CharacterPortrait:
    """An image shown at a position and scale, hidden until made visible."""

    def __init__(self) -> None:
        self.position: tuple[float, float] = (0.0, 0.0)
        self.scale: tuple[float, float] = (1.0, 1.0)
        self.visible = False
        self._texture: Optional[pygame.Surface] = None

    def load(self, filename) -> None:
        """Load the portrait image.

        Raises FileNotFoundError or pygame.error if it cannot be loaded; the
        previous image is then kept.
        """
        self._texture = pygame.image.load(os.fspath(filename))

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Screen rectangle covered by the portrait as (left, top, width, height)."""
        x, y = self.position
        scale_x, scale_y = self.scale
        width, height = self._texture.get_size() if self._texture is not None else (0, 0)
        far_x = x + width * scale_x
        far_y = y + height * scale_y
        return (min(x, far_x), min(y, far_y), abs(far_x - x), abs(far_y - y))

    def draw(self, window: Any) -> None:
        if not self.visible or self._texture is None:
            return
        scale_x, scale_y = self.scale
        image = self._texture
        if scale_x < 0 or scale_y < 0:
            image = pygame.transform.flip(image, scale_x < 0, scale_y < 0)
        left, top, width, height = self.bounds
        image = pygame.transform.scale(image, (round(width), round(height)))
        window.blit(image, (round(left), round(top)))