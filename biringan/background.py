"""Full-window background image with a fade-to-black effect."""

from __future__ import annotations

import os
from typing import Any, Tuple

import pygame

Size = Tuple[float, float]


def cover_fit(window_size: Size, texture_size: Size) -> tuple[float, tuple[float, float]]:
    """Return the uniform scale and position that make a texture cover the window.

    The scaled texture is centred, so any overflow is cut off equally on both sides.
    """
    window_width, window_height = (float(v) for v in window_size)
    texture_width, texture_height = (float(v) for v in texture_size)
    if texture_width <= 0 or texture_height <= 0:
        raise ValueError(f"texture size must be positive, got {texture_size!r}")
    scale = max(window_width / texture_width, window_height / texture_height)
    offset_x = (texture_width * scale - window_width) / 2.0
    offset_y = (texture_height * scale - window_height) / 2.0
    return scale, (-offset_x, -offset_y)


class BackgroundManager:
    """Draws one background image and can fade the screen to black."""

    def __init__(self, window: Any) -> None:
        self._window = window
        self._overlay_size = window.get_size()
        self._image = None
        self._position = (0, 0)
        self._has_background = False
        self._fading = False
        self._hidden = False
        self._fade_opacity = 255.0
        self._fade_duration = 1.0
        self._fade_elapsed = 0.0
        self._fade_alpha = 0
        self._current_background = ""

    def set_background(self, image_path) -> None:
        """Load an image and scale it to cover the window.

        Raises FileNotFoundError or pygame.error if the image cannot be loaded;
        the background is then cleared.
        """
        path = os.fspath(image_path)
        try:
            texture = pygame.image.load(path)
        except (pygame.error, OSError):
            self._has_background = False
            self._current_background = ""
            raise
        width, height = texture.get_size()
        scale, (x, y) = cover_fit(self._window.get_size(), (width, height))
        self._image = pygame.transform.scale(texture, (round(width * scale), round(height * scale)))
        self._position = (round(x), round(y))
        self._has_background = True
        self._hidden = False
        self._current_background = path

    def update(self, delta_time: float) -> None:
        """Advance a running fade by delta_time seconds."""
        if not self._fading:
            return
        self._fade_elapsed += delta_time
        if self._fade_duration > 0:
            ratio = self._fade_elapsed / self._fade_duration
        else:
            ratio = float("inf")
        self._fade_opacity = min(255.0, ratio * 255.0)
        self._fade_alpha = int(self._fade_opacity)
        if self._fade_elapsed >= self._fade_duration:
            self._fading = False
            self._hidden = True

    def draw(self) -> None:
        if self._has_background and not self._hidden:
            self._window.blit(self._image, self._position)
        if self._fading or self._hidden:
            overlay = pygame.Surface(self._overlay_size, pygame.SRCALPHA)
            overlay.fill((0, 0, 0, self._fade_alpha))
            self._window.blit(overlay, (0, 0))

    def start_fade_out(self, duration: float) -> None:
        """Fade the screen to black over duration seconds."""
        self._fade_duration = duration
        self._fade_elapsed = 0.0
        self._fade_opacity = 0.0
        self._fading = True
        self._hidden = False

    def reset_fade(self) -> None:
        """Show the background again after a fade."""
        self._hidden = False
        self._fade_opacity = 255.0
        self._fade_alpha = 255

    @property
    def fading(self) -> bool:
        return self._fading

    @property
    def hidden(self) -> bool:
        return self._hidden

    @property
    def fade_opacity(self) -> float:
        return self._fade_opacity

    @property
    def current_background(self) -> str:
        """Path of the loaded background, or an empty string."""
        return self._current_background