"""Sound effects and background music."""

from __future__ import annotations

import os
from typing import Any, Optional

import pygame


class SoundLoadError(OSError):
    """A sound or music file could not be opened."""


class _PygameMixer:
    """Mixer backend built on pygame.mixer, initialised on first use."""

    @staticmethod
    def _ensure_init() -> None:
        if not pygame.mixer.get_init():
            pygame.mixer.init()

    def load_sound(self, filename: str) -> Any:
        self._ensure_init()
        return pygame.mixer.Sound(filename)

    def load_music(self, filename: str) -> None:
        self._ensure_init()
        pygame.mixer.music.load(filename)

    def play_music(self, loop: bool) -> None:
        pygame.mixer.music.play(loops=-1 if loop else 0)

    def stop_music(self) -> None:
        pygame.mixer.music.stop()

    def pause_music(self) -> None:
        pygame.mixer.music.pause()

    def unpause_music(self) -> None:
        pygame.mixer.music.unpause()

    def set_music_volume(self, volume: float) -> None:
        pygame.mixer.music.set_volume(volume)

    def music_playing(self) -> bool:
        return bool(pygame.mixer.music.get_busy())


class SoundManager:
    """Process-wide registry of named sound effects plus one music track.

    Volumes run from 0 to 100.
    """

    _instance: Optional["SoundManager"] = None

    def __init__(self, mixer: Any = None) -> None:
        self._mixer = mixer if mixer is not None else _PygameMixer()
        self._sounds: dict[str, Any] = {}
        self._has_music = False
        self._music_opened = False
        self._paused = False
        self._loop = True
        self.current_music_file = ""
        self._music_volume = 100.0
        self._sound_volume = 100.0

    @classmethod
    def get_instance(cls) -> "SoundManager":
        """Return the shared manager, creating it on first call."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def music_volume(self) -> float:
        return self._music_volume

    @property
    def sound_volume(self) -> float:
        return self._sound_volume

    def load_sound(self, name: str, filename: str) -> None:
        """Register a sound effect under name. Raises SoundLoadError on failure."""
        try:
            sound = self._mixer.load_sound(os.fspath(filename))
        except (pygame.error, OSError) as exc:
            raise SoundLoadError(f"cannot load sound {filename!r}: {exc}") from exc
        self._sounds[name] = sound

    def play_sound(self, name: str) -> None:
        """Play a registered sound; unknown names are ignored."""
        sound = self._sounds.get(name)
        if sound is None:
            return
        sound.set_volume(self._sound_volume / 100.0)
        sound.play()

    def set_sound_volume(self, volume: float) -> None:
        self._sound_volume = volume

    def _music_is_playing(self) -> bool:
        return self._music_opened and not self._paused and self._mixer.music_playing()

    def play_music(self, filename: str, loop: bool = True) -> None:
        """Start a music track, leaving it alone if it is already playing.

        Raises SoundLoadError if the file cannot be opened.
        """
        filename = os.fspath(filename)
        if self._music_is_playing() and self.current_music_file == filename:
            return
        self.stop_music()
        self._has_music = True
        self._music_opened = False
        self._paused = False
        try:
            self._mixer.load_music(filename)
        except (pygame.error, OSError) as exc:
            raise SoundLoadError(f"cannot open music {filename!r}: {exc}") from exc
        self._music_opened = True
        self.current_music_file = filename
        self._loop = loop
        self._mixer.set_music_volume(self._music_volume / 100.0)
        self._mixer.play_music(loop)

    def stop_music(self) -> None:
        if not self._has_music:
            return
        if self._music_opened:
            self._mixer.stop_music()
        self._paused = False
        self.current_music_file = ""

    def pause_music(self) -> None:
        if self._music_is_playing():
            self._mixer.pause_music()
            self._paused = True

    def resume_music(self) -> None:
        """Continue paused music, or restart stopped music from the beginning."""
        if not self._music_opened:
            return
        if self._paused:
            self._mixer.unpause_music()
            self._paused = False
        elif not self._mixer.music_playing():
            self._mixer.play_music(self._loop)

    def set_music_volume(self, volume: float) -> None:
        self._music_volume = volume
        if self._music_opened:
            self._mixer.set_music_volume(volume / 100.0)