"""Game states and the plain-text save file."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class GameState(enum.Enum):
    """Top-level screens the game moves between."""

    TITLE = enum.auto()
    ABOUT = enum.auto()
    GAMEPLAY = enum.auto()
    QUIT = enum.auto()
    LOAD = enum.auto()


@dataclass
class GameProgress:
    """Where the player stopped: background, speaker and dialogue line."""

    background_image: str = ""
    speaker: str = ""
    dialogue: str = ""


def save_progress(filename: PathLike, progress: GameProgress) -> None:
    """Write the progress as three lines. Raises OSError if the file cannot be written."""
    with open(filename, "w", encoding="utf-8") as file:
        file.write(f"{progress.background_image}\n")
        file.write(f"{progress.speaker}\n")
        file.write(f"{progress.dialogue}\n")


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def load_progress(filename: PathLike) -> GameProgress:
    """Read progress saved by save_progress.

    Lines missing from a short file come back empty. Raises OSError if the
    file cannot be opened.
    """
    with open(filename, encoding="utf-8") as file:
        background, speaker, dialogue = (_strip_newline(file.readline()) for _ in range(3))
    return GameProgress(background_image=background, speaker=speaker, dialogue=dialogue)