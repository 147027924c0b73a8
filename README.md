# biringan

*Escape from Biringan City* is a story-driven visual novel built on pygame.
This package holds the game's screens and the parts they are made from.

## What is inside

- `biringan.progress`: the `GameState` enum (`TITLE`, `ABOUT`, `GAMEPLAY`,
  `QUIT`, `LOAD`) that the title screen hands back, the `GameProgress` record
  (`background_image`, `speaker`, `dialogue`) and `save_progress` /
  `load_progress`. A save file holds three lines: the background image, the
  speaker and the dialogue line. Both functions raise `OSError` when the file
  cannot be opened; lines missing from a short file load as empty strings.
- `biringan.sound`: `SoundManager`, with one shared instance from
  `SoundManager.get_instance()`. It loads named sound effects
  (`load_sound`, `play_sound`) and plays one music track at a time
  (`play_music`, `stop_music`, `pause_music`, `resume_music`). Asking for the
  track that is already playing does not restart it. Volumes run from 0 to
  100 (`set_sound_volume`, `set_music_volume`). A file that cannot be opened
  raises `SoundLoadError`; playing a sound name that was never loaded does
  nothing.
- `biringan.background`: `BackgroundManager` scales a background image to
  cover the whole window, centres it, and fades the screen to black over a
  given duration (`start_fade_out`, `update`, `reset_fade`, with the
  `fading`, `hidden`, `fade_opacity` and `current_background` properties).
  `cover_fit` computes that scale and position.
- `biringan.portrait`: `CharacterPortrait`, a character image with a
  `position`, a `scale` and a `visible` flag; it starts hidden. `bounds`
  gives the screen rectangle it covers.
- `biringan.dialogue`: `DialogueEntry` and `DialogueBox`. The box types each
  line out at fifty characters a second (`type_speed`); a mouse click or the
  space bar shows the whole line at once, and a second one moves on to the
  next entry. The box hides itself after the last entry.
- `biringan.about`: `AboutScreen`, a short description and a Back button.
  `run()` returns `AboutState.BACK` when Back is clicked or the window is
  closed.
- `biringan.load_screen`: `LoadScreen`, with Load Saved Game and Back
  buttons. Clicking Load Saved Game prints `Loading saved game...` and keeps
  the screen open; `run()` returns `LoadState.BACK` when Back is clicked or
  the window is closed.
- `biringan.intro`: `PlayIntroScreen` steps through a development notice, an
  age disclaimer and the card "Chapter 1: Biringan", one per left click.
  `run()` returns `IntroState.DONE` after the last one, or `IntroState.QUIT`
  if the window is closed.
- `biringan.title`: `TitleScreen`, the animated title with Play, About, Load
  and Quit buttons. `run()` starts the title music and returns
  `GameState.GAMEPLAY` (stopping the music), `GameState.ABOUT`,
  `GameState.LOAD` or `GameState.QUIT`. `title_motion(time)` gives the
  offsets and scales of the two title lines.
- `biringan.chapter`: `transition_to_chapter(window, font, title_text)` shows
  a chapter title centred on black until a key or mouse button is pressed.
  It returns `True` when the player continued and `False` when the window was
  closed.

Fonts are given as font file paths, or `None` for pygame's default font.
The screens take optional `events`, `mouse_position`, `present` and `clock`
callables, so they can be driven without a real display.

## Saving and loading

```python
from biringan.progress import GameProgress, load_progress, save_progress

save_progress("save.txt", GameProgress("forest.png", "Ana", "Where am I?"))
progress = load_progress("save.txt")
```

## Dialogue

```python
import pygame
from biringan.dialogue import DialogueBox, DialogueEntry

pygame.init()
window = pygame.display.set_mode((1280, 800))
box = DialogueBox(window)
box.start_dialogue([
    DialogueEntry("Where am I?", "Ana"),
    DialogueEntry("Welcome to Biringan.", "Stranger"),
])
```

Call `box.update()` and `box.draw()` every frame and pass input events to
`box.handle_input(event)`.

## Assets

The menu screens look for `simba.png` as their background and the title
screen for `BeginMusic.ogg` as its music, in the working directory. A
missing background image or music file is logged and the screen runs
without it.

## What it does not do

The package has no command to start the game and no main loop: the caller
creates the pygame window and moves between screens using the states they
return. There is no gameplay screen with a story script; `DialogueBox`,
`BackgroundManager` and `CharacterPortrait` are the pieces for one. The Load
screen does not read a save file itself; use `load_progress` for that.

## Tests

The test suite uses pytest and is installed with the `test` extra.