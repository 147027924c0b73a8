import pygame
import pytest

from biringan.dialogue import DialogueBox, DialogueEntry

WHITE = (255, 255, 255)
GREEN = (20, 180, 40)
LONG_TEXT = "The road to the city is closed tonight, and the lanterns have all gone out along the river."
ENTRIES = [DialogueEntry(LONG_TEXT, "Mira"), DialogueEntry("Who goes there?", "Guard")]


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def click(box, times=1):
    for _ in range(times):
        box.handle_input(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))


def key(code):
    return pygame.event.Event(pygame.KEYDOWN, key=code)


def pixel(surface, point):
    return tuple(surface.get_at(point))[:3]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def window():
    surface = pygame.Surface((1000, 400))
    surface.fill(WHITE)
    return surface


@pytest.fixture
def box(window, clock):
    return DialogueBox(window, clock=clock)


@pytest.fixture
def started(box):
    box.start_dialogue(ENTRIES)
    return box


def test_starts_hidden(box):
    assert box.visible is False
    assert box.current_dialogue == ""


def test_start_shows_first_entry(started):
    assert started.visible
    assert started.current_dialogue == LONG_TEXT
    assert started.current_speaker == "Mira"
    assert started.displayed_text == ""


def test_typing_reveals_prefix(started, clock):
    clock.now = 0.5
    started.update()
    shown = started.displayed_text
    assert LONG_TEXT.startswith(shown)
    assert 0 < len(shown) < len(LONG_TEXT)


def test_typing_never_goes_backwards(started, clock):
    clock.now = 1.0
    started.update()
    first = started.displayed_text
    clock.now = 1.5
    started.update()
    assert started.displayed_text.startswith(first)
    assert len(started.displayed_text) > len(first)


def test_typing_finishes_with_full_text(started, clock):
    clock.now = 60.0
    started.update()
    assert started.displayed_text == LONG_TEXT


def test_click_while_typing_reveals_all(started):
    click(started)
    assert started.displayed_text == LONG_TEXT
    assert started.current_speaker == "Mira"


def test_click_after_typing_advances(started):
    click(started, 2)
    assert started.current_dialogue == "Who goes there?"
    assert started.current_speaker == "Guard"
    assert started.displayed_text == ""


def test_typing_clock_restarts_for_next_line(started, clock):
    clock.now = 60.0
    started.update()
    click(started)
    started.update()
    assert started.displayed_text == ""


def test_space_key_advances_other_keys_do_not(started):
    started.handle_input(key(pygame.K_a))
    assert started.displayed_text == ""
    started.handle_input(key(pygame.K_SPACE))
    assert started.displayed_text == LONG_TEXT


def test_box_hides_after_last_entry(started):
    click(started, 4)
    assert started.visible is False


def test_input_ignored_when_hidden(box):
    click(box)
    assert box.visible is False
    assert box.current_dialogue == ""


def test_empty_dialogue_still_marks_visible(box):
    box.start_dialogue([])
    assert box.visible is True
    assert box.current_dialogue == ""


def test_restart_replaces_queue(started):
    started.start_dialogue([DialogueEntry("Again.", "Lola")])
    click(started, 2)
    assert started.visible is False


def test_draw_hidden_leaves_window(box, window):
    box.draw()
    assert box.visible is False
    assert pixel(window, (500, 300)) == WHITE


def test_draw_shades_box_area(box, window):
    box.start_dialogue([DialogueEntry("Hi", "Mira")])
    box.draw()
    assert box.visible is True
    assert box.current_speaker == "Mira"
    red, green, blue = pixel(window, (940, 360))
    assert red == green == blue
    assert red < 255
    assert pixel(window, (500, 5)) == WHITE


def test_background_stretches_to_window(box, window, tmp_path):
    image = pygame.Surface((10, 30))
    image.fill(GREEN)
    path = tmp_path / "bg.bmp"
    pygame.image.save(image, str(path))
    box.set_background(path)
    box.draw_background()
    assert pixel(window, (0, 0)) == GREEN
    assert pixel(window, (999, 399)) == GREEN


def test_missing_background_raises_and_draws_nothing(box, window, tmp_path):
    with pytest.raises((FileNotFoundError, pygame.error)):
        box.set_background(tmp_path / "absent.bmp")
    box.draw_background()
    assert pixel(window, (0, 0)) == WHITE