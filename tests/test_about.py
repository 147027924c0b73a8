import logging

import pygame
import pytest

from biringan.about import BLACK, RED, AboutScreen, AboutState

GREEN = (0, 200, 0)


class Inputs:
    """Scripted events, a movable mouse and a frame counter."""

    def __init__(self, batches=()):
        self.mouse = (0, 0)
        self.frames = 0
        self._batches = iter(batches)

    def events(self):
        return next(self._batches, [])

    def mouse_position(self):
        return self.mouse

    def present(self):
        self.frames += 1


def point_at_back(screen, inputs):
    left, top, width, height = screen.back_button.rect
    inputs.mouse = (left + width / 2, top + height / 2)
    return inputs.mouse


def mouse_down(button=1):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button)


@pytest.fixture
def window():
    pygame.font.init()
    return pygame.Surface((1280, 800))


@pytest.fixture
def missing(tmp_path):
    return tmp_path / "missing.png"


@pytest.mark.parametrize(
    ("button", "on_back", "expected"),
    [(1, True, AboutState.BACK), (1, False, AboutState.ABOUT), (3, True, AboutState.ABOUT)],
)
def test_click_handling(window, missing, button, on_back, expected):
    inputs = Inputs([[mouse_down(button)]])
    screen = AboutScreen(
        window,
        None,
        None,
        background=missing,
        events=inputs.events,
        mouse_position=inputs.mouse_position,
        present=inputs.present,
    )
    if on_back:
        point_at_back(screen, inputs)
    else:
        inputs.mouse = (5, 5)
    assert screen.handle_events() is expected


def test_hover_highlights_back_button(window, missing):
    inputs = Inputs()
    screen = AboutScreen(
        window,
        None,
        None,
        background=missing,
        events=inputs.events,
        mouse_position=inputs.mouse_position,
        present=inputs.present,
    )
    screen.handle_mouse_hover(point_at_back(screen, inputs))
    assert screen.back_button.color == RED
    screen.handle_mouse_hover((1, 1))
    assert screen.back_button.color == BLACK


def test_run_returns_back_when_window_closed(window, missing):
    inputs = Inputs([[pygame.event.Event(pygame.QUIT)]])
    screen = AboutScreen(
        window,
        None,
        None,
        background=missing,
        events=inputs.events,
        mouse_position=inputs.mouse_position,
        present=inputs.present,
    )
    assert screen.run() is AboutState.BACK
    assert screen.closed is True
    assert inputs.frames == 0


def test_run_draws_until_back_clicked(window, missing):
    inputs = Inputs([[], [], [mouse_down()]])
    screen = AboutScreen(
        window,
        None,
        None,
        background=missing,
        events=inputs.events,
        mouse_position=inputs.mouse_position,
        present=inputs.present,
    )
    point_at_back(screen, inputs)
    assert screen.run() is AboutState.BACK
    assert inputs.frames == 2


def test_missing_background_is_logged(window, missing, caplog):
    inputs = Inputs()
    with caplog.at_level(logging.ERROR):
        screen = AboutScreen(
            window,
            None,
            None,
            background=missing,
            events=inputs.events,
            mouse_position=inputs.mouse_position,
            present=inputs.present,
        )
    assert "Failed to load" in caplog.text
    assert screen.back_button.color == BLACK


def test_background_covers_window(tmp_path):
    pygame.font.init()
    image = pygame.Surface((10, 10))
    image.fill(GREEN)
    path = tmp_path / "bg.bmp"
    pygame.image.save(image, str(path))
    window = pygame.Surface((100, 50))
    inputs = Inputs()
    screen = AboutScreen(
        window,
        None,
        None,
        background=path,
        events=inputs.events,
        mouse_position=inputs.mouse_position,
        present=inputs.present,
    )
    screen.draw()
    assert inputs.frames == 1
    assert tuple(window.get_at((5, 5)))[:3] == GREEN
    assert tuple(window.get_at((99, 49)))[:3] == GREEN