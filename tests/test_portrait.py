import pygame
import pytest

from biringan.portrait import CharacterPortrait

WHITE = (255, 255, 255)
BLUE = (10, 20, 200)


@pytest.fixture
def window():
    surface = pygame.Surface((120, 120))
    surface.fill(WHITE)
    return surface


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((4, 5))
    surface.fill(BLUE)
    path = tmp_path / "portrait.bmp"
    pygame.image.save(surface, str(path))
    return path


def test_hidden_by_default(window, image_path):
    portrait = CharacterPortrait()
    portrait.load(image_path)
    portrait.draw(window)
    assert portrait.visible is False
    assert window.get_at((0, 0))[:3] == WHITE


def test_bounds_without_image(image_path):
    portrait = CharacterPortrait()
    portrait.position = (7.0, 9.0)
    assert portrait.bounds == (7.0, 9.0, 0.0, 0.0)


def test_bounds_with_scale(image_path):
    portrait = CharacterPortrait()
    portrait.load(image_path)
    portrait.position = (10.0, 20.0)
    portrait.scale = (2.0, 3.0)
    assert portrait.bounds == (10.0, 20.0, 8.0, 15.0)


def test_negative_scale_extends_left(image_path):
    portrait = CharacterPortrait()
    portrait.load(image_path)
    portrait.position = (50.0, 50.0)
    portrait.scale = (-2.0, 1.0)
    left, top, width, _ = portrait.bounds
    assert left < 50.0
    assert left + width == 50.0
    assert top == 50.0


def test_visible_portrait_is_drawn_inside_bounds(window, image_path):
    portrait = CharacterPortrait()
    portrait.load(image_path)
    portrait.position = (30.0, 40.0)
    portrait.scale = (5.0, 4.0)
    portrait.visible = True
    portrait.draw(window)
    left, top, width, height = portrait.bounds
    assert window.get_at((int(left), int(top)))[:3] == BLUE
    assert window.get_at((int(left + width) - 1, int(top + height) - 1))[:3] == BLUE
    assert window.get_at((int(left + width), int(top)))[:3] == WHITE
    assert window.get_at((int(left) - 1, int(top)))[:3] == WHITE


def test_failed_load_keeps_previous_image(image_path, tmp_path):
    portrait = CharacterPortrait()
    portrait.load(image_path)
    before = portrait.bounds
    with pytest.raises((FileNotFoundError, pygame.error)):
        portrait.load(tmp_path / "absent.bmp")
    assert portrait.bounds == before