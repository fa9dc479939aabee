import pygame
import pytest

from pianodaw.fract import Fract
from pianodaw.project import Project, ViewedElement
from pianodaw.songroll import SongRoll


class _Handler:
    def __init__(self):
        self.opened = []

    def create_piano_roll(self, region):
        self.opened.append(region)


@pytest.fixture
def song():
    return SongRoll(200, 50, 400, 300, Project(), _Handler())


def test_hover_default_region(song):
    song.move_mouse(10, 10)
    assert song.hovered_region == 0


def test_hover_outside_region(song):
    song.move_mouse(10, song.cell_height + 10)
    assert song.hovered_region == -1
    song.move_mouse(song.project.regions[0].length * song.bar_width + 5, 10)
    assert song.hovered_region == -1


def test_click_opens_hovered_region(song):
    song.move_mouse(10, 10)
    song.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1))
    assert song.window_handler.opened == [song.project.regions[0]]
    assert song.project.viewed_element == ViewedElement("region", 0)
    assert song.hovered_region == -1
    assert song.lmb


def test_click_without_hover_opens_nothing(song):
    song.move_mouse(10, 200)
    song.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1))
    assert song.window_handler.opened == []
    assert song.project.viewed_element is None


def test_button_state(song):
    song.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3))
    assert song.rmb
    song.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONUP, button=3))
    song.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONUP, button=1))
    assert not song.rmb and not song.lmb


def test_wheel_scrolls_vertically(song):
    song.handle_input(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
    assert song.scroll_y == -song.scroll_sensitivity
    assert song.scroll_x == 0


def test_shift_wheel_scrolls_horizontally(song):
    song.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LSHIFT))
    assert song.is_shift_pressed
    song.handle_input(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=1))
    assert song.scroll_x == -song.scroll_sensitivity
    song.handle_input(pygame.event.Event(pygame.KEYUP, key=pygame.K_LSHIFT))
    assert not song.is_shift_pressed


def test_ctrl_wheel_keeps_width_at_unit_sensitivity(song):
    before = song.bar_width
    song.handle_input(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LCTRL))
    song.handle_input(pygame.event.Event(pygame.MOUSEWHEEL, x=0, y=3))
    assert song.bar_width == before
    assert song.scroll_y == 0


def test_render_region_rect_follows_region(song):
    region = song.project.regions[0]
    region.move_x(Fract(1, 1))
    region.move_y(2)
    rect = song.render_region(0)
    assert rect.x == song.bar_width
    assert rect.y == 2 * song.cell_height
    assert rect.height == song.cell_height
    assert rect.width == int(region.length * song.bar_width)


def test_render_regions_paints_layer(song):
    song.render_regions()
    assert tuple(song.region_layer.get_at((5, 5))) == (20, 20, 100, 127)
    song.move_mouse(10, 10)
    song.render_regions()
    assert tuple(song.region_layer.get_at((5, 5))) == (90, 90, 100, 127)


def test_render_onto_target(song):
    target = pygame.Surface((700, 400), pygame.SRCALPHA)
    song.render(target)
    assert tuple(target.get_at((0, 0)))[3] == 0
    assert tuple(target.get_at((song.x + 5, song.y + 5)))[3] == 255