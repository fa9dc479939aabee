import pygame
import pytest

from pianodaw.instrumentmenu import InstrumentMenu
from pianodaw.project import Project
from pianodaw.styles import COLORS


@pytest.fixture
def menu():
    return InstrumentMenu(100, 20, 200, 300, Project())


@pytest.fixture
def target():
    return pygame.Surface((400, 400), pygame.SRCALPHA)


def test_label_rects_from_panel_size(menu):
    assert menu.title_dst.width == menu.width
    assert menu.output_dst.y == menu.height - 100


def test_render_without_selection_keeps_text(menu, target):
    menu.render(target)
    assert menu.name == ""
    assert tuple(target.get_at((menu.x + 5, menu.y + 5))) == COLORS.editor_background
    assert tuple(target.get_at((5, 5)))[3] == 0


def test_render_viewed_instrument(menu, target):
    menu.project.set_viewed_element("instrument", 0)
    menu.render(target)
    assert menu.name == "Instrument Rack"
    assert menu.output_type == "Output to Mixer Tracks:"


def test_render_viewed_region(menu, target):
    menu.project.set_viewed_element("region", 0)
    menu.render(target)
    assert menu.name == "MIDI Region FX Rack"
    assert menu.output_type == "Output to Instruments:"


def test_render_unknown_kind_ignored(menu, target):
    menu.project.set_viewed_element("mixer", 0)
    menu.render(target)
    assert menu.name == ""
    assert menu.output_type == ""


def test_render_bad_index_raises(menu, target):
    menu.project.set_viewed_element("instrument", 5)
    with pytest.raises(IndexError):
        menu.render(target)


def test_click_takes_viewed_instrument(menu):
    menu.project.set_viewed_element("instrument", 0)
    menu.click_mouse(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1))
    assert menu.instrument is menu.project.instruments[0]


def test_set_instrument_and_move_mouse(menu):
    instrument = menu.project.instruments[0]
    menu.set_instrument(instrument)
    menu.move_mouse(3.5, 7.0)
    assert menu.instrument is instrument
    assert (menu.mouse_x, menu.mouse_y) == (3.5, 7.0)