from pianodaw.fract import Fract
from pianodaw.region import Region


def test_defaults():
    region = Region(Fract(0, 1), 0)
    assert region.name == "MIDI Region FX Rack"
    assert region.output_type == "Output to Instruments:"
    assert region.length == Fract(4, 1)
    assert region.notes == []
    assert not region.user_set_left and not region.user_set_right


def test_move_x_adds_offset():
    region = Region(Fract(1, 2), 0)
    region.move_x(Fract(1, 4))
    assert region.start_time == Fract(1, 2) + Fract(1, 4)


def test_move_x_round_trip():
    region = Region(Fract(3, 4), 2)
    region.move_x(Fract(5, 8))
    region.move_x(Fract(-5, 8))
    assert region.start_time == Fract(3, 4)


def test_move_y():
    region = Region(Fract(0, 1), 2)
    region.move_y(3)
    region.move_y(-3)
    assert region.y == 2


def test_resize_right_keeps_start():
    region = Region(Fract(1, 1), 0)
    region.resize(True, Fract(1, 2))
    assert region.start_time == Fract(1, 1)
    assert region.length == Fract(4, 1) + Fract(1, 2)
    assert region.user_set_right


def test_resize_left_keeps_end():
    region = Region(Fract(1, 1), 0)
    end_before = region.start_time + region.length
    region.resize(False, Fract(1, 4))
    assert region.start_time + region.length == end_before
    assert region.start_time == Fract(1, 1) + Fract(1, 4)
    assert region.user_set_left