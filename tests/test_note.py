from pianodaw.fract import Fract
from pianodaw.note import Note


def make_note():
    return Note(Fract(0, 1), Fract(1, 1), Fract(60, 1), 12)


def test_destination_tracks_default_to_no_track():
    note = make_note()
    assert note.destination_tracks == [-1] * 16


def test_modulation_defaults_are_zero():
    note = make_note()
    assert (note.midi_num, note.pitch_bend, note.mod_x, note.mod_y, note.mod_z) == (
        0,
        0,
        0,
        0,
        0,
    )


def test_fields_hold_constructor_values():
    note = Note(Fract(1, 4), Fract(3, 4), Fract(61, 1), 19)
    assert note.start == Fract(1, 4)
    assert note.end == Fract(3, 4)
    assert note.num == Fract(61, 1)
    assert note.temperament == 19


def test_destination_lists_are_independent():
    a, b = make_note(), make_note()
    a.destination_tracks[0] = 3
    assert b.destination_tracks[0] == -1