import pytest

from pianodaw.plugin import Plugin


def test_keeps_filepath():
    assert Plugin("synth.so").filepath == "synth.so"


def test_render_length_matches_frames():
    assert len(Plugin("synth.so").render(64)) == 64


def test_render_amplitude_is_bounded():
    samples = Plugin("synth.so").render(512)
    assert all(-0.5 <= s <= 0.5 for s in samples)


def test_render_starts_at_zero():
    assert Plugin("synth.so").render(32)[0] == 0.0


def test_render_does_not_depend_on_plugin_path():
    first = Plugin("first.so").render(64)
    second = Plugin("second.so").render(64)
    assert first == second
    assert any(abs(sample) > 0.1 for sample in first)


def test_render_zero_frames():
    assert Plugin("synth.so").render(0) == []


def test_render_negative_frames_raises():
    with pytest.raises(ValueError):
        Plugin("synth.so").render(-1)