import pytest

from pianodaw.instrument import Instrument
from pianodaw.plugin import Plugin
from pianodaw.project import Project


def test_default_labels():
    inst = Project().instruments[0]
    assert inst.name == "Instrument Rack"
    assert inst.output_type == "Output to Mixer Tracks:"


def test_routed_to_first_track():
    project = Project()
    inst = project.instruments[0]
    assert inst.outputs == [project.tracks[0]]
    assert inst in project.tracks[0].child_instruments


def test_custom_plugin_path():
    project = Project()
    inst = Instrument(project, "custom.so")
    assert [p.filepath for p in inst.rack.plugins] == ["custom.so"]


def test_process_renders_plugin():
    inst = Instrument(Project(), "custom.so")
    assert inst.process(16) == Plugin("custom.so").render(16)


def test_add_destination_unknown_track_raises():
    inst = Project().instruments[0]
    with pytest.raises(IndexError):
        inst.add_destination(5)