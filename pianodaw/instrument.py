"""Instruments: plugin racks that feed mixer tracks."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .rack import Rack

if TYPE_CHECKING:
    from .mixer import MixerTrack
    from .project import Project

DEFAULT_PLUGIN_PATH = "/usr/lib/vst3/Vital.vst3/Contents/x86_64-linux/Vital.so"


class Instrument:
    """A rack of plugins whose output is routed to mixer tracks."""

    def __init__(self, project: Project, plugin_path: str = DEFAULT_PLUGIN_PATH) -> None:
        self.project = project
        self.name = "Instrument Rack"
        self.output_type = "Output to Mixer Tracks:"
        self.outputs: list[MixerTrack] = []
        self.rack = Rack()
        self.add_destination(0)
        self.rack.add_plugin(plugin_path)

    def add_destination(self, track_index: int) -> None:
        """Route this instrument into the project's mixer track ``track_index``."""
        track = self.project.tracks[track_index]
        self.outputs.append(track)
        track.child_instruments.append(self)

    def process(self, frames: int) -> list[float]:
        """Render ``frames`` samples from the instrument's rack."""
        return self.rack.process([0.0] * frames)