"""Mixer tracks that sum their children and run them through a rack."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .rack import Rack

if TYPE_CHECKING:
    from .instrument import Instrument
    from .project import Project


class MixerTrack:
    """A bus summing child tracks and instruments into one signal."""

    def __init__(self, project: Project | None) -> None:
        self.project = project
        self.name = "Mixer Track"
        self.rack = Rack()
        self.child_instruments: list[Instrument] = []
        self.child_tracks: list[MixerTrack] = []

    def process(self, frames: int) -> list[float]:
        """Render ``frames`` samples of this track's output."""
        mixed = [0.0] * frames
        for source in (*self.child_tracks, *self.child_instruments):
            mixed = [a + b for a, b in zip(mixed, source.process(frames))]
        return self.rack.process(mixed)