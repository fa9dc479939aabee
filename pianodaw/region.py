"""MIDI regions placed on the song timeline."""

from __future__ import annotations

from .fract import Fract
from .note import Note


class Region:
    """A block of notes on the song roll, positioned in bars and lanes."""

    def __init__(self, start_time: Fract, y: float) -> None:
        self.start_time = start_time
        self.y = y
        self.name = "MIDI Region FX Rack"
        self.outputs: list[int] = []
        self.output_type = "Output to Instruments:"
        self.notes: list[Note] = []
        self.length = Fract(4, 1)
        self.user_set_right = False
        self.user_set_left = False

    def move_x(self, dx: Fract) -> None:
        """Shift the region along the timeline."""
        self.start_time = self.start_time + dx

    def move_y(self, dy: int) -> None:
        """Shift the region by a number of lanes."""
        self.y = self.y + dy

    def resize(self, right_side: bool, ds: Fract) -> None:
        """Drag the right or left edge of the region by ``ds``."""
        if right_side:
            self.user_set_right = True
            self.length = self.length + ds
        else:
            self.user_set_left = True
            self.length = self.length - ds
            self.start_time = self.start_time + ds

    def __repr__(self) -> str:
        return f"Region(start_time={self.start_time!r}, y={self.y!r}, length={self.length!r})"