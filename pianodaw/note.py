"""A single note placed inside a region."""

from __future__ import annotations

from dataclasses import dataclass, field

from .fract import Fract

DESTINATION_SLOTS = 16


@dataclass
class Note:
    """A note spanning ``start`` to ``end`` at pitch ``num`` in a given temperament."""

    start: Fract
    end: Fract
    num: Fract
    temperament: float
    midi_num: int = 0
    pitch_bend: int = 0
    mod_x: int = 0
    mod_y: int = 0
    mod_z: int = 0
    destination_tracks: list[int] = field(
        default_factory=lambda: [-1] * DESTINATION_SLOTS
    )

    def play(self) -> float:
        """Return how many bars the note sounds for."""
        return float(self.end - self.start)