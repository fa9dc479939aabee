"""The project: tracks, instruments, regions and transport state."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .fract import Fract
from .instrument import Instrument
from .mixer import MixerTrack
from .note import Note
from .region import Region


class MidiRouter:
    """Routes MIDI between regions and instruments."""


@dataclass
class ViewedElement:
    """The element shown in the editor panel: its kind and index."""

    kind: str
    index: int


def _fract_to_json(value: Fract) -> list[int]:
    return [value.num, value.den]


def _fract_from_json(value) -> Fract:
    num, den = value
    return Fract(num, den)


def _region_to_json(region: Region) -> dict:
    return {
        "start": _fract_to_json(region.start_time),
        "y": region.y,
        "length": _fract_to_json(region.length),
        "user_set_left": region.user_set_left,
        "user_set_right": region.user_set_right,
        "notes": [
            {
                "start": _fract_to_json(note.start),
                "end": _fract_to_json(note.end),
                "num": _fract_to_json(note.num),
                "temperament": note.temperament,
            }
            for note in region.notes
        ],
    }


def _region_from_json(data: dict) -> Region:
    region = Region(_fract_from_json(data["start"]), data["y"])
    region.length = _fract_from_json(data.get("length", [4, 1]))
    region.user_set_left = bool(data.get("user_set_left", False))
    region.user_set_right = bool(data.get("user_set_right", False))
    region.notes = [
        Note(
            _fract_from_json(item["start"]),
            _fract_from_json(item["end"]),
            _fract_from_json(item["num"]),
            item["temperament"],
        )
        for item in data.get("notes", [])
    ]
    return region


class Project:
    """All state of one song, plus the play/stop transport."""

    def __init__(self, filepath: str = "") -> None:
        self.filepath = filepath
        self.router = MidiRouter()
        self.tempo = 120.0
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.regions: list[Region] = []
        self.instruments: list[Instrument] = []
        self.files: list[Region] = []
        self.recordings: list[Region] = []
        self.automations: list[Region] = []
        self.tracks: list[MixerTrack] = []
        self.viewed_element: ViewedElement | None = None
        self.play_head_start = Fract()
        self.play_head_pos = Fract(0, 1)
        self.is_playing = False
        self.time_seconds = 0.0

        self.load()
        self.set_time(0)

        self.tracks.append(MixerTrack(self))
        self.instruments.append(Instrument(self))
        if not self.regions:
            self.regions.append(Region(Fract(0, 1), 0))

    def load(self) -> None:
        """Read tempo and regions from ``filepath`` when it names an existing file."""
        if not self.filepath:
            return
        path = Path(self.filepath)
        if not path.exists():
            return
        data = json.loads(path.read_text(encoding="utf-8"))
        self.tempo = float(data.get("tempo", self.tempo))
        self.regions = [_region_from_json(item) for item in data.get("regions", [])]

    def save(self) -> None:
        """Write tempo and regions to ``filepath`` when one is set."""
        if not self.filepath:
            return
        data = {
            "tempo": self.tempo,
            "regions": [_region_to_json(region) for region in self.regions],
        }
        Path(self.filepath).write_text(json.dumps(data, indent=2), encoding="utf-8")

    def create_region(self, x: Fract, y: int) -> Region:
        """Add a region starting at ``x`` in lane ``y`` and return it."""
        region = Region(x, y)
        self.regions.append(region)
        return region

    def play(self) -> None:
        """Start playback."""
        if not self.is_playing:
            self.is_playing = True

    def stop(self) -> None:
        """Stop playback and rewind to the play-head start."""
        if self.is_playing:
            self.is_playing = False
            self.set_time(float(self.play_head_start))

    def set_viewed_element(self, kind: str, index: int) -> None:
        """Select the element shown in the editor panel."""
        self.viewed_element = ViewedElement(kind, index)

    def set_time(self, time: float) -> None:
        """Set the transport position in seconds."""
        self.time_seconds = float(time)


class EventManager:
    """Shared view of a project's event-bearing collections."""

    def __init__(self, project: Project) -> None:
        self.project = project
        self.regions = project.regions
        self.instruments = project.instruments
        self.automations = project.automations
        self.files = project.files
        self.recordings = project.recordings

    @property
    def is_playing(self) -> bool:
        return self.project.is_playing

    def tick(self) -> None:
        """Per-frame hook; the event manager schedules nothing on its own."""