"""Sound-producing units held in a rack."""

from __future__ import annotations

import math


class Plugin:
    """A rack slot identified by its file path, rendering a test tone."""

    def __init__(self, filepath: str) -> None:
        self.filepath = str(filepath)
        self.vendor = ""
        self.url = ""
        self.email = ""
        self.flags = 0

    def render(self, frames: int) -> list[float]:
        """Return ``frames`` samples of the plugin's output."""
        if frames < 0:
            raise ValueError("frames must not be negative")
        step = 2.0 * math.pi * 440.0 * frames / 1000.0
        return [0.5 * math.sin(step * i) for i in range(frames)]

    def __repr__(self) -> str:
        return f"Plugin({self.filepath!r})"