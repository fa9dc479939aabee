"""The play-head line drawn over the song roll."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .fract import Fract
from .styles import COLORS

if TYPE_CHECKING:
    from .project import Project

_TRANSPARENT = (0, 0, 0, 0)


class Playhead:
    """A vertical line marking the transport position on ``surface``."""

    def __init__(self, surface: pygame.Surface, project: Project) -> None:
        self.surface = surface
        self.project = project
        self.pos = Fract(0, 1)
        self.width, self.height = surface.get_size()
        self.position_px = 0.0

    def set_time(self, time: Fract) -> None:
        """Place the play head at musical time ``time``."""
        self.pos = time

    def time_px(self, bar_width: float) -> float:
        """Compute and return the play-head x position for ``bar_width`` pixels per bar."""
        self.position_px = (
            self.project.tempo * self.project.time_seconds / 60 * bar_width
        )
        return self.position_px

    def render(self, bar_width: float) -> None:
        """Clear the surface and draw the play-head line."""
        x = self.time_px(bar_width)
        self.surface.fill(_TRANSPARENT)
        pygame.draw.line(self.surface, COLORS.play_head, (x, 0), (x, self.height))