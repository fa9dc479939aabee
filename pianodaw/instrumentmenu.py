"""The editor panel showing the selected region or instrument."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .styles import COLORS, main_font

if TYPE_CHECKING:
    from .instrument import Instrument
    from .project import Project

_TRANSPARENT = (0, 0, 0, 0)
_TEXT_COLOR = (255, 255, 255)
_TEXT_LIMIT = 24
_LINE_HEIGHT = 25


class InstrumentMenu:
    """A panel naming the viewed element and where its output goes."""

    def __init__(self, x: int, y: int, width: int, height: int, project: Project) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)
        self.project = project
        self.name = ""
        self.output_type = ""
        self.outputs: list[int] = []
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.lmb = False
        self.rmb = False
        self.instrument: Instrument | None = None
        self.rect = pygame.Rect(self.x, self.y, self.width, self.height)
        self.title_dst = pygame.Rect(0, _LINE_HEIGHT, self.width, _LINE_HEIGHT)
        self.output_dst = pygame.Rect(0, self.height - 100, self.width, _LINE_HEIGHT)
        self.surface = pygame.Surface(
            (max(self.width, 1), max(self.height, 1)), pygame.SRCALPHA
        )

    def _load_viewed(self) -> bool:
        viewed = self.project.viewed_element
        if viewed is None:
            return False
        if viewed.kind == "region":
            element = self.project.regions[viewed.index]
        elif viewed.kind == "instrument":
            element = self.project.instruments[viewed.index]
        else:
            return False
        self.name = element.name
        self.output_type = element.output_type
        return True

    def render(self, target: pygame.Surface) -> None:
        """Draw the panel background and, if something is viewed, its text."""
        pygame.draw.rect(target, COLORS.editor_background, self.rect)
        if not self._load_viewed():
            return
        self.render_text()
        target.blit(self.surface, (self.x, self.y))

    def render_text(self) -> None:
        """Redraw the title and output labels on the panel surface."""
        self.surface.fill(_TRANSPARENT)
        font = main_font()
        if font is None:
            return
        for text, dst in ((self.name, self.title_dst), (self.output_type, self.output_dst)):
            label = font.render(text[:_TEXT_LIMIT], False, _TEXT_COLOR)
            self.surface.blit(pygame.transform.scale(label, dst.size), dst.topleft)

    def click_mouse(self, event: pygame.event.Event) -> None:
        """Take the instrument at the viewed element's index."""
        viewed = self.project.viewed_element
        if viewed is not None:
            self.instrument = self.project.instruments[viewed.index]

    def move_mouse(self, x: float, y: float) -> None:
        """Track the mouse position relative to the panel."""
        self.mouse_x = x
        self.mouse_y = y

    def set_instrument(self, instrument: Instrument) -> None:
        """Show ``instrument`` in the panel."""
        self.instrument = instrument