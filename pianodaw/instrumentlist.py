"""The list of instruments down the left side of the main window."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from .project import Project

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3
_TRANSPARENT = (0, 0, 0, 0)
_BACKGROUND = (28, 28, 28, 255)
_ROW = (40, 40, 40, 255)
_ROW_HOVER = (140, 140, 140, 255)
_SEPARATOR = (20, 20, 20, 255)


class InstrumentList:
    """One row per project instrument; clicking a row opens it in the editor panel."""

    def __init__(self, y: int, width: int, height: int, project: Project) -> None:
        self.project = project
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)
        self.instrument_height = 50
        self.hovered_instrument = -1
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.lmb = False
        self.rmb = False
        size = (max(self.width, 1), max(self.height, 1))
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self.rows_layer = pygame.Surface(size, pygame.SRCALPHA)

    def render(self, target: pygame.Surface) -> None:
        """Draw the list onto ``target``."""
        self.rows_layer.fill(_TRANSPARENT)
        for index in range(len(self.project.instruments)):
            self.render_instrument(index)
        pygame.draw.line(
            self.rows_layer, _SEPARATOR, (self.width, 0), (self.width, self.height)
        )
        self.surface.fill(_BACKGROUND)
        target.blit(self.surface, (0, 0))
        target.blit(self.rows_layer, (0, 0))

    def render_instrument(self, index: int) -> pygame.Rect:
        """Draw row ``index`` and return the rectangle it covers."""
        top = index * self.instrument_height + self.y
        rect = pygame.Rect(0, top, self.width, self.instrument_height)
        color = _ROW_HOVER if index == self.hovered_instrument else _ROW
        pygame.draw.rect(self.rows_layer, color, rect)
        line_y = (index + 1) * self.instrument_height - 1 + self.y
        pygame.draw.line(self.rows_layer, _SEPARATOR, (0, line_y), (self.width, line_y))
        return rect

    def move_mouse(self, x: float, y: float) -> None:
        """Track the mouse position relative to the list."""
        self.mouse_x = x
        self.mouse_y = y
        self.find_hovered_instrument()

    def find_hovered_instrument(self) -> int:
        """Set and return the index of the row under the mouse, or -1."""
        self.hovered_instrument = -1
        row = self.instrument_height
        for index in range(len(self.project.instruments)):
            if (
                0 < self.mouse_x < self.width
                and row * index < self.mouse_y < row * (index + 1)
            ):
                self.hovered_instrument = index
                break
        return self.hovered_instrument

    def click_mouse(self, event: pygame.event.Event) -> None:
        """Select the hovered instrument on left click; track button state."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == _LEFT_BUTTON:
                self.lmb = True
                if self.hovered_instrument != -1:
                    self.project.set_viewed_element("instrument", self.hovered_instrument)
                    self.hovered_instrument = -1
            if event.button == _RIGHT_BUTTON:
                self.rmb = True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == _LEFT_BUTTON:
                self.lmb = False
            if event.button == _RIGHT_BUTTON:
                self.rmb = False