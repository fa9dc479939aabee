"""Simple widgets of the main window: buttons and the control strip."""

from __future__ import annotations

import pygame

_HOVER_COLOR = (20, 20, 20, 255)
_IDLE_COLOR = (255, 255, 255, 255)
_CONTROL_COLOR = (150, 150, 150, 255)


class Button:
    """A titled rectangle that highlights while hovered."""

    def __init__(
        self, title: str, x: float, y: float, width: float = 50, height: float = 50
    ) -> None:
        self.title = title
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.hovered = False
        self.color = _IDLE_COLOR
        self.surface = pygame.Surface(
            (max(int(self.width), 1), max(int(self.height), 1)), pygame.SRCALPHA
        )

    def update_color(self) -> None:
        """Pick the fill colour from the hover state."""
        self.color = _HOVER_COLOR if self.hovered else _IDLE_COLOR

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies on the button, edges included."""
        return (
            self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height
        )

    def render(self, target: pygame.Surface) -> None:
        """Draw the button onto ``target``."""
        self.update_color()
        self.surface.fill(self.color)
        target.blit(self.surface, (int(self.x), int(self.y)))


class ControlArea:
    """The grey strip holding the transport controls."""

    def __init__(self, height: int, width: int) -> None:
        self.x = 0
        self.y = 0
        self.height = int(height)
        self.width = int(width)
        self.surface = pygame.Surface(
            (max(self.width, 1), max(self.height, 1)), pygame.SRCALPHA
        )

    def render(self, target: pygame.Surface) -> None:
        """Draw the strip onto ``target``."""
        self.surface.fill(_CONTROL_COLOR)
        target.blit(self.surface, (self.x, self.y))