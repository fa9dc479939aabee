"""The song roll: the timeline of regions in the main window."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from .playhead import Playhead
from .styles import COLORS

if TYPE_CHECKING:
    from .project import Project

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3
_TRANSPARENT = (0, 0, 0, 0)
_REGION_COLOR = (20, 20, 100, 127)
_REGION_HOVER_COLOR = (90, 90, 100, 127)

_MODIFIERS = {
    pygame.K_LSHIFT: "is_shift_pressed",
    pygame.K_LCTRL: "is_ctrl_pressed",
    pygame.K_LALT: "is_alt_pressed",
}


class SongRoll:
    """A grid of lanes on which the project's regions are laid out in time."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        project: Project,
        window_handler: Any,
    ) -> None:
        self.x = int(x)
        self.y = int(y)
        self.width = int(width)
        self.height = int(height)
        self.project = project
        self.window_handler = window_handler

        self.cell_height = 50
        self.cell_width = 20
        self.bar_width = 80
        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.scroll_x = 0
        self.scroll_y = 0
        self.lmb = False
        self.rmb = False
        self.scroll_sensitivity = 10
        self.scale_sensitivity = 1
        self.is_shift_pressed = False
        self.is_alt_pressed = False
        self.is_ctrl_pressed = False
        self.hovered_region = -1

        size = (max(self.width, 1), max(self.height, 1))
        self.surface = pygame.Surface(size, pygame.SRCALPHA)
        self.grid_layer = pygame.Surface(size, pygame.SRCALPHA)
        self.region_layer = pygame.Surface(size, pygame.SRCALPHA)
        self.play_head_layer = pygame.Surface(size, pygame.SRCALPHA)
        self.play_head = Playhead(self.play_head_layer, project)

    def render(self, target: pygame.Surface) -> None:
        """Draw grid, regions and play head onto ``target``."""
        self.render_grid()
        self.render_regions()
        self.play_head.render(self.bar_width)
        self.surface.fill(COLORS.background)
        position = (self.x, self.y)
        for layer in (
            self.surface,
            self.grid_layer,
            self.region_layer,
            self.play_head_layer,
        ):
            target.blit(layer, position)

    def _toggle_modifiers(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            attr = _MODIFIERS.get(getattr(event, "key", None))
            if attr is not None:
                setattr(self, attr, event.type == pygame.KEYDOWN)

    def handle_input(self, event: pygame.event.Event) -> None:
        """React to modifier keys and the mouse wheel."""
        self._toggle_modifiers(event)
        if event.type != pygame.MOUSEWHEEL:
            return
        amount = event.y
        if self.is_ctrl_pressed:
            self.bar_width = int(self.bar_width * self.scale_sensitivity**amount)
            if self.bar_width <= 4:
                self.bar_width = 4
            grid_at_x = self.mouse_x / self.cell_width + self.scroll_x / self.cell_width
            self.scroll_x = int(grid_at_x * self.cell_width - self.mouse_x)
        elif self.is_alt_pressed:
            self.cell_height = int(self.cell_height * self.scale_sensitivity**amount)
            smallest = self.height * 12 // 128
            if self.cell_height < smallest or self.cell_height <= 0:
                self.cell_height = smallest
            grid_at_y = self.mouse_y / self.cell_height + self.scroll_y / self.cell_height
            self.scroll_y = int(grid_at_y * self.cell_height - self.mouse_y)
        elif self.is_shift_pressed:
            self.scroll_x -= int(amount * self.scroll_sensitivity)
        else:
            self.scroll_y -= int(amount * self.scroll_sensitivity)

    def render_grid(self) -> None:
        """Draw the bar and lane grid lines."""
        layer = self.grid_layer
        layer.fill(_TRANSPARENT)
        for x in range(0, self.width, self.cell_width):
            pygame.draw.line(layer, COLORS.grid, (x, 0), (x, self.height))
        for y in range(0, self.height, self.cell_height):
            pygame.draw.line(layer, COLORS.grid, (0, y), (self.width, y))

    def render_regions(self) -> None:
        """Draw every region of the project."""
        self.region_layer.fill(_TRANSPARENT)
        for index in range(len(self.project.regions)):
            self.render_region(index)

    def render_region(self, index: int) -> pygame.Rect:
        """Draw region ``index`` and return the rectangle it covers."""
        region = self.project.regions[index]
        color = _REGION_HOVER_COLOR if index == self.hovered_region else _REGION_COLOR
        rect = pygame.Rect(
            int(region.start_time * self.bar_width),
            int(region.y * self.cell_height),
            int(region.length * self.bar_width),
            self.cell_height,
        )
        pygame.draw.rect(self.region_layer, color, rect)
        return rect

    def find_hovered_region(self) -> int:
        """Set and return the index of the region under the mouse, or -1."""
        self.hovered_region = -1
        for index, region in enumerate(self.project.regions):
            left = region.start_time * self.bar_width
            right = (region.length + region.start_time) * self.bar_width
            top = region.y * self.cell_height
            bottom = (region.y + 1) * self.cell_height
            if left < self.mouse_x < right and top < self.mouse_y < bottom:
                self.hovered_region = index
                break
        return self.hovered_region

    def move_mouse(self, x: float, y: float) -> None:
        """Track the mouse position relative to the song roll."""
        self.mouse_x = x
        self.mouse_y = y
        self.find_hovered_region()

    def click_mouse(self, event: pygame.event.Event) -> None:
        """Open the hovered region on left click; track button state."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == _LEFT_BUTTON:
                self.lmb = True
                if self.hovered_region != -1:
                    index = self.hovered_region
                    self.window_handler.create_piano_roll(self.project.regions[index])
                    self.project.set_viewed_element("region", index)
                    self.hovered_region = -1
            if event.button == _RIGHT_BUTTON:
                self.rmb = True
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == _LEFT_BUTTON:
                self.lmb = False
            if event.button == _RIGHT_BUTTON:
                self.rmb = False