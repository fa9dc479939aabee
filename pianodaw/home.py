"""The main window: instrument list, song roll, editor panel and transport."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from .instrumentlist import InstrumentList
from .instrumentmenu import InstrumentMenu
from .songroll import SongRoll
from .widgets import Button, ControlArea

if TYPE_CHECKING:
    from .project import Project

_LEFT_BUTTON = 1
_BACKGROUND = (100, 100, 100, 255)


class Home:
    """Lays out the panels of the main window and routes input to them."""

    def __init__(self, project: Project, window_handler: Any) -> None:
        self.project = project
        self.window_handler = window_handler
        self.surface: pygame.Surface = window_handler.surface
        self.window_width = int(window_handler.window_width)
        self.window_height = int(window_handler.window_height)

        self.controls_height = 50
        self.inst_width = 200
        self.mixer_height = 200
        self.inst_menu_width = 200

        self.mouse_x = 0.0
        self.mouse_y = 0.0

        controls = self.controls_height
        self.controls = ControlArea(controls, self.window_width)

        side = controls // 3
        self.buttons = [
            Button("play", self.inst_width + controls // 5, controls // 5, side, side),
            Button("stop", self.inst_width + 6 * controls // 5, controls // 5, side, side),
        ]
        self.hovered_button: Button | None = None

        self.insts = InstrumentList(
            controls, self.inst_width, self.window_height - self.mixer_height, project
        )
        self.song = SongRoll(
            self.inst_width,
            controls,
            self.window_width - self.inst_width - self.inst_menu_width,
            self.window_height - controls - self.mixer_height,
            project,
            window_handler,
        )
        self.instrument_menu = InstrumentMenu(
            self.window_width - self.inst_menu_width,
            controls,
            self.inst_menu_width,
            self.window_height - self.mixer_height - controls,
            project,
        )

    def tick(self) -> None:
        """Redraw every panel of the main window."""
        self.surface.fill(_BACKGROUND)
        self.insts.render(self.surface)
        self.controls.render(self.surface)
        self.song.render(self.surface)
        self.instrument_menu.render(self.surface)
        for button in self.buttons:
            button.render(self.surface)

    def handle_input(self, event: pygame.event.Event) -> bool:
        """Route one event to the panel under the mouse; return whether it was used."""
        if event.type == pygame.MOUSEMOTION:
            self.mouse_x, self.mouse_y = (float(v) for v in event.pos)
            panel_y = self.mouse_y - self.controls_height
            self.song.move_mouse(self.mouse_x - self.inst_width, panel_y)
            self.insts.move_mouse(self.mouse_x, panel_y)
            self.instrument_menu.move_mouse(
                self.mouse_x - self.inst_width - self.window_width + self.inst_menu_width,
                panel_y,
            )
            self.hover_buttons()
            return True

        if event.type != pygame.MOUSEBUTTONDOWN:
            return False

        if self.mouse_on_song():
            self.song.click_mouse(event)
            return True
        if self.mouse_on_inst():
            self.insts.click_mouse(event)
            return True
        if self.mouse_on_editor():
            self.instrument_menu.click_mouse(event)
            return True

        if event.button != _LEFT_BUTTON or self.hovered_button is None:
            return False
        actions = {"play": self.project.play, "stop": self.project.stop}
        action = actions.get(self.hovered_button.title)
        if action is None:
            return False
        action()
        self.hovered_button.hovered = False
        self.hovered_button = None
        return True

    def hover_buttons(self) -> None:
        """Mark the button under the mouse as hovered."""
        for button in self.buttons:
            if button.contains(self.mouse_x, self.mouse_y):
                self.hovered_button = button
                button.hovered = True
                break
            button.hovered = False
            self.hovered_button = None

    def mouse_on_song(self) -> bool:
        """Whether the mouse is over the song roll."""
        return (
            self.inst_width < self.mouse_x < self.window_width - self.inst_menu_width
            and self.controls_height < self.mouse_y < self.window_height - self.mixer_height
        )

    def mouse_on_inst(self) -> bool:
        """Whether the mouse is over the instrument list."""
        return (
            0 < self.mouse_x < self.inst_width
            and self.controls_height < self.mouse_y < self.window_height - self.mixer_height
        )

    def mouse_on_editor(self) -> bool:
        """Whether the mouse is over the editor panel."""
        return (
            self.window_width - self.inst_menu_width < self.mouse_x < self.window_width
            and self.controls_height < self.mouse_y < self.window_height - self.mixer_height
        )