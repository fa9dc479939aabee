"""The window handler: the main window, piano-roll editors and event routing."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

import pygame

from .home import Home
from .pianoroll import PianoRoll

if TYPE_CHECKING:
    from .project import Project
    from .region import Region

MAIN_WINDOW_ID = 0
EDITOR_SIZE = (800, 600)


def _now_ms() -> float:
    return time.monotonic() * 1000.0


class WindowHandler:
    """Owns the display, draws frames and hands events to the focused window."""

    def __init__(self, project: Project) -> None:
        self.project = project
        self.window_width = 1920
        self.window_height = 1080
        self.fps = 60.0
        self.frame_time = 1000.0 / self.fps
        self.windows: list[PianoRoll] = []
        self.editor: PianoRoll | None = None
        self.focused_window = MAIN_WINDOW_ID

        pygame.display.init()
        pygame.display.set_caption("Piano Roll", "EDITOR")
        self.surface = pygame.display.set_mode(
            (self.window_width, self.window_height), pygame.RESIZABLE
        )
        self.home = Home(project, self)
        self.last_time = _now_ms()

    def create_piano_roll(self, region: Region) -> PianoRoll:
        """Open an editor for ``region``, focus it and return it."""
        editor = PianoRoll(*EDITOR_SIZE, region)
        self.editor = editor
        self.windows.append(editor)
        self.focused_window = editor.window_id
        return editor

    def close_piano_roll(self, editor: PianoRoll) -> None:
        """Close ``editor``; raises ValueError if it is not open."""
        self.windows.remove(editor)
        if self.editor is editor:
            self.editor = None
        if self.focused_window == editor.window_id:
            self.focused_window = MAIN_WINDOW_ID

    def find_window(self, window_id: int) -> PianoRoll | None:
        """The open editor with ``window_id``, or ``None``."""
        return next((w for w in self.windows if w.window_id == window_id), None)

    def tick(self) -> bool:
        """Draw a frame when one is due and handle events; return whether to keep running."""
        running = True
        if _now_ms() - self.last_time < self.frame_time:
            return running
        self.last_time = _now_ms() - self.frame_time

        self.home.tick()
        for editor in reversed(self.windows):
            editor.tick()

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.WINDOWCLOSE:
                editor = self.find_window(getattr(event, "window_id", self.focused_window))
                if editor is None:
                    running = False
                else:
                    self.close_piano_roll(editor)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                self.handle_mouse(event)
            else:
                self.handle_keyboard(event)

        self._present()
        return running

    def _present(self) -> None:
        editor = self.find_window(self.focused_window)
        if editor is not None and editor.surface is not None:
            self.surface.blit(editor.surface, (0, 0))
        if pygame.display.get_surface() is not None:
            pygame.display.flip()

    def _dispatch(self, event: pygame.event.Event) -> bool:
        if self.focused_window == MAIN_WINDOW_ID:
            return self.home.handle_input(event)
        editor = self.find_window(self.focused_window)
        if editor is not None:
            editor.handle_input(event)
        return False

    def handle_keyboard(self, event: pygame.event.Event) -> bool:
        """Give a keyboard-focus event to the focused window."""
        return self._dispatch(event)

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """Give a mouse event to the window under focus."""
        return self._dispatch(event)