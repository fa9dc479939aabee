"""Shared look of the editors: colours, cursors, fonts and line width."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import pygame

Color = tuple[int, int, int, int]

LINE_WIDTH = 1
FONT_PATH = Path("assets/fonts/Arial.ttf")
FONT_SIZE = 12


@dataclass(frozen=True)
class ColorCodes:
    """The RGBA palette used by every view."""

    background: Color = (84, 82, 82, 255)
    grid: Color = (111, 155, 166, 127)
    sub_grid: Color = (56, 74, 86, 255)
    note: Color = (200, 255, 211, 255)
    note_selected: Color = (254, 160, 161, 255)
    note_border: Color = (136, 176, 141, 255)
    note_selected_border: Color = (187, 111, 111, 255)
    key_text: Color = (108, 91, 93, 255)
    key_white: Color = (238, 242, 250, 255)
    key_black: Color = (76, 77, 79, 255)
    key_white_active: Color = (219, 223, 231, 255)
    key_black_active: Color = (95, 96, 98, 255)
    piano_separator: Color = (50, 66, 76, 255)
    play_head: Color = (101, 182, 202, 255)
    editor_background: Color = (72, 77, 78, 255)


COLORS = ColorCodes()


class Cursor(Enum):
    """Mouse cursors shown by the editors."""

    GRABBER = "pointer"
    PENCIL = "text"
    MOVER = "move"
    SELECTOR = "default"

    @property
    def system_cursor(self) -> int:
        """The pygame system cursor constant for this cursor."""
        return {
            Cursor.GRABBER: pygame.SYSTEM_CURSOR_HAND,
            Cursor.PENCIL: pygame.SYSTEM_CURSOR_IBEAM,
            Cursor.MOVER: pygame.SYSTEM_CURSOR_SIZEALL,
            Cursor.SELECTOR: pygame.SYSTEM_CURSOR_ARROW,
        }[self]


@dataclass
class _Fonts:
    main_font: pygame.font.Font | None = None


_FONTS = _Fonts()


def init_fonts() -> bool:
    """Load the main font; return whether it could be opened."""
    try:
        pygame.font.init()
    except pygame.error:
        _FONTS.main_font = None
        return False
    try:
        _FONTS.main_font = pygame.font.Font(str(FONT_PATH), FONT_SIZE)
    except (OSError, pygame.error):
        _FONTS.main_font = None
        return False
    return True


def main_font() -> pygame.font.Font | None:
    """The font loaded by :func:`init_fonts`, or ``None`` before it succeeded."""
    return _FONTS.main_font


def apply_cursor(cursor: Cursor) -> bool:
    """Show ``cursor``; return whether a display was there to show it on."""
    if not pygame.display.get_init() or pygame.display.get_surface() is None:
        return False
    try:
        pygame.mouse.set_cursor(cursor.system_cursor)
    except pygame.error:
        return False
    return True