"""The piano-roll editor for the notes of one region."""

from __future__ import annotations

import itertools
import math

import pygame

from .fract import Fract
from .note import Note
from .region import Region
from .styles import COLORS, LINE_WIDTH, Cursor, apply_cursor, main_font

_WINDOW_IDS = itertools.count(1)

_LEFT_BUTTON = 1
_RIGHT_BUTTON = 3
_LABEL_CHARS = 3
_TRANSPARENT = (0, 0, 0, 0)
_BLACK = (0, 0, 0, 255)
_KEY_LINE = (100, 100, 100, 255)

_MODIFIERS = {
    pygame.K_LSHIFT: "is_shift_pressed",
    pygame.K_LCTRL: "is_ctrl_pressed",
    pygame.K_LALT: "is_alt_pressed",
}


def _key_label(value: float) -> str:
    return f"{value:.6f}"[:_LABEL_CHARS]


class PianoRoll:
    """An editor window showing the notes of ``region`` on a pitch/time grid."""

    title = "Piano Roll"

    def __init__(self, window_width: int, window_height: int, region: Region) -> None:
        apply_cursor(Cursor.GRABBER)
        self.region = region
        self.window_id = next(_WINDOW_IDS)
        self.window_width = int(window_width)
        self.window_height = int(window_height)

        self.key_length = 40.0
        self.bar_width = 80.0
        self.octave_height = 200.0
        self.notes_per_octave = 12.0
        self.notes_per_bar = 4.0
        self.cell_height12 = 0.0
        self.cell_width = 0.0
        self.cell_height = 0.0
        self.y_offset12 = 0.0
        self.num_cells_down12 = 0.0
        self.num_cells_right = 0.0
        self.num_cells_down = 0.0
        self.y_offset = 0
        self.x_offset = 0
        self.y_min = 0.0
        self.y_max = 0.0

        self.mouse_x = 0.0
        self.mouse_y = 0.0
        self.last_lmb_x = 0.0
        self.last_lmb_y = 0.0
        self.scroll_x = 0.0
        self.scroll_y = 300.0
        self.scroll_sensitivity = 10
        self.scale_sensitivity = 1.1

        self.is_shift_pressed = False
        self.is_ctrl_pressed = False
        self.is_alt_pressed = False
        self.refresh_grid = False
        self.lmb = False
        self.rmb = False
        self.running = True

        self.hovered_note = -1
        self.moving_note = -1
        self.last_length = Fract(1, 1)

        self.surface: pygame.Surface | None = None
        self.background_layer: pygame.Surface | None = None
        self.grid_layer: pygame.Surface | None = None
        self.notes_layer: pygame.Surface | None = None
        self.piano_layer: pygame.Surface | None = None
        self.layers: list[pygame.Surface] = []

        self.update_grid()
        self.scroll()
        self.init_window()

    # geometry

    def update_grid(self) -> None:
        """Recompute cell sizes after zoom or temperament changes."""
        if self.notes_per_octave <= 0:
            self.notes_per_octave = 1
        elif self.notes_per_octave > 128:
            self.notes_per_octave = 128
        self.cell_height = self.octave_height / self.notes_per_octave
        self.cell_width = self.bar_width / self.notes_per_bar
        self.cell_height12 = self.octave_height / 12.0

        low = self.cell_height12 * 59
        high = self.cell_height12 * 69
        self.y_min = low - math.floor(low / self.cell_height) * self.cell_height
        self.y_max = high - math.floor(high / self.cell_height) * self.cell_height
        self.scroll()

    def hovered_time(self) -> Fract:
        """The grid time under the mouse, in bars."""
        cell = math.floor((self.mouse_x + self.scroll_x) / self.cell_width)
        return Fract(cell, int(self.notes_per_bar))

    def get_x(self, grid: float) -> float:
        """Screen x of grid column ``grid``."""
        return grid * self.cell_width

    def note_name(self, y: float) -> float:
        """The MIDI pitch at screen row ``y``."""
        return 129 - (y + self.scroll_y) / self.cell_height12

    def get_y(self, midi_num) -> float:
        """Screen y of MIDI pitch ``midi_num``."""
        pitch = float(midi_num)
        return (
            -self.cell_height12 * ((pitch - 129) + self.scroll_y / self.cell_height12)
            - LINE_WIDTH
        )

    def hovered_cell(self) -> Fract:
        """The pitch of the grid row under the mouse."""
        rows = math.ceil(self.num_cells_down + (self.mouse_y + self.y_min) / self.cell_height)
        numerator = int(self.notes_per_octave * 128 - rows * 12)
        return Fract(numerator, int(self.notes_per_octave)) + Fract(1, 1)

    def note_pos_x(self, note: Note) -> float:
        """Screen x where ``note`` starts."""
        return note.start * self.bar_width - self.scroll_x

    def note_end(self, note: Note) -> float:
        """Screen x where ``note`` ends."""
        return note.end * self.bar_width - self.scroll_x

    def note_height(self, note: Note) -> float:
        """Signed screen height of ``note``; negative because it extends upwards."""
        return -self.cell_height12 * 12 / note.temperament + LINE_WIDTH

    def scroll(self) -> None:
        """Clamp the scroll position and recompute grid offsets."""
        self.num_cells_right = self.scroll_x / self.cell_width
        self.num_cells_down = (self.scroll_y - self.y_min) / self.cell_height
        self.num_cells_down12 = self.scroll_y / self.cell_height12
        if self.scroll_y - self.y_min - self.cell_height12 <= 0:
            self.scroll_y = self.y_min + self.cell_height12
        elif (
            self.scroll_y + self.window_height + self.y_min + self.y_max
            >= 128 * self.cell_height12
        ):
            self.scroll_y = (
                128 * self.cell_height12 - self.window_height - self.y_min - self.y_max
            )
        self.num_cells_down = (self.scroll_y - self.y_min) / self.cell_height

        self.y_offset = int(math.ceil(self.num_cells_down) * self.cell_height - self.scroll_y)
        self.y_offset12 = math.ceil(self.num_cells_down12) * self.cell_height12 - self.scroll_y
        self.x_offset = int(math.ceil(self.num_cells_right) * self.cell_width - self.scroll_x)

        self.refresh_grid = True
        self.handle_mouse()

    # rendering

    def _new_layer(self) -> pygame.Surface:
        return pygame.Surface((self.window_width, self.window_height), pygame.SRCALPHA)

    def init_window(self) -> None:
        """Create the layers for the current window size and draw everything."""
        self.surface = self._new_layer()
        self.background_layer = self._new_layer()
        self.grid_layer = self._new_layer()
        self.piano_layer = self._new_layer()
        self.notes_layer = self._new_layer()
        self.layers = [
            self.background_layer,
            self.grid_layer,
            self.notes_layer,
            self.piano_layer,
        ]
        self.background_layer.fill(COLORS.background)

        if self.window_height > 128 * self.cell_height12 - self.y_max - self.y_min:
            self.octave_height = 12 * self.window_height // 128
            self.update_grid()

        self.scroll()
        self.render_grid()
        self.render_keys()
        self.render_notes()
        self.render_roll()

    def render_keys(self) -> None:
        """Draw the keyboard strip with its pitch labels."""
        font = main_font()
        if font is None:
            return
        layer = self.piano_layer
        layer.fill(_TRANSPARENT)
        pygame.draw.rect(
            layer,
            COLORS.key_white,
            pygame.Rect(0, 0, int(self.key_length), self.window_height),
        )
        edge = self.key_length + 1
        pygame.draw.line(layer, _BLACK, (edge, 0), (edge, self.window_height))

        y = self.y_offset12 - self.cell_height12
        while y < self.window_height + self.cell_height12:
            pygame.draw.line(layer, _KEY_LINE, (0, y), (self.key_length, y))
            label = _key_label(abs(self.note_name(y) - 1))
            layer.blit(font.render(label, False, _BLACK), (0, int(y)))
            y += self.cell_height12

    def render_grid(self) -> None:
        """Draw the time and pitch grid lines."""
        layer = self.grid_layer
        layer.fill(_TRANSPARENT)
        x = float(self.x_offset)
        while x < self.window_width:
            pygame.draw.line(layer, COLORS.grid, (x, 0), (x, self.window_height))
            x += self.cell_width
        y = float(self.y_offset)
        while y < self.window_height:
            pygame.draw.line(layer, COLORS.grid, (0, y), (self.window_width, y))
            y += self.cell_height

    def render_notes(self) -> None:
        """Draw every note of the region."""
        layer = self.notes_layer
        layer.fill(_TRANSPARENT)
        for note in self.region.notes:
            left = self.note_pos_x(note) + 1
            top = self.get_y(note.num) - 1
            right = self.note_end(note) - 2
            bottom = top + self.note_height(note) + 2

            rect = pygame.Rect(int(left), int(top), int(right - left), int(bottom - top))
            rect.normalize()
            pygame.draw.rect(layer, COLORS.note, rect)

            border = COLORS.note_border
            pygame.draw.line(layer, border, (left, top), (right, top))
            pygame.draw.line(layer, border, (left, bottom), (right, bottom))
            pygame.draw.line(layer, border, (right, top), (right, bottom))

    def render_roll(self) -> None:
        """Compose the layers onto the editor surface."""
        for layer in self.layers:
            self.surface.blit(layer, (0, 0))

    def tick(self) -> bool:
        """Redraw if needed; return whether the editor is still running."""
        if self.refresh_grid:
            self.render_grid()
            self.render_keys()
            self.render_notes()
            self.refresh_grid = False
            self.render_roll()
        return self.running

    # input

    def _toggle_modifiers(self, event: pygame.event.Event) -> None:
        if event.type in (pygame.KEYDOWN, pygame.KEYUP):
            attr = _MODIFIERS.get(getattr(event, "key", None))
            if attr is not None:
                setattr(self, attr, event.type == pygame.KEYDOWN)

    def _wheel(self, amount: float) -> None:
        if self.is_ctrl_pressed:
            self.bar_width *= self.scale_sensitivity**amount
            if self.bar_width <= 4:
                self.bar_width = 4
            grid_at_x = self.mouse_x / self.cell_width + self.scroll_x / self.cell_width
            self.update_grid()
            self.scroll_x = grid_at_x * self.cell_width - self.mouse_x
        elif self.is_alt_pressed:
            self.octave_height *= self.scale_sensitivity**amount
            smallest = self.window_height * 12 // 128
            if self.octave_height < smallest or self.octave_height <= 0:
                self.octave_height = smallest
            grid_at_y = self.mouse_y / self.cell_height + self.scroll_y / self.cell_height
            self.update_grid()
            self.scroll_y = grid_at_y * self.cell_height - self.mouse_y
        elif self.is_shift_pressed:
            self.scroll_x += amount * self.scroll_sensitivity
        else:
            self.scroll_y -= amount * self.scroll_sensitivity
        self.scroll()

    def _button_down(self, button: int) -> None:
        if button == _LEFT_BUTTON:
            self.lmb = True
            if self.mouse_x > self.key_length:
                if self.hovered_note == -1:
                    self.create_note(self.hovered_time(), self.hovered_cell())
                else:
                    self.notes_per_octave = self.region.notes[self.hovered_note].temperament
                    self.update_grid()
                    self.scroll()
                    self.moving_note = self.hovered_note
        if button == _RIGHT_BUTTON:
            self.rmb = True
            if self.mouse_x > self.key_length:
                self.delete_note(self.hovered_note)
        self.handle_mouse()

    def _button_up(self, button: int) -> None:
        if button == _LEFT_BUTTON:
            self.lmb = False
            self.moving_note = -1
        if button == _RIGHT_BUTTON:
            self.rmb = False
        self.handle_mouse()

    def _motion(self, pos) -> None:
        self.mouse_x, self.mouse_y = (float(v) for v in pos)
        self.handle_mouse()
        if not (self.lmb and self.moving_note != -1):
            self.last_lmb_x = self.mouse_x
            self.last_lmb_y = self.mouse_y
            return
        dx = self.mouse_x - self.last_lmb_x
        dy = self.mouse_y - self.last_lmb_y
        if abs(dx) >= self.cell_width:
            direction = 1.0 if dx > 0 else -1.0
            self.move_note(self.moving_note, int(math.ceil(abs(dx)) / dx), 0)
            self.last_lmb_x += self.cell_width * direction
        if abs(dy) >= self.cell_height:
            direction = 1.0 if dy > 0 else -1.0
            self.move_note(self.moving_note, 0, int(math.ceil(abs(dy)) / dy))
            self.last_lmb_y += self.cell_height * direction

    def handle_input(self, event: pygame.event.Event) -> None:
        """React to one pygame event aimed at this editor."""
        self.refresh_grid = False
        self._toggle_modifiers(event)

        if event.type == pygame.MOUSEWHEEL:
            self._wheel(event.y)
        elif event.type == pygame.WINDOWSIZECHANGED:
            self.window_width = int(event.x)
            self.window_height = int(event.y)
            self.init_window()
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._button_down(event.button)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._button_up(event.button)
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_MINUS:
                self.notes_per_octave -= 1
                self.update_grid()
            elif event.key == pygame.K_EQUALS:
                self.notes_per_octave += 1
                self.update_grid()
        elif event.type == pygame.MOUSEMOTION:
            self._motion(event.pos)

    def handle_mouse(self) -> None:
        """Update the hovered note and cursor; right-drag erases hovered notes."""
        self.find_hovered_note()
        if self.rmb:
            apply_cursor(Cursor.PENCIL)
            if self.hovered_note != -1:
                self.delete_note(self.hovered_note)
        elif self.hovered_note != -1:
            apply_cursor(Cursor.MOVER)
        else:
            apply_cursor(Cursor.SELECTOR)

    # editing

    def create_note(self, start: Fract, pitch: Fract) -> Note:
        """Add a note of the last used length at ``start`` and ``pitch``."""
        note = Note(start, self.last_length + start, pitch, self.notes_per_octave)
        self.region.notes.append(note)
        self.refresh_grid = True
        return note

    def find_hovered_note(self) -> int:
        """Set and return the index of the note under the mouse, or -1."""
        self.hovered_note = -1
        for index, note in enumerate(self.region.notes):
            left = int(self.note_pos_x(note))
            right = int(self.note_end(note))
            top = int(self.get_y(note.num))
            height = int(self.note_height(note))
            if left <= self.mouse_x <= right and top + height <= self.mouse_y <= top:
                self.hovered_note = index
                break
        return self.hovered_note

    def delete_note(self, index: int) -> None:
        """Remove note ``index``; -1 means no note and does nothing."""
        if index != -1:
            del self.region.notes[index]
            self.scroll()

    def move_note(self, index: int, move_x: int, move_y: int) -> None:
        """Shift a note by whole grid cells in time and pitch."""
        dx = Fract(move_x, int(self.notes_per_bar))
        dy = Fract(-move_y * 12, int(self.notes_per_octave))
        note = self.region.notes[index]
        note.start = note.start + dx
        note.end = note.end + dx
        note.num = note.num + dy
        self.scroll()