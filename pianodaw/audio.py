"""Audio output: pulls samples from the project and feeds them to the mixer."""

from __future__ import annotations

import sys
import threading
from array import array
from collections.abc import Sequence
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from .project import Project

DEFAULT_SAMPLE_RATE = 44100
DEFAULT_CHANNELS = 2
BUFFER_SIZE = 512

_TYPECODES = {8: "B", -8: "b", 16: "H", -16: "h", 32: "f", -32: "i"}


def _encode(samples: Sequence[float], fmt: int, channels: int) -> bytes:
    code = _TYPECODES.get(fmt)
    if code is None:
        raise ValueError(f"unsupported sample format {fmt}")
    clamped = [max(-1.0, min(1.0, s)) for s in samples]
    if code == "f":
        values = clamped
    else:
        bits = abs(fmt)
        half = 1 << (bits - 1)
        if fmt < 0:
            values = [int(s * (half - 1)) for s in clamped]
        else:
            values = [int(s * (half - 1) + half) for s in clamped]
    return array(code, [v for v in values for _ in range(channels)]).tobytes()


class AudioManager:
    """Streams the project's master track to the sound device."""

    def __init__(self, project: Project) -> None:
        self.project = project
        self.sample_rate = DEFAULT_SAMPLE_RATE
        self.buffer_size = BUFFER_SIZE
        self.input_channels = 0
        self.output_channels = DEFAULT_CHANNELS
        self._format = 32
        self._stream_open = False
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def callback(self, frames: int) -> list[float]:
        """Render ``frames`` samples, advancing the transport while playing."""
        project = self.project
        if project.is_playing:
            project.time_seconds += frames / self.sample_rate
            return project.tracks[0].process(frames)
        return [0.0] * frames

    def start(self) -> bool:
        """Open the output device and start streaming; return whether it worked."""
        try:
            pygame.mixer.init(
                frequency=DEFAULT_SAMPLE_RATE,
                size=32,
                channels=DEFAULT_CHANNELS,
                buffer=BUFFER_SIZE,
            )
            settings = pygame.mixer.get_init()
        except pygame.error as exc:
            print(f"Error in audio start: {exc}", file=sys.stderr)
            return False
        if not settings:
            print("Error in audio start: mixer did not open", file=sys.stderr)
            return False

        frequency, fmt, channels = settings
        self.sample_rate = frequency
        self._format = fmt
        self.output_channels = channels if channels > 0 else DEFAULT_CHANNELS
        self._stream_open = True

        self._stop_event.clear()
        self._thread = threading.Thread(target=self._audio_thread, daemon=True)
        self._thread.start()
        print("Audio stream started successfully!")
        return True

    def stop(self) -> bool:
        """Stop streaming and close the device; return whether it worked."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._stream_open:
            try:
                pygame.mixer.quit()
            except pygame.error as exc:
                print(f"Error in audio stop: {exc}", file=sys.stderr)
                return False
            self._stream_open = False
            print("Audio stream stopped successfully!")
        return True

    def __enter__(self) -> AudioManager:
        return self

    def __exit__(self, *exc_info) -> None:
        self.stop()

    def _audio_thread(self) -> None:
        period = self.buffer_size / self.sample_rate
        try:
            channel = pygame.mixer.Channel(0)
            while not self._stop_event.is_set():
                if channel.get_queue() is not None:
                    self._stop_event.wait(period / 4)
                    continue
                data = _encode(
                    self.callback(self.buffer_size), self._format, self.output_channels
                )
                sound = pygame.mixer.Sound(buffer=data)
                if channel.get_busy():
                    channel.queue(sound)
                else:
                    channel.play(sound)
        except pygame.error as exc:
            print(f"Error starting audio stream: {exc}", file=sys.stderr)