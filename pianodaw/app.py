"""Command-line entry point that opens the editor."""

from __future__ import annotations

import argparse
import sys
import time

import pygame

from .audio import AudioManager
from .project import EventManager, Project
from .styles import init_fonts
from .windows import WindowHandler

_LOOP_DELAY = 0.005


def main(argv: list[str] | None = None) -> int:
    """Run the editor until its main window closes; return the exit status."""
    parser = argparse.ArgumentParser(prog="pianodaw", description="Piano-roll music editor.")
    parser.add_argument("project", nargs="?", default="", help="project file to open")
    args = parser.parse_args(argv)

    if not init_fonts():
        print("could not load fonts", file=sys.stderr)
        return 1

    project = Project(args.project)
    audio = AudioManager(project)
    handler = WindowHandler(project)
    EventManager(project)

    if not audio.start():
        print("audiomanager failed")
        pygame.quit()
        return 1

    try:
        while handler.tick():
            time.sleep(_LOOP_DELAY)
    finally:
        audio.stop()
        project.save()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())