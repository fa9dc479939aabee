import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest.mock import patch

import pygame
import pytest

from pianodaw import styles
from pianodaw.app import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    styles.init_fonts()


def test_missing_fonts_fail(workdir, capsys):
    assert main([]) == 1
    assert "fonts" in capsys.readouterr().err


def test_audio_failure_is_reported(workdir, capsys):
    with patch("pygame.font.Font", return_value=object()), patch(
        "pygame.mixer.init", side_effect=pygame.error("no audio device")
    ):
        assert main([]) == 1
    assert "audiomanager failed" in capsys.readouterr().out


def test_audio_failure_does_not_write_project(workdir):
    target = workdir / "song.json"
    with patch("pygame.font.Font", return_value=object()), patch(
        "pygame.mixer.init", side_effect=pygame.error("no audio device")
    ):
        assert main([str(target)]) == 1
    assert not target.exists()


def test_font_state_is_reset_after_failure(workdir):
    assert main([]) == 1
    assert styles.main_font() is None