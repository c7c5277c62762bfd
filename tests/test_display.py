import pygame
import pytest

from pixelflap.constants import HEIGHT, WIDTH
from pixelflap.display import Hud, score_line
from pixelflap.effects import SetPrompt, UpdateDisplay
from pixelflap.modes import ModeConfig


def test_effects_update_the_text():
    hud = Hud(ModeConfig())
    hud.apply(UpdateDisplay(3, 7))
    hud.apply(SetPrompt("Game Over"))
    assert hud.score_text == "Score: 3 | High: 7"
    assert hud.prompt == "Game Over"
    hud.apply(SetPrompt(None))
    assert hud.prompt is None


def test_score_line():
    assert score_line(0, 12) == "Score: 0 | High: 12"


def test_unsupported_fullscreen_reverts(monkeypatch):
    modes = ModeConfig()
    hud = Hud(modes)

    def refuse():
        raise pygame.error("nope")

    monkeypatch.setattr(pygame.display, "toggle_fullscreen", refuse)
    assert not hud.toggle_fullscreen()
    assert modes.fullscreen is False
    assert "nope" in hud.warning


def test_fullscreen_reporting_failure_reverts(monkeypatch):
    modes = ModeConfig()
    hud = Hud(modes)
    monkeypatch.setattr(pygame.display, "toggle_fullscreen", lambda: 0)
    assert not hud.toggle_fullscreen()
    assert modes.fullscreen is False


def test_fullscreen_success_flips_the_flag(monkeypatch):
    modes = ModeConfig()
    hud = Hud(modes)
    hud.warning = "old"
    monkeypatch.setattr(pygame.display, "toggle_fullscreen", lambda: 1)
    assert hud.toggle_fullscreen()
    assert modes.fullscreen is True
    assert hud.warning is None


@pytest.mark.usefixtures("pygame_display")
def test_draw_onto_a_surface():
    hud = Hud(ModeConfig())
    hud.apply(SetPrompt("Click or press Space to start"))
    hud.warning = "Fullscreen unavailable"
    surface = pygame.Surface((640, 480))
    surface.fill((10, 20, 30))
    hud.draw(surface)
    changed = any(surface.get_at((x, 24)) != (10, 20, 30) for x in range(200, 440))
    assert changed


def test_startup_fullscreen_falls_back_to_a_window(pygame_display, monkeypatch):
    modes = ModeConfig(fullscreen=True)
    hud = Hud(modes)
    real_set_mode = pygame.display.set_mode

    def set_mode(size, flags=0):
        if flags & pygame.FULLSCREEN:
            raise pygame.error("That operation is not supported")
        return real_set_mode(size, flags)

    monkeypatch.setattr(pygame.display, "set_mode", set_mode)
    window = hud.open_window()
    assert window.get_size() == (WIDTH, HEIGHT)
    assert modes.fullscreen is False
    assert hud.warning.startswith("Fullscreen unavailable")


def test_windowed_startup_has_no_warning(pygame_display):
    hud = Hud(ModeConfig())
    assert hud.open_window().get_size() == (WIDTH, HEIGHT)
    assert hud.warning is None
