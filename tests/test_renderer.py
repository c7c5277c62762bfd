import random

import pygame
import pytest

from pixelflap.constants import FLOOR_Y, HEIGHT, WIDTH
from pixelflap.entities import Pipe, Raindrop
from pixelflap.modes import Detail, Difficulty, ModeConfig, Theme, Weather
from pixelflap.renderer import (
    Renderer,
    ground_colors,
    pipe_colors,
    sky_color,
    wing_phase,
)
from pixelflap.state import GameState, GameStateMachine


@pytest.fixture
def surface():
    return pygame.Surface((WIDTH, HEIGHT))


def make_state(**modes):
    state = GameState(modes=ModeConfig(**modes), rng=random.Random(5))
    GameStateMachine(state).reset()
    return state


def test_sky_color_depends_on_weather_and_theme():
    assert sky_color(ModeConfig()) == pygame.Color("#87ceeb")
    assert sky_color(ModeConfig(theme=Theme.DARK)) == pygame.Color("#2d3436")
    assert sky_color(ModeConfig(weather=Weather.RAIN)) == pygame.Color("#a29bfe")
    assert sky_color(ModeConfig(weather=Weather.DESERT, theme=Theme.DARK)) == pygame.Color("#830001")


def test_special_pipes_use_a_different_palette():
    modes = ModeConfig()
    assert pipe_colors(modes, True)[0] != pipe_colors(modes, False)[0]


def test_wing_phase_is_bounded():
    assert all(abs(wing_phase(frame)) <= 1.5 for frame in range(200))


def test_draw_does_not_mutate_state(surface):
    state = make_state(weather=Weather.RAIN)
    state.obstacles.pipes.append(Pipe(x=300, top_height=100, special=True, offset=5))
    state.weather.drops.append(Raindrop(x=50, y=50, speed=3))
    before = (state.bird.y, state.bird.vy, state.frames, state.ground_offset, len(state.pipes))
    Renderer(surface).draw(state)
    after = (state.bird.y, state.bird.vy, state.frames, state.ground_offset, len(state.pipes))
    assert before == after


def test_layers_land_where_expected(surface):
    state = make_state()
    state.obstacles.pipes.append(Pipe(x=300, top_height=100))
    Renderer(surface).draw(state)

    assert surface.get_at((5, 5)) == sky_color(state.modes)
    assert surface.get_at((310, 20)) == pipe_colors(state.modes, False)[0]
    _, dirt = ground_colors(state.modes)
    assert surface.get_at((5, FLOOR_Y + 60)) == dirt


def test_low_detail_draws_outlines_only(surface):
    state = make_state(detail=Detail.LOW)
    state.obstacles.pipes.append(Pipe(x=300, top_height=100))
    Renderer(surface).draw(state)
    assert surface.get_at((330, 30)) == sky_color(state.modes)
    assert surface.get_at((300, 30)) == pipe_colors(state.modes, False)[0]


@pytest.mark.parametrize("weather", list(Weather))
@pytest.mark.parametrize("theme", list(Theme))
@pytest.mark.parametrize("detail", list(Detail))
@pytest.mark.parametrize("difficulty", [Difficulty.EASY, Difficulty.HARD])
def test_every_mode_combination_renders(surface, weather, theme, detail, difficulty):
    state = make_state(weather=weather, theme=theme, detail=detail, difficulty=difficulty)
    state.obstacles.pipes.append(Pipe(x=200, top_height=150, special=True))
    state.weather.drops.append(Raindrop(x=100, y=100, speed=2))
    state.bird.rotation = 0.7
    state.frames = 13
    state.ground_offset = -123.4
    Renderer(surface).draw(state)


def test_game_over_dims_the_scene(surface):
    state = make_state()
    machine = GameStateMachine(state)
    machine.flap()
    machine.end_game()
    Renderer(surface).draw(state)
    assert surface.get_at((5, 5)) != sky_color(state.modes)
