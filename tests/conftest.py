import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from pixelflap.modes import ModeConfig  # noqa: E402
from pixelflap.scheduler import Scheduler  # noqa: E402
from pixelflap.state import GameState, GameStateMachine  # noqa: E402


@pytest.fixture
def modes():
    return ModeConfig()


@pytest.fixture
def state(modes):
    return GameState(modes=modes, rng=random.Random(1234))


@pytest.fixture
def scheduler():
    return Scheduler()


@pytest.fixture
def machine(state, scheduler):
    m = GameStateMachine(state, scheduler)
    m.reset()
    return m


@pytest.fixture
def pygame_display():
    pygame.init()
    yield
    pygame.quit()
