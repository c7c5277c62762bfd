"""Game phases, scoring and the per-tick update step.

``GameState`` is the one aggregate every component reads; only
``GameStateMachine`` changes the phase, the score and the high score.
Each command returns the effects it produced instead of playing sounds or
writing text itself.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from . import collision, physics
from .constants import (
    FLOOR_Y,
    GAME_OVER_PROMPT,
    GROUND_HEIGHT,
    HEIGHT,
    PIPE_SPEED,
    RESTART_DELAY_MS,
    RESTART_PROMPT,
    START_PROMPT,
    WEED_COUNT,
    WIDTH,
)
from .effects import Cue, Effects, PlayCue, RewindCue, SetPrompt, StopCue, UpdateDisplay
from .entities import Bird, Weed
from .log import get_logger
from .modes import ModeConfig
from .obstacles import ObstacleManager
from .scheduler import Scheduler
from .weather import WeatherField

logger = get_logger("state")


class Phase(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    OVER = "over"


@dataclass
class GameState:
    modes: ModeConfig = field(default_factory=ModeConfig)
    rng: random.Random = field(default_factory=random.Random)
    bird: Bird = field(default_factory=Bird)
    obstacles: Optional[ObstacleManager] = None
    weather: Optional[WeatherField] = None
    weeds: List[Weed] = field(default_factory=list)
    phase: Phase = Phase.IDLE
    frames: int = 0
    score: int = 0
    high_score: int = 0
    epoch: int = 0
    input_enabled: bool = True
    prompt: Optional[str] = START_PROMPT
    ground_offset: float = 0.0

    def __post_init__(self) -> None:
        if self.obstacles is None:
            self.obstacles = ObstacleManager(self.rng)
        if self.weather is None:
            self.weather = WeatherField(self.rng)

    @property
    def pipes(self):
        return self.obstacles.pipes

    @property
    def running(self) -> bool:
        return self.phase is Phase.RUNNING

    @property
    def over(self) -> bool:
        return self.phase is Phase.OVER


def scatter_weeds(rng: random.Random, count: int = WEED_COUNT) -> List[Weed]:
    top = HEIGHT - GROUND_HEIGHT
    return [Weed(x=rng.random() * WIDTH, y=top + rng.random() * 20) for _ in range(count)]


class GameStateMachine:
    def __init__(self, state: GameState, scheduler: Optional[Scheduler] = None) -> None:
        self.state = state
        self.scheduler = scheduler or Scheduler()

    def _display(self) -> UpdateDisplay:
        return UpdateDisplay(self.state.score, self.state.high_score)

    def _prompt(self, text: Optional[str]) -> SetPrompt:
        self.state.prompt = text
        return SetPrompt(text)

    def reset(self) -> Effects:
        """Put everything back to the pre-game state. The high score survives."""

        s = self.state
        s.epoch += 1
        self.scheduler.clear()
        s.frames = 0
        s.phase = Phase.IDLE
        s.score = 0
        s.input_enabled = True
        s.bird.reset(HEIGHT / 2)
        s.obstacles.clear()
        s.weeds = scatter_weeds(s.rng)
        s.ground_offset = 0.0
        return [self._display(), self._prompt(START_PROMPT), RewindCue(Cue.MUSIC)]

    def flap(self) -> Effects:
        s = self.state
        if s.over:
            return []
        effects: Effects = []
        if s.phase is Phase.IDLE:
            s.phase = Phase.RUNNING
            logger.info("game started (epoch %d)", s.epoch)
            effects.append(self._prompt(None))
            effects.append(PlayCue(Cue.MUSIC))
        physics.flap(s.bird)
        return effects

    def primary_action(self) -> Effects:
        """Space, click or tap: flap, or restart once the game is over."""

        s = self.state
        if not s.input_enabled:
            return []
        if s.over:
            return self.restart()
        return self.flap()

    def restart(self) -> Effects:
        return self.reset() + self.flap()

    def end_game(self) -> Effects:
        s = self.state
        if s.over:
            return []
        if s.score > s.high_score:
            s.high_score = s.score
        s.phase = Phase.OVER
        s.input_enabled = False
        logger.info(
            "game over",
            extra={"data": {"score": s.score, "high_score": s.high_score, "frames": s.frames}},
        )

        epoch = s.epoch
        self.scheduler.call_later(RESTART_DELAY_MS, lambda: self._enable_restart(epoch))
        return [
            self._display(),
            StopCue(Cue.MUSIC),
            PlayCue(Cue.GAME_OVER),
            self._prompt(GAME_OVER_PROMPT),
        ]

    def _enable_restart(self, epoch: int) -> Effects:
        s = self.state
        if epoch != s.epoch or not s.over:
            return []
        s.input_enabled = True
        return [self._prompt(RESTART_PROMPT)]

    def step(self) -> Effects:
        """Advance the simulation by one tick. Only meaningful while running."""

        s = self.state
        if not s.running:
            return []
        effects: Effects = []

        s.frames += 1
        physics.integrate(s.bird)

        if s.obstacles.should_spawn(s.frames, s.modes.spawn_interval):
            s.obstacles.spawn()

        scored = s.obstacles.update(s.bird, s.modes.oscillate_specials)
        for _ in range(scored):
            s.score += 1
            effects.append(PlayCue(Cue.SCORE))
            effects.append(self._display())

        report = collision.detect(s.bird, s.pipes, FLOOR_Y)
        if report.terminal:
            effects.extend(self.end_game())

        s.ground_offset -= PIPE_SPEED
        if s.ground_offset <= -WIDTH:
            s.ground_offset = 0.0
        return effects
