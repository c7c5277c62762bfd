"""The pygame window and the update/draw loop."""

from __future__ import annotations

import random
from typing import Optional

import pygame

from .audio import AudioPlayer
from .config import GameConfig
from .constants import FLOOR_Y
from .display import Hud
from .effects import Cue, Effects, PlayCue
from .log import get_logger
from .modes import ModeConfig
from .renderer import Renderer
from .scheduler import Scheduler
from .state import GameState, GameStateMachine

logger = get_logger("game")

FLAP_KEYS = (pygame.K_SPACE, pygame.K_UP)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


class Game:
    def __init__(self, config: Optional[GameConfig] = None) -> None:
        self.config = config or GameConfig()
        self.modes = ModeConfig(
            difficulty=self.config.difficulty,
            theme=self.config.theme,
            weather=self.config.weather,
            detail=self.config.detail,
            music_enabled=self.config.music,
            sfx_enabled=self.config.sfx,
            fullscreen=self.config.fullscreen,
        )
        self.hud = Hud(self.modes)

        pygame.display.set_caption("pixelflap")
        self.window = self.hud.open_window()
        self.clock = pygame.time.Clock()

        self.state = GameState(modes=self.modes, rng=random.Random(self.config.seed))
        self.scheduler = Scheduler()
        self.machine = GameStateMachine(self.state, self.scheduler)
        self.renderer = Renderer(self.window)
        self.audio = AudioPlayer(self.modes)
        self.running = True

        self.dispatch(self.machine.reset())
        if self.modes.raining and self.modes.sfx_enabled:
            self.dispatch([PlayCue(Cue.RAIN)])

    def dispatch(self, effects: Effects) -> None:
        for effect in effects:
            self.audio.apply(effect)
            self.hud.apply(effect)

    def run(self) -> None:
        logger.info(
            "starting: difficulty=%s weather=%s theme=%s",
            self.modes.difficulty.value,
            self.modes.weather.value,
            self.modes.theme.value,
        )
        while self.running:
            elapsed = self.clock.tick(self.config.fps)
            self.handle_events()
            self.update(elapsed)
            self.draw()

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if getattr(event, "touch", False):
                    # SDL mirrors every FINGERDOWN as a mouse click
                    continue
                self.dispatch(self.machine.primary_action())
            elif event.type == pygame.FINGERDOWN:
                self.dispatch(self.machine.primary_action())

    def handle_key(self, key: int) -> None:
        modes = self.modes
        if key in FLAP_KEYS:
            self.dispatch(self.machine.primary_action())
        elif key in QUIT_KEYS:
            self.running = False
        elif key == pygame.K_e:
            self.dispatch(modes.cycle_difficulty())
        elif key == pygame.K_t:
            self.dispatch(modes.toggle_theme())
        elif key == pygame.K_w:
            self.dispatch(modes.cycle_weather())
        elif key == pygame.K_g:
            self.dispatch(modes.toggle_detail())
        elif key == pygame.K_m:
            self.dispatch(modes.toggle_music(game_over=self.state.over))
        elif key == pygame.K_s:
            self.dispatch(modes.toggle_sfx())
        elif key == pygame.K_F11:
            self.hud.toggle_fullscreen()

    def update(self, elapsed_ms: float) -> None:
        # timers first so anything scheduled this frame counts from the current time
        self.dispatch(self.scheduler.advance(elapsed_ms))
        if self.state.running:
            self.dispatch(self.machine.step())
        self.state.weather.update(self.modes.raining, self.modes.rain_spawn_rate, FLOOR_Y)

    def draw(self) -> None:
        self.renderer.draw(self.state)
        self.hud.draw(self.window)
        pygame.display.flip()


def main(config: Optional[GameConfig] = None) -> None:
    pygame.init()
    try:
        Game(config).run()
    finally:
        pygame.quit()
