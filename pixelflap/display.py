"""Score line, status prompt and the fullscreen toggle."""

from __future__ import annotations

from typing import Optional

import pygame

from .constants import HEIGHT, WIDTH
from .effects import Effect, SetPrompt, UpdateDisplay
from .log import get_logger
from .modes import ModeConfig

logger = get_logger("display")

WHITE = (255, 255, 255)
SHADOW = (0, 0, 0)
WARNING = (255, 196, 0)


def make_font(size: int) -> pygame.font.Font:
    return pygame.font.Font(pygame.font.get_default_font(), size)


def score_line(score: int, high_score: int) -> str:
    return f"Score: {score} | High: {high_score}"


class Hud:
    def __init__(self, modes: ModeConfig) -> None:
        self.modes = modes
        self.score_text = score_line(0, 0)
        self.prompt: Optional[str] = None
        self.warning: Optional[str] = None
        self._font_small: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def apply(self, effect: Effect) -> None:
        if isinstance(effect, UpdateDisplay):
            self.score_text = score_line(effect.score, effect.high_score)
        elif isinstance(effect, SetPrompt):
            self.prompt = effect.text

    def open_window(self) -> pygame.Surface:
        """Create the game window, falling back to windowed if fullscreen is refused."""

        if self.modes.fullscreen:
            try:
                return pygame.display.set_mode((WIDTH, HEIGHT), pygame.SCALED | pygame.FULLSCREEN)
            except pygame.error as exc:
                self.warning = f"Fullscreen unavailable: {exc}"
                logger.warning("fullscreen at startup failed: %s", exc)
                self.modes.fullscreen = False
        return pygame.display.set_mode((WIDTH, HEIGHT))

    def toggle_fullscreen(self) -> bool:
        """Flip exclusive fullscreen; keep the old flag if the platform refuses."""

        previous = self.modes.fullscreen
        try:
            if not pygame.display.toggle_fullscreen():
                raise pygame.error("not supported by this video driver")
        except pygame.error as exc:
            self.warning = f"Fullscreen unavailable: {exc}"
            logger.warning("fullscreen toggle failed: %s", exc)
            self.modes.fullscreen = previous
            return False
        self.modes.fullscreen = not previous
        self.warning = None
        logger.info("fullscreen %s", "on" if self.modes.fullscreen else "off")
        return True

    def _fonts(self):
        if self._font_small is None:
            self._font_small = make_font(20)
            self._font_large = make_font(32)
        return self._font_small, self._font_large

    def _blit_centered(self, surface: pygame.Surface, font: pygame.font.Font, text: str, y: int, color) -> None:
        shadow = font.render(text, True, SHADOW)
        label = font.render(text, True, color)
        rect = label.get_rect(center=(WIDTH // 2, y))
        surface.blit(shadow, rect.move(2, 2))
        surface.blit(label, rect)

    def draw(self, surface: pygame.Surface) -> None:
        small, large = self._fonts()
        self._blit_centered(surface, small, self.score_text, 24, WHITE)
        if self.prompt:
            self._blit_centered(surface, large, self.prompt, HEIGHT // 3, WHITE)
        if self.warning:
            self._blit_centered(surface, small, self.warning, HEIGHT // 3 + 48, WARNING)
