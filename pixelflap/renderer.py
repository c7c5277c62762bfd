"""Paints a :class:`~pixelflap.state.GameState` onto a surface.

Drawing never changes the state; everything animated is derived from the
frame counter, the ground offset or the entity positions.
"""

from __future__ import annotations

import math
from typing import Sequence, Tuple

import pygame

from .constants import FLOOR_Y, GROUND_HEIGHT, HEIGHT, WIDTH
from .entities import Bird, Pipe
from .modes import Difficulty, ModeConfig, Weather
from .state import GameState

Rect = Tuple[int, int, int, int]

CAP_HEIGHT = 10
OUTLINE = 2
BLACK = pygame.Color("#000000")
WHITE = pygame.Color("#ffffff")

CLOUDS: Sequence[Rect] = (
    (100, 40, 40, 15),
    (120, 35, 20, 10),
    (300, 60, 50, 20),
    (320, 55, 25, 12),
    (500, 45, 35, 18),
    (520, 40, 18, 8),
)

STORM_CLOUDS: Sequence[Rect] = (
    (80, 25, 60, 25),
    (110, 15, 35, 20),
    (90, 35, 45, 15),
    (280, 40, 80, 30),
    (310, 30, 40, 25),
    (290, 55, 55, 20),
    (480, 20, 70, 35),
    (510, 10, 30, 25),
    (490, 40, 50, 20),
    (200, 35, 25, 12),
    (220, 30, 15, 8),
    (600, 45, 30, 15),
    (620, 40, 20, 10),
)


def pick(modes: ModeConfig, light: str, dark: str) -> pygame.Color:
    return pygame.Color(dark if modes.dark else light)


# Palette ------------------------------------------------------------------

def sky_color(modes: ModeConfig) -> pygame.Color:
    if modes.weather is Weather.RAIN:
        return pick(modes, "#a29bfe", "#1e272e")
    if modes.weather is Weather.DESERT:
        return pick(modes, "#ffeaa7", "#830001")
    if modes.weather is Weather.SNOW:
        return pick(modes, "#74b9ff", "#636e72")
    return pick(modes, "#87ceeb", "#2d3436")


def ground_colors(modes: ModeConfig) -> Tuple[pygame.Color, pygame.Color]:
    """Return (surface, dirt) colours of the ground strip."""

    dirt = pick(modes, "#8b4513", "#654321")
    if modes.weather is Weather.DESERT:
        return pick(modes, "#fdcb6e", "#e17055"), dirt
    if modes.weather is Weather.SNOW:
        return pygame.Color("#ffffff"), dirt
    return pick(modes, "#228b22", "#636e72"), dirt


def weed_color(modes: ModeConfig) -> pygame.Color:
    if modes.weather is Weather.DESERT:
        return pick(modes, "#e17055", "#fdcb6e")
    if modes.weather is Weather.SNOW:
        return pygame.Color("#ffffff")
    return pick(modes, "#34495e", "#b2bec3")


def pipe_colors(modes: ModeConfig, special: bool) -> Tuple[pygame.Color, pygame.Color, pygame.Color]:
    """Return (body, cap fill, cap outline) colours for a pipe."""

    if special:
        return (
            pick(modes, "#e17055", "#d63031"),
            pick(modes, "#ffd6cc", "#ff9aa2"),
            pick(modes, "#c45a4d", "#861c27"),
        )
    return (
        pick(modes, "#00b894", "#00cec9"),
        pick(modes, "#ccffda", "#9af5dd"),
        pick(modes, "#2f9d6b", "#0f8f79"),
    )


def bird_color(modes: ModeConfig) -> pygame.Color:
    if modes.difficulty is Difficulty.EASY:
        return pick(modes, "#fd79a8", "#e84393")
    return pick(modes, "#feca57", "#fdcb6e")


def rain_color(modes: ModeConfig) -> pygame.Color:
    if modes.dark:
        return pygame.Color("#b2bec3")
    return pygame.Color("#5246f1" if modes.low_detail else "#4f45f1")


def wing_phase(frames: int) -> float:
    return math.sin(frames * 0.3) * 1.5


# Drawing ------------------------------------------------------------------

class Renderer:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface

    def _rect(self, color, rect, low: bool, outline=None) -> None:
        """Filled rectangle, or an outline when drawing in low detail."""

        if low:
            pygame.draw.rect(self.surface, color, rect, OUTLINE)
            return
        pygame.draw.rect(self.surface, color, rect)
        if outline is not None:
            pygame.draw.rect(self.surface, outline, rect, 1)

    def draw(self, state: GameState) -> None:
        modes = state.modes
        self.draw_sky(modes)
        self.draw_ground(state)
        for pipe in state.pipes:
            self.draw_pipe(pipe, modes)
        self.draw_bird(state.bird, modes, state.frames)
        if modes.raining:
            self.draw_rain(state)
        if state.over:
            overlay = pygame.Surface((WIDTH, HEIGHT), pygame.SRCALPHA)
            overlay.fill((0, 0, 0, 80))
            self.surface.blit(overlay, (0, 0))

    def draw_sky(self, modes: ModeConfig) -> None:
        self.surface.fill(sky_color(modes))
        if modes.weather is Weather.NONE:
            for rect in CLOUDS:
                pygame.draw.rect(self.surface, WHITE, rect)
        elif modes.weather is Weather.RAIN:
            storm = pick(modes, "#636e72", "#2d3436")
            for rect in STORM_CLOUDS:
                pygame.draw.rect(self.surface, storm, rect)

    def draw_ground(self, state: GameState) -> None:
        modes = state.modes
        top, dirt = ground_colors(modes)
        offset = int(state.ground_offset)
        half = GROUND_HEIGHT // 2
        # two copies side by side so the strip wraps seamlessly
        for x in (offset, offset + WIDTH):
            if modes.low_detail:
                pygame.draw.rect(self.surface, top, (x, FLOOR_Y, WIDTH, GROUND_HEIGHT), OUTLINE)
            elif modes.weather is Weather.DESERT:
                pygame.draw.rect(self.surface, top, (x, FLOOR_Y, WIDTH, GROUND_HEIGHT))
            else:
                pygame.draw.rect(self.surface, top, (x, FLOOR_Y, WIDTH, half))
                pygame.draw.rect(self.surface, dirt, (x, FLOOR_Y + half, WIDTH, GROUND_HEIGHT - half))

        color = weed_color(modes)
        for weed in state.weeds:
            x = int(weed.x + state.ground_offset)
            for dx in (0, WIDTH):
                self._rect(color, (x + dx, int(weed.y), 2, 2), modes.low_detail)

    def draw_pipe(self, pipe: Pipe, modes: ModeConfig) -> None:
        body, cap_fill, cap_stroke = pipe_colors(modes, pipe.special)
        low = modes.low_detail
        x, width = int(pipe.x), int(pipe.width)
        gap_top, gap_bottom = int(pipe.gap_top), int(pipe.gap_bottom)

        self._rect(body, (x, 0, width, gap_top), low)
        self._rect(body, (x, gap_bottom, width, FLOOR_Y - gap_bottom), low)

        caps = ((x, gap_top - CAP_HEIGHT, width, CAP_HEIGHT), (x, gap_bottom, width, CAP_HEIGHT))
        for cap in caps:
            if low:
                pygame.draw.rect(self.surface, cap_stroke, cap, OUTLINE)
            else:
                self._rect(cap_fill, cap, low, outline=cap_stroke)

    def _shape(self, sprite: pygame.Surface, draw, color, points, low: bool) -> None:
        if low:
            draw(sprite, color, *points, width=OUTLINE)
            return
        draw(sprite, color, *points)
        draw(sprite, BLACK, *points, width=1)

    def bird_sprite(self, bird: Bird, modes: ModeConfig, frames: int) -> pygame.Surface:
        """Draw the unrotated bird centred on a transparent surface."""

        r = int(bird.radius)
        size = r * 4 + 8
        c = size // 2
        sprite = pygame.Surface((size, size), pygame.SRCALPHA)
        low = modes.low_detail
        easy = modes.difficulty is Difficulty.EASY
        body = bird_color(modes)
        flap = wing_phase(frames)

        self._shape(sprite, pygame.draw.circle, body, ((c, c), r), low)
        if not low:
            pygame.draw.circle(sprite, WHITE, (c - 3, c - 3), 2)

        if not easy:
            tail = [(c - r, c), (c - r - 6, c - 3), (c - r - 6, c + 3)]
            self._shape(sprite, pygame.draw.polygon, body, (tail,), low)

        wing = [(c - 8, c + 2 + flap), (c - 2, c + 2 + flap), (c - 5, c + 5 + flap)]
        self._shape(sprite, pygame.draw.polygon, pick(modes, "#ff7675", "#e17055"), (wing,), low)

        if easy:
            # pacifier instead of a beak
            self._shape(sprite, pygame.draw.circle, pick(modes, "#fd79a8", "#e84393"), ((c + 17, c - 3), 5), low)
            self._shape(sprite, pygame.draw.rect, pick(modes, "#ffffff", "#b2bec3"), ((c + 20, c - 5, 2, 10),), low)
        else:
            self._shape(sprite, pygame.draw.rect, pick(modes, "#ffa726", "#d63031"), ((c + 12, c - 3, 10, 6),), low)

        eye = pick(modes, "#ffffff", "#b2bec3")
        self._shape(sprite, pygame.draw.circle, eye, ((c + 4, c - 4), 2), low)
        pygame.draw.circle(sprite, BLACK, (c + 4, c - 4), 1)
        return sprite

    def draw_bird(self, bird: Bird, modes: ModeConfig, frames: int) -> None:
        sprite = self.bird_sprite(bird, modes, frames)
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
        rect = rotated.get_rect(center=(int(bird.x), int(bird.y)))
        self.surface.blit(rotated, rect)

    def draw_rain(self, state: GameState) -> None:
        color = rain_color(state.modes)
        for drop in state.weather.drops:
            self._rect(color, (int(drop.x), int(drop.y), 2, 10), state.modes.low_detail)
