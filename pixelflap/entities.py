"""Plain data for everything that moves on screen."""

from __future__ import annotations

from dataclasses import dataclass

from .constants import BIRD_RADIUS, BIRD_X, GRAVITY, HEIGHT, LIFT, PIPE_GAP, PIPE_WIDTH


@dataclass
class Bird:
    x: float = BIRD_X
    y: float = HEIGHT / 2
    vy: float = 0.0
    radius: float = BIRD_RADIUS
    gravity: float = GRAVITY
    lift: float = LIFT
    rotation: float = 0.0

    @property
    def top(self) -> float:
        return self.y - self.radius

    @property
    def bottom(self) -> float:
        return self.y + self.radius

    @property
    def left(self) -> float:
        return self.x - self.radius

    @property
    def right(self) -> float:
        return self.x + self.radius

    def reset(self, y: float = HEIGHT / 2) -> None:
        self.y = y
        self.vy = 0.0
        self.rotation = 0.0


@dataclass
class Pipe:
    x: float
    top_height: float
    special: bool = False
    passed: bool = False
    offset: float = 0.0
    direction: int = 1
    width: float = PIPE_WIDTH
    gap: float = PIPE_GAP

    @property
    def gap_top(self) -> float:
        return self.top_height + self.offset

    @property
    def gap_bottom(self) -> float:
        return self.top_height + self.offset + self.gap

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def right(self) -> float:
        return self.x + self.width


@dataclass
class Weed:
    x: float
    y: float


@dataclass
class Raindrop:
    x: float
    y: float
    speed: float
