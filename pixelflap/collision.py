"""Bird against bounds and pipes.

The floor ends the game; the ceiling only stops the bird. Both clamp the
bird so it never leaves the playfield visually.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .constants import FLOOR_Y
from .entities import Bird, Pipe


@dataclass(frozen=True)
class CollisionReport:
    ground: bool = False
    ceiling: bool = False
    pipes_hit: int = 0

    @property
    def terminal(self) -> bool:
        return self.ground or self.pipes_hit > 0


def check_ground(bird: Bird, floor_y: float = FLOOR_Y) -> bool:
    if bird.bottom >= floor_y:
        bird.y = floor_y - bird.radius
        return True
    return False


def check_ceiling(bird: Bird) -> bool:
    if bird.top <= 0:
        bird.y = bird.radius
        bird.vy = 0.0
        return True
    return False


def check_pipe(bird: Bird, pipe: Pipe) -> bool:
    overlaps_x = bird.right > pipe.x and bird.left < pipe.right
    if not overlaps_x:
        return False
    return bird.top < pipe.gap_top or bird.bottom > pipe.gap_bottom


def detect(bird: Bird, pipes: Iterable[Pipe], floor_y: float = FLOOR_Y) -> CollisionReport:
    ground = check_ground(bird, floor_y)
    ceiling = check_ceiling(bird)
    pipes_hit = sum(1 for pipe in pipes if check_pipe(bird, pipe))
    return CollisionReport(ground=ground, ceiling=ceiling, pipes_hit=pipes_hit)
