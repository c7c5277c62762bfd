"""Spawning, scrolling, scoring and retiring of pipe pairs."""

from __future__ import annotations

import random
from typing import List, Optional

from .constants import (
    HEIGHT,
    OSCILLATION_AMPLITUDE,
    OSCILLATION_STEP,
    PIPE_BOTTOM_MARGIN,
    PIPE_GAP,
    PIPE_MIN_MARGIN,
    PIPE_REMOVE_MARGIN,
    PIPE_SPAWN_OFFSET,
    PIPE_SPEED,
    SPECIAL_EVERY,
    WIDTH,
)
from .entities import Bird, Pipe
from .log import get_logger

logger = get_logger("obstacles")


def oscillate(pipe: Pipe, step: float = OSCILLATION_STEP, amplitude: float = OSCILLATION_AMPLITUDE) -> None:
    """Move the gap one step along a triangular wave around its spawn height."""

    pipe.offset += pipe.direction * step
    # turn back toward the centre once past the amplitude
    if pipe.offset > amplitude:
        pipe.direction = -1
    elif pipe.offset < -amplitude:
        pipe.direction = 1


class ObstacleManager:
    def __init__(self, rng: Optional[random.Random] = None, speed: float = PIPE_SPEED) -> None:
        self.rng = rng or random.Random()
        self.speed = speed
        self.pipes: List[Pipe] = []
        self.spawned = 0

    @property
    def gap_range(self) -> tuple:
        return PIPE_MIN_MARGIN, HEIGHT - PIPE_GAP - PIPE_BOTTOM_MARGIN

    def clear(self) -> None:
        self.pipes = []
        self.spawned = 0

    @staticmethod
    def should_spawn(frames: int, interval: int) -> bool:
        return frames % interval == 0

    def spawn(self) -> Pipe:
        low, high = self.gap_range
        top_height = self.rng.uniform(low, high)
        self.spawned += 1
        pipe = Pipe(
            x=WIDTH + PIPE_SPAWN_OFFSET,
            top_height=top_height,
            special=self.spawned % SPECIAL_EVERY == 0,
        )
        self.pipes.append(pipe)
        logger.debug(
            "spawned pipe #%d",
            self.spawned,
            extra={"data": {"top_height": round(top_height, 1), "special": pipe.special}},
        )
        return pipe

    def update(self, bird: Bird, oscillate_specials: bool = False) -> int:
        """Scroll every pipe one tick and return how many were passed."""

        scored = 0
        # back to front so removal does not skip the next pipe
        for i in range(len(self.pipes) - 1, -1, -1):
            pipe = self.pipes[i]
            pipe.x -= self.speed

            if oscillate_specials and pipe.special:
                oscillate(pipe)
            else:
                pipe.offset = 0.0

            if not pipe.passed and bird.x > pipe.center_x:
                pipe.passed = True
                scored += 1

            if pipe.right < -PIPE_REMOVE_MARGIN:
                del self.pipes[i]
        return scored
