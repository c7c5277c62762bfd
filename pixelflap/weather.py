"""Rain particles drawn over the scene."""

from __future__ import annotations

import random
from typing import List, Optional

from .constants import FLOOR_Y, RAIN_MIN_SPEED, RAIN_SPEED_SPREAD, WIDTH
from .entities import Raindrop


class WeatherField:
    def __init__(self, rng: Optional[random.Random] = None, width: int = WIDTH) -> None:
        self.rng = rng or random.Random()
        self.width = width
        self.drops: List[Raindrop] = []

    def clear(self) -> None:
        self.drops = []

    def update(self, enabled: bool, spawn_rate: float, floor_y: float = FLOOR_Y) -> None:
        if not enabled:
            if self.drops:
                self.clear()
            return

        for drop in self.drops:
            drop.y += drop.speed
        self.drops = [drop for drop in self.drops if drop.y <= floor_y]

        if self.rng.random() < spawn_rate:
            self.drops.append(
                Raindrop(
                    x=self.rng.random() * self.width,
                    y=0.0,
                    speed=RAIN_MIN_SPEED + self.rng.random() * RAIN_SPEED_SPREAD,
                )
            )
