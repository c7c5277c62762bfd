"""Vertical motion of the bird."""

from __future__ import annotations

from .constants import ROTATION_FACTOR
from .entities import Bird


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def integrate(bird: Bird) -> None:
    """Advance the bird by one tick: gravity first, then position."""

    bird.vy += bird.gravity
    bird.y += bird.vy
    bird.rotation = clamp(bird.vy * ROTATION_FACTOR, -1.0, 1.0)


def flap(bird: Bird) -> None:
    # the impulse replaces the current velocity
    bird.vy = bird.lift
