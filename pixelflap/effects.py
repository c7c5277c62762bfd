"""Side-effect requests emitted by the simulation.

The core never talks to the mixer or the HUD directly. Every operation
returns a list of these values and the loop driver hands them to the
adapters in :mod:`pixelflap.audio` and :mod:`pixelflap.display`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class Cue(str, Enum):
    MUSIC = "music"
    SCORE = "score"
    RAIN = "rain"
    GAME_OVER = "game_over"


LOOPING_CUES = frozenset({Cue.MUSIC, Cue.RAIN})


@dataclass(frozen=True)
class PlayCue:
    cue: Cue


@dataclass(frozen=True)
class StopCue:
    cue: Cue


@dataclass(frozen=True)
class RewindCue:
    cue: Cue


@dataclass(frozen=True)
class UpdateDisplay:
    score: int
    high_score: int


@dataclass(frozen=True)
class SetPrompt:
    text: Optional[str]  # None hides the prompt


Effect = Union[PlayCue, StopCue, RewindCue, UpdateDisplay, SetPrompt]
Effects = List[Effect]
