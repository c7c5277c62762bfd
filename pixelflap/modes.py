"""Mode toggles that parameterise the simulation and the renderer."""

from __future__ import annotations

from enum import Enum
from typing import List

from .constants import EASY_INTERVAL, NORMAL_INTERVAL, RAIN_RATE_FULL, RAIN_RATE_LOW
from .effects import Cue, Effects, PlayCue, RewindCue, StopCue
from .log import get_logger

logger = get_logger("modes")


class Difficulty(str, Enum):
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class Theme(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class Weather(str, Enum):
    NONE = "none"
    DESERT = "desert"
    SNOW = "snow"
    RAIN = "rain"


class Detail(str, Enum):
    FULL = "full"
    LOW = "low"


def _next(member: Enum) -> Enum:
    members: List[Enum] = list(type(member))
    return members[(members.index(member) + 1) % len(members)]


class ModeConfig:
    """In-memory mode flags.

    Setters return the effects a change implies (for example starting the
    rain loop); they never touch the simulation state.
    """

    def __init__(
        self,
        difficulty: Difficulty = Difficulty.NORMAL,
        theme: Theme = Theme.LIGHT,
        weather: Weather = Weather.NONE,
        detail: Detail = Detail.FULL,
        music_enabled: bool = True,
        sfx_enabled: bool = True,
        fullscreen: bool = False,
    ) -> None:
        self.difficulty = difficulty
        self.theme = theme
        self.weather = weather
        self.detail = detail
        self.music_enabled = music_enabled
        self.sfx_enabled = sfx_enabled
        self.fullscreen = fullscreen

    @property
    def spawn_interval(self) -> int:
        return EASY_INTERVAL if self.difficulty is Difficulty.EASY else NORMAL_INTERVAL

    @property
    def oscillate_specials(self) -> bool:
        return self.difficulty is Difficulty.HARD

    @property
    def raining(self) -> bool:
        return self.weather is Weather.RAIN

    @property
    def dark(self) -> bool:
        return self.theme is Theme.DARK

    @property
    def low_detail(self) -> bool:
        return self.detail is Detail.LOW

    @property
    def rain_spawn_rate(self) -> float:
        return RAIN_RATE_LOW if self.low_detail else RAIN_RATE_FULL

    def set_difficulty(self, difficulty: Difficulty) -> Effects:
        self.difficulty = difficulty
        logger.info("difficulty set to %s", difficulty.value)
        return []

    def set_theme(self, theme: Theme) -> Effects:
        self.theme = theme
        logger.info("theme set to %s", theme.value)
        return []

    def set_detail(self, detail: Detail) -> Effects:
        self.detail = detail
        logger.info("render detail set to %s", detail.value)
        return []

    def set_weather(self, weather: Weather) -> Effects:
        was_raining = self.raining
        self.weather = weather
        logger.info("weather set to %s", weather.value)
        if self.raining and not was_raining and self.sfx_enabled:
            return [RewindCue(Cue.RAIN), PlayCue(Cue.RAIN)]
        if was_raining and not self.raining:
            return [StopCue(Cue.RAIN)]
        return []

    def set_music(self, enabled: bool, game_over: bool = False) -> Effects:
        self.music_enabled = enabled
        logger.info("music %s", "on" if enabled else "off")
        if enabled and not game_over:
            return [RewindCue(Cue.MUSIC), PlayCue(Cue.MUSIC)]
        return [StopCue(Cue.MUSIC)]

    def set_sfx(self, enabled: bool) -> Effects:
        self.sfx_enabled = enabled
        logger.info("sound effects %s", "on" if enabled else "off")
        if not enabled:
            return [StopCue(Cue.RAIN)]
        if self.raining:
            return [RewindCue(Cue.RAIN), PlayCue(Cue.RAIN)]
        return []

    def cycle_difficulty(self) -> Effects:
        return self.set_difficulty(_next(self.difficulty))

    def cycle_weather(self) -> Effects:
        return self.set_weather(_next(self.weather))

    def toggle_theme(self) -> Effects:
        return self.set_theme(Theme.LIGHT if self.dark else Theme.DARK)

    def toggle_detail(self) -> Effects:
        return self.set_detail(Detail.FULL if self.low_detail else Detail.LOW)

    def toggle_music(self, game_over: bool = False) -> Effects:
        return self.set_music(not self.music_enabled, game_over)

    def toggle_sfx(self) -> Effects:
        return self.set_sfx(not self.sfx_enabled)
