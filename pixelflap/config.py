"""Runtime configuration loaded from `.env`, the environment and the CLI."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .constants import FPS
from .modes import Detail, Difficulty, Theme, Weather


ENV_PREFIX = "PIXELFLAP_"


@dataclass(frozen=True)
class GameConfig:
    difficulty: Difficulty = Difficulty.NORMAL
    theme: Theme = Theme.LIGHT
    weather: Weather = Weather.NONE
    detail: Detail = Detail.FULL
    music: bool = True
    sfx: bool = True
    fullscreen: bool = False
    fps: int = FPS
    seed: Optional[int] = None
    log_level: str = "info"
    log_file: Optional[Path] = None


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in ("1", "true", "yes", "on"):
        return True
    if value in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_enum(enum_cls, name: str, raw: str):
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"{name} must be one of: {choices}; got {raw!r}") from None


def load_config(env: Optional[dict] = None, **overrides) -> GameConfig:
    """Load configuration from .env and environment variables.

    Keyword ``overrides`` (typically parsed command-line flags) win over the
    environment; ``None`` values are ignored.
    """
    if env is None:
        load_dotenv()
        env = dict(os.environ)

    def get(key: str) -> Optional[str]:
        return env.get(ENV_PREFIX + key)

    values: dict = {}
    raw = get("DIFFICULTY")
    if raw:
        values["difficulty"] = _parse_enum(Difficulty, "PIXELFLAP_DIFFICULTY", raw)
    raw = get("THEME")
    if raw:
        values["theme"] = _parse_enum(Theme, "PIXELFLAP_THEME", raw)
    raw = get("WEATHER")
    if raw:
        values["weather"] = _parse_enum(Weather, "PIXELFLAP_WEATHER", raw)
    raw = get("DETAIL")
    if raw:
        values["detail"] = _parse_enum(Detail, "PIXELFLAP_DETAIL", raw)
    for key in ("MUSIC", "SFX", "FULLSCREEN"):
        raw = get(key)
        if raw:
            values[key.lower()] = _parse_bool(ENV_PREFIX + key, raw)
    raw = get("FPS")
    if raw:
        values["fps"] = int(raw)
    raw = get("SEED")
    if raw:
        values["seed"] = int(raw)
    raw = get("LOG_LEVEL")
    if raw:
        values["log_level"] = raw.strip().lower()
    raw = get("LOG_FILE")
    if raw:
        values["log_file"] = Path(raw)

    values.update({key: value for key, value in overrides.items() if value is not None})

    config = GameConfig(**values)
    if config.fps <= 0:
        raise ValueError(f"fps must be positive, got {config.fps}")
    return config
