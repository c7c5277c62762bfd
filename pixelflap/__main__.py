"""Command-line entry point: ``python -m pixelflap``."""

from __future__ import annotations

import argparse
from typing import List, Optional

from .config import load_config
from .game import main as run_game
from .log import get_logger, setup_logging
from .modes import Detail, Difficulty, Theme, Weather

logger = get_logger("cli")


def _choices(enum_cls) -> str:
    return "{" + ",".join(member.value for member in enum_cls) + "}"


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pixelflap", description="Flap through the pipes.")
    parser.add_argument("--difficulty", type=Difficulty, metavar=_choices(Difficulty), help="pipe cadence and motion")
    parser.add_argument("--theme", type=Theme, metavar=_choices(Theme), help="light or dark palette")
    parser.add_argument("--weather", type=Weather, metavar=_choices(Weather), help="scenery and rain")
    parser.add_argument("--detail", type=Detail, metavar=_choices(Detail), help="filled or outline drawing")
    parser.add_argument("--no-music", dest="music", action="store_const", const=False, help="start with music off")
    parser.add_argument("--no-sfx", dest="sfx", action="store_const", const=False, help="start with sound effects off")
    parser.add_argument("--fullscreen", action="store_const", const=True, help="start in fullscreen")
    parser.add_argument("--fps", type=int, help="frames per second")
    parser.add_argument("--seed", type=int, help="seed for pipe heights and scenery")
    parser.add_argument("--log-level", help="debug, info, warning or error")
    parser.add_argument("--log-file", help="also write NDJSON logs to this file")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config = load_config(**vars(args))
    setup_logging(config.log_level, str(config.log_file) if config.log_file else None)
    logger.debug("config: %s", config)
    run_game(config)


if __name__ == "__main__":
    main()
