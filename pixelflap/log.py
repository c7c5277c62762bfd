"""Logging setup for pixelflap."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

ROOT_LOGGER = "pixelflap"


class NdjsonFormatter(logging.Formatter):
    """Emit one JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "ts": datetime.now(timezone.utc).isoformat(timespec="milliseconds"),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        data = getattr(record, "data", None)
        if data:
            entry["data"] = data
        return json.dumps(entry, default=str)


class HumanFormatter(logging.Formatter):
    """Compact one-line format for terminal display."""

    COLORS = {
        "DEBUG": "\033[90m",
        "INFO": "\033[36m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[1;31m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace(ROOT_LOGGER + ".", "")
        msg = record.getMessage()
        data = getattr(record, "data", None)
        suffix = f"  {json.dumps(data, default=str)}" if data else ""
        return f"{color}{ts} [{record.levelname[0]}] {name}: {msg}{suffix}{self.RESET}"


def setup_logging(level: str = "info", log_file: Optional[str] = None) -> None:
    """Configure the pixelflap root logger."""
    root = logging.getLogger(ROOT_LOGGER)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(NdjsonFormatter())
        root.addHandler(fh)


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the pixelflap namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
