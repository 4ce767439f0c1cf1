"""Logging setup for Flappy Poles."""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone

ROOT_LOGGER = "flappy_poles"


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
        "DEBUG": "\033[90m",  # grey
        "INFO": "\033[36m",  # cyan
        "WARNING": "\033[33m",  # yellow
        "ERROR": "\033[31m",  # red
        "CRITICAL": "\033[1;31m",  # bold red
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname, "")
        ts = datetime.now().strftime("%H:%M:%S")
        name = record.name.replace(f"{ROOT_LOGGER}.", "")
        msg = record.getMessage()
        data = getattr(record, "data", None)
        suffix = f"  {json.dumps(data, default=str)}" if data else ""
        return f"{color}{ts} [{record.levelname[0]}] {name}: {msg}{suffix}{self.RESET}"


def setup_logging(level: str = "info", log_file: str | None = None) -> None:
    """Configure the flappy_poles root logger."""
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
    """Return a child logger under the flappy_poles namespace."""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")
