"""Best-score persistence."""

from __future__ import annotations

import json
from pathlib import Path

from .config import BEST_SCORE_KEY
from .logger import get_logger

log = get_logger("storage")


class JsonScoreStore:
    """Keeps the best score as ``{"flappy_best": N}`` in a small JSON file.

    Read and write failures are logged and otherwise ignored, so a broken disk
    never interrupts a game.
    """

    def __init__(self, path: Path | str, key: str = BEST_SCORE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def load_best_score(self) -> int:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
            value = int(data.get(self.key, 0))
        except FileNotFoundError:
            return 0
        except (OSError, ValueError, TypeError, AttributeError) as exc:
            log.warning("could not read best score from %s: %s", self.path, exc)
            return 0
        return max(0, value)

    def save_best_score(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp = self.path.with_name(self.path.name + ".tmp")
            with tmp.open("w", encoding="utf-8") as f:
                json.dump({self.key: int(value)}, f)
            # Readers see either the old file or the new one.
            tmp.replace(self.path)
        except OSError as exc:
            log.warning("could not save best score to %s: %s", self.path, exc)
            return
        log.debug("saved best score %d to %s", value, self.path)


class MemoryScoreStore:
    """In-process store for runs that should not touch the disk."""

    def __init__(self, best: int = 0) -> None:
        self.best = best
        self.saves: list[int] = []

    def load_best_score(self) -> int:
        return self.best

    def save_best_score(self, value: int) -> None:
        self.best = value
        self.saves.append(value)
