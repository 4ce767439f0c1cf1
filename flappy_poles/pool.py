"""Obstacle pool: timed spawning, scrolling, pass detection and retirement."""

from __future__ import annotations

import random
from typing import Iterator

from .config import Tuning
from .entities import Obstacle
from .logger import get_logger
from .rules import gap_bounds

log = get_logger("pool")


class ObstaclePool:
    """Obstacles newest first.

    Every obstacle spawns at the same x and scrolls at the same speed, so
    newest first is also descending x: the list reads right to left on screen.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.obstacles: list[Obstacle] = []
        self.spawn_timer = 0.0  # ms

    def __iter__(self) -> Iterator[Obstacle]:
        return iter(self.obstacles)

    def __len__(self) -> int:
        return len(self.obstacles)

    def reset(self) -> None:
        self.obstacles.clear()
        self.spawn_timer = 0.0

    def add(self, obstacle: Obstacle) -> Obstacle:
        self.obstacles.insert(0, obstacle)
        return obstacle

    def spawn(self, tuning: Tuning) -> Obstacle:
        """Create one obstacle just beyond the right edge with a random gap."""
        gap_min, gap_max = gap_bounds(tuning)
        upper = tuning.margin_top
        room = tuning.gap_floor - upper
        gap = self._rng.randint(gap_min, gap_max)
        if gap > room:
            # Only reachable on degenerate viewports; keep the gap on screen.
            gap = max(0, room)
        gap_top = self._rng.randint(upper, upper + max(0, room - gap))
        obs = self.add(Obstacle(tuning.width + tuning.spawn_margin, gap_top, gap, tuning.pipe_width))
        log.debug("spawned obstacle gap_top=%d gap=%d", gap_top, gap)
        return obs

    def update(self, dt: float, tuning: Tuning, interval_ms: float) -> Obstacle | None:
        """Advance the spawn timer, spawn if due, then scroll every obstacle.

        Returns the obstacle spawned this tick, if any.
        """
        spawned = None
        self.spawn_timer += dt * 1000.0
        if self.spawn_timer >= interval_ms:
            self.spawn_timer = 0.0
            spawned = self.spawn(tuning)
        for obs in self.obstacles:
            obs.update(dt, tuning.pipe_speed)
        return spawned

    def mark_passed(self, x: float) -> list[Obstacle]:
        """Flag obstacles whose trailing edge is now left of ``x``; each flips once."""
        newly: list[Obstacle] = []
        for obs in self.obstacles:
            if not obs.passed and obs.trailing_edge < x:
                obs.passed = True
                newly.append(obs)
        return newly

    def retire(self, margin: float) -> list[Obstacle]:
        """Drop obstacles that scrolled beyond ``margin`` left of the viewport."""
        gone = [o for o in self.obstacles if o.offscreen(margin)]
        if gone:
            self.obstacles = [o for o in self.obstacles if not o.offscreen(margin)]
            log.debug("retired %d obstacle(s)", len(gone))
        return gone
