"""Game session state machine.

A ``Session`` owns the bird, the obstacle pool and the score for the lifetime
of the process. It is driven by one ``tick`` per frame and talks to the outside
world only through three narrow collaborators: an audio sink, a score store and
whoever reads ``snapshot()`` to draw the frame.

Within one running tick the order is fixed: pending flap, bird integration,
spawn and scroll, pass-through scoring for every obstacle, retirement, then
obstacle collisions newest first (rightmost first), the ground and the
ceiling. A point earned on the same tick as a crash is kept and counts toward
the best score.

Collaborators are expected to swallow their own failures. Anything they still
raise is logged and dropped here, so sound and storage never change the run.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

from .config import Tuning
from .entities import Bird, Obstacle
from .logger import get_logger
from .pool import ObstaclePool
from .rules import clamp_to_ceiling, find_collision, hits_ground, rest_on_ground, spawn_interval

log = get_logger("session")


class SessionState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    ENDED = "ended"


class AudioSink(Protocol):
    def on_start(self) -> None: ...

    def on_pass(self) -> None: ...

    def on_crash(self) -> None: ...


class ScoreStore(Protocol):
    def load_best_score(self) -> int: ...

    def save_best_score(self, value: int) -> None: ...


class NullAudio:
    """Audio sink that plays nothing."""

    def on_start(self) -> None:
        pass

    def on_pass(self) -> None:
        pass

    def on_crash(self) -> None:
        pass


@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    width: float
    height: float
    rotation: float


@dataclass(frozen=True)
class ObstacleView:
    x: float
    gap_top: float
    gap_size: float
    width: float
    passed: bool


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of one frame for the renderer."""

    state: SessionState
    score: int
    best_score: int
    last_score: int
    bird: BirdView
    obstacles: tuple[ObstacleView, ...]
    tuning: Tuning


class Session:
    def __init__(
        self,
        width: float,
        height: float,
        *,
        audio: AudioSink | None = None,
        store: ScoreStore | None = None,
        rng: random.Random | None = None,
        bird_aspect: float = 1.0,
    ) -> None:
        self.tuning = Tuning.from_viewport(width, height, bird_aspect)
        self._bird_aspect = bird_aspect
        self.audio: AudioSink = audio if audio is not None else NullAudio()
        self.store = store
        self.state = SessionState.IDLE
        self.score = 0
        self.last_score = 0
        self.best_score = self._load_best()
        t = self.tuning
        self.bird = Bird(t.bird_x, t.height / 2, t.bird_width, t.bird_height)
        self.pool = ObstaclePool(rng)
        self._flap_pending = False

    def _load_best(self) -> int:
        if self.store is None:
            return 0
        try:
            return max(0, int(self.store.load_best_score()))
        except Exception:
            log.warning("best score unavailable, starting from 0", exc_info=True)
            return 0

    def _notify(self, fn: Callable[..., None], *args: object) -> None:
        try:
            fn(*args)
        except Exception:
            log.warning("%s failed", getattr(fn, "__qualname__", fn), exc_info=True)

    @property
    def obstacles(self) -> list[Obstacle]:
        return self.pool.obstacles

    @property
    def spawn_timer(self) -> float:
        return self.pool.spawn_timer

    @property
    def running(self) -> bool:
        return self.state is SessionState.RUNNING

    def start(self) -> bool:
        """Begin a run from Idle or Ended. No-op while already running."""
        if self.running:
            return False
        self.score = 0
        self.pool.reset()
        self.bird.reset(self.tuning.bird_x, self.tuning.height / 2)
        self._flap_pending = False
        self.state = SessionState.RUNNING
        log.info("session started (best=%d)", self.best_score)
        self._notify(self.audio.on_start)
        return True

    def flap(self) -> bool:
        """Queue a flap; it takes effect at the start of the next tick."""
        if not self.running:
            return False
        self._flap_pending = True
        return True

    def end(self) -> bool:
        """Stop the run, record the best score and cue the crash. Idempotent."""
        if not self.running:
            return False
        self.state = SessionState.ENDED
        self._flap_pending = False
        self.last_score = self.score
        if self.score > self.best_score:
            self.best_score = self.score
            if self.store is not None:
                self._notify(self.store.save_best_score, self.best_score)
            log.info("new best score %d", self.best_score)
        log.info("session ended with score %d", self.score)
        self._notify(self.audio.on_crash)
        return True

    def tick(self, dt: float) -> None:
        if not self.running:
            return
        t = self.tuning
        bird = self.bird

        if self._flap_pending:
            bird.flap(t.flap_impulse)
            self._flap_pending = False
        bird.update(dt, t.gravity)

        self.pool.update(dt, t, spawn_interval(self.score))
        for _ in self.pool.mark_passed(bird.x):
            self.score += 1
            self._notify(self.audio.on_pass)
        self.pool.retire(t.removal_margin)

        hit = find_collision(bird.hit_box(), self.pool, t.height)
        if hit is not None:
            log.debug("hit obstacle at x=%.1f", hit.x)
            self.end()
            return
        if hits_ground(bird, t):
            rest_on_ground(bird, t)
            self.end()
            return
        clamp_to_ceiling(bird)

    def resize(self, width: float, height: float, bird_aspect: float | None = None) -> None:
        """Recompute every size-derived constant for a new viewport."""
        if bird_aspect is not None:
            self._bird_aspect = bird_aspect
        self.tuning = Tuning.from_viewport(width, height, self._bird_aspect)
        t = self.tuning
        self.bird.resize(t.bird_x, t.bird_width, t.bird_height)
        self.bird.y = min(max(self.bird.y, 0.0), float(t.height))
        log.info("viewport resized to %dx%d", t.width, t.height)

    def snapshot(self) -> Snapshot:
        b = self.bird
        return Snapshot(
            state=self.state,
            score=self.score,
            best_score=self.best_score,
            last_score=self.last_score,
            bird=BirdView(b.x, b.y, b.width, b.height, b.rotation),
            obstacles=tuple(
                ObstacleView(o.x, o.gap_top, o.gap_size, o.width, o.passed) for o in self.pool
            ),
            tuning=self.tuning,
        )
