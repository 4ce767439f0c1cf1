"""Frame driver: wall-clock deltas clamped to a maximum step."""

from __future__ import annotations

import pygame

from .config import FPS, MAX_FRAME_DT


def clamp_dt(dt: float, max_dt: float = MAX_FRAME_DT) -> float:
    """Bound a frame delta to [0, max_dt] seconds."""
    return max(0.0, min(max_dt, dt))


class FrameClock:
    def __init__(self, fps: int = FPS, max_dt: float = MAX_FRAME_DT) -> None:
        self.fps = fps
        self.max_dt = max_dt
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        """Wait for the next frame and return the clamped delta in seconds."""
        return clamp_dt(self._clock.tick(self.fps) / 1000.0, self.max_dt)
