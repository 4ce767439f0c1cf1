"""Game entities: the player-controlled bird and the pole obstacles.

Entities only hold simulation state. Drawing lives in ``render``, which works
from session snapshots.
"""

from __future__ import annotations

from .config import (
    HITBOX_HALF_HEIGHT,
    HITBOX_HALF_WIDTH,
    ROTATION_DIVISOR,
    ROTATION_MAX,
    ROTATION_MIN,
    TIME_SCALE,
)
from .utils import Box, clamp


class Bird:
    """Avatar state; ``x``/``y`` are the sprite center."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.width = float(width)
        self.height = float(height)
        self.vy = 0.0
        self.rotation = 0.0

    def reset(self, x: float, y: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.vy = 0.0
        self.rotation = 0.0

    def resize(self, x: float, width: float, height: float) -> None:
        self.x = float(x)
        self.width = float(width)
        self.height = float(height)

    def flap(self, impulse: float) -> None:
        """Override the vertical velocity with the flap impulse."""
        self.vy = impulse

    def update(self, dt: float, gravity: float) -> None:
        step = dt * TIME_SCALE
        self.vy += gravity * step
        self.y += self.vy * step
        self.rotation = clamp(self.vy / ROTATION_DIVISOR, ROTATION_MIN, ROTATION_MAX)

    @property
    def half_height(self) -> float:
        """Vertical half extent of the hit-box."""
        return self.height * HITBOX_HALF_HEIGHT

    def hit_box(self) -> Box:
        return Box.centered(self.x, self.y, self.width * HITBOX_HALF_WIDTH, self.half_height)


class Obstacle:
    """A pair of poles sharing one horizontal span, with a gap between them."""

    def __init__(self, x: float, gap_top: float, gap_size: float, width: float) -> None:
        self.x = float(x)
        self.gap_top = gap_top
        self.gap_size = gap_size
        self.width = width
        self.passed = False

    @property
    def trailing_edge(self) -> float:
        return self.x + self.width

    @property
    def gap_bottom(self) -> float:
        return self.gap_top + self.gap_size

    def update(self, dt: float, speed: float) -> None:
        self.x -= speed * dt * TIME_SCALE

    def offscreen(self, margin: float) -> bool:
        return self.trailing_edge < -margin

    def top_box(self) -> Box:
        return Box(self.x, 0.0, self.trailing_edge, self.gap_top)

    def bottom_box(self, floor: float) -> Box:
        return Box(self.x, self.gap_bottom, self.trailing_edge, floor)
