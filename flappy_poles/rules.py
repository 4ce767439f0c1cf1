"""Difficulty scaling and collision/bounds checks."""

from __future__ import annotations

from typing import Iterable

from .config import (
    BASE_SPAWN_INTERVAL_MS,
    MIN_SPAWN_INTERVAL_MS,
    SPAWN_DECAY_PER_POINT_MS,
    Tuning,
)
from .entities import Bird, Obstacle
from .utils import Box, boxes_intersect


def spawn_interval(
    score: int,
    base: float = BASE_SPAWN_INTERVAL_MS,
    minimum: float = MIN_SPAWN_INTERVAL_MS,
    decay: float = SPAWN_DECAY_PER_POINT_MS,
) -> float:
    """Milliseconds between spawns; tightens linearly with score down to ``minimum``."""
    return max(minimum, base - score * decay)


def gap_bounds(tuning: Tuning) -> tuple[int, int]:
    # Gap size does not tighten with score; only spawn frequency does.
    return tuning.gap_min, tuning.gap_max


def hits_obstacle(hit_box: Box, obstacle: Obstacle, floor: float) -> bool:
    return boxes_intersect(hit_box, obstacle.top_box()) or boxes_intersect(
        hit_box, obstacle.bottom_box(floor)
    )


def find_collision(hit_box: Box, obstacles: Iterable[Obstacle], floor: float) -> Obstacle | None:
    """Return the first obstacle, in iteration order, that the hit-box overlaps."""
    for obs in obstacles:
        if hits_obstacle(hit_box, obs, floor):
            return obs
    return None


def hits_ground(bird: Bird, tuning: Tuning) -> bool:
    return bird.y + bird.half_height >= tuning.ground_y


def rest_on_ground(bird: Bird, tuning: Tuning) -> None:
    bird.y = tuning.ground_y - bird.half_height


def clamp_to_ceiling(bird: Bird) -> bool:
    """Stop the bird at the top edge. Returns True if it was clamped."""
    if bird.y - bird.half_height <= 0:
        bird.y = bird.half_height
        bird.vy = 0.0
        return True
    return False
