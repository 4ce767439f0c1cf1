import pytest

from flappy_poles.config import BASE_SPAWN_INTERVAL_MS, MIN_SPAWN_INTERVAL_MS, Tuning
from flappy_poles.entities import Bird, Obstacle
from flappy_poles.rules import (
    clamp_to_ceiling,
    find_collision,
    gap_bounds,
    hits_ground,
    hits_obstacle,
    rest_on_ground,
    spawn_interval,
)
from flappy_poles.utils import Box

TUNING = Tuning.from_viewport(1200, 600)


def test_spawn_interval_decays_with_score() -> None:
    """Spawn interval shrinks 10 ms per point down to the floor."""
    assert spawn_interval(0) == BASE_SPAWN_INTERVAL_MS
    assert spawn_interval(50) == max(MIN_SPAWN_INTERVAL_MS, BASE_SPAWN_INTERVAL_MS - 500)
    assert spawn_interval(50) == 1600
    assert spawn_interval(120) == MIN_SPAWN_INTERVAL_MS
    assert spawn_interval(10_000) == MIN_SPAWN_INTERVAL_MS


def test_gap_bounds_ignore_score() -> None:
    """Gap size bounds come straight from the viewport tuning."""
    assert gap_bounds(TUNING) == (TUNING.gap_min, TUNING.gap_max)


def test_hit_box_inside_gap_does_not_collide() -> None:
    """A hit-box wholly inside the gap touches neither segment."""
    obs = Obstacle(280, 100, 150, 144)
    inside = Box.centered(310, 175, 19.2, 21.6)  # spans [153.4, 196.6]
    assert hits_obstacle(inside, obs, TUNING.height) is False
    assert find_collision(inside, [obs], TUNING.height) is None


def test_hit_box_overlapping_either_segment_collides() -> None:
    """Overlapping the top or the bottom segment is a hit."""
    obs = Obstacle(280, 100, 150, 144)
    high = Box.centered(310, 110, 19.2, 21.6)
    low = Box.centered(310, 240, 19.2, 21.6)
    assert hits_obstacle(high, obs, TUNING.height) is True
    assert hits_obstacle(low, obs, TUNING.height) is True


def test_hit_box_clear_of_obstacle_horizontally() -> None:
    """No hit when the boxes are apart on the x axis."""
    obs = Obstacle(600, 100, 150, 144)
    box = Box.centered(300, 50, 19.2, 21.6)  # level with the top pole, far to the left
    assert hits_obstacle(box, obs, TUNING.height) is False


def test_find_collision_returns_first_match() -> None:
    """The first intersecting obstacle in iteration order is reported."""
    first = Obstacle(280, 400, 100, 144)
    second = Obstacle(290, 400, 100, 144)
    box = Box.centered(300, 300, 19.2, 21.6)
    assert find_collision(box, [first, second], TUNING.height) is first
    assert find_collision(box, [second, first], TUNING.height) is second


def test_ground_hit_and_rest() -> None:
    """Reaching the ground line is a hit and the bird is put back on it."""
    bird = Bird(300, 0, 48, 48)
    bird.y = TUNING.ground_y - bird.half_height - 1
    assert hits_ground(bird, TUNING) is False
    bird.y += 2
    assert hits_ground(bird, TUNING) is True
    bird.y += 50
    rest_on_ground(bird, TUNING)
    assert bird.y + bird.half_height == pytest.approx(TUNING.ground_y)


def test_ceiling_is_a_soft_stop() -> None:
    """The ceiling clamps position and velocity without ending anything."""
    bird = Bird(300, 5, 48, 48)
    bird.vy = -4.0
    assert clamp_to_ceiling(bird) is True
    assert bird.y == pytest.approx(bird.half_height)
    assert bird.vy == 0.0
    bird.y = 200
    bird.vy = -4.0
    assert clamp_to_ceiling(bird) is False
    assert bird.vy == -4.0
