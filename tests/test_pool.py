import random

import pytest

from flappy_poles.config import Tuning
from flappy_poles.entities import Obstacle
from flappy_poles.pool import ObstaclePool

TUNING = Tuning.from_viewport(1200, 600)


@pytest.mark.parametrize("size", [(1200, 600), (240, 320), (1920, 1080), (400, 900)])
def test_spawned_gaps_stay_inside_playfield(size: tuple[int, int]) -> None:
    """Spawned gaps respect the size range and the top/bottom margins."""
    t = Tuning.from_viewport(*size)
    pool = ObstaclePool(random.Random(7))
    for _ in range(300):
        obs = pool.spawn(t)
        assert t.gap_min <= obs.gap_size <= t.gap_max
        assert obs.gap_top >= t.margin_top
        assert obs.gap_top + obs.gap_size <= t.height - t.ground_height - t.margin_bottom
        assert obs.x == t.width + t.spawn_margin
        assert obs.width == t.pipe_width
        assert obs.passed is False


def test_spawn_is_reproducible_with_seed() -> None:
    """Two pools seeded alike produce the same gaps."""
    a = ObstaclePool(random.Random(42))
    b = ObstaclePool(random.Random(42))
    gaps_a = [(o.gap_top, o.gap_size) for o in (a.spawn(TUNING) for _ in range(20))]
    gaps_b = [(o.gap_top, o.gap_size) for o in (b.spawn(TUNING) for _ in range(20))]
    assert gaps_a == gaps_b


def test_update_spawns_when_timer_reaches_interval() -> None:
    """The spawn timer accumulates milliseconds and resets on spawn."""
    pool = ObstaclePool(random.Random(1))
    assert pool.update(0.5, TUNING, 1000) is None
    assert pool.spawn_timer == 500
    spawned = pool.update(0.5, TUNING, 1000)
    assert spawned is not None
    assert pool.spawn_timer == 0
    assert len(pool) == 1
    # spawned at width + margin, then scrolled with everything else
    assert spawned.x == pytest.approx(TUNING.width + TUNING.spawn_margin - TUNING.pipe_speed * 30)


def test_pool_is_newest_first_and_descending_x() -> None:
    """The pool lists the newest obstacle first, so x only decreases along it."""
    pool = ObstaclePool(random.Random(2))
    spawned = []
    for _ in range(40):
        obs = pool.update(0.25, TUNING, 1000)
        if obs is not None:
            spawned.append(obs)
    xs = [o.x for o in pool]
    assert len(xs) == 10
    assert xs == sorted(xs, reverse=True)
    assert list(pool) == spawned[::-1]


def test_mark_passed_flips_once() -> None:
    """An obstacle is reported as passed exactly once."""
    pool = ObstaclePool(random.Random(3))
    ahead = pool.add(Obstacle(400, 100, 150, 144))
    behind = pool.add(Obstacle(100, 100, 150, 144))
    assert pool.mark_passed(300) == [behind]
    assert behind.passed and not ahead.passed
    assert pool.mark_passed(300) == []
    ahead.x = 100
    assert pool.mark_passed(300) == [ahead]


def test_retire_beyond_margin() -> None:
    """Only obstacles wholly past the removal margin are dropped."""
    pool = ObstaclePool(random.Random(4))
    keep = pool.add(Obstacle(-244, 100, 150, 144))  # trailing edge exactly at -100
    gone = pool.add(Obstacle(-300, 100, 150, 144))
    assert pool.retire(100) == [gone]
    assert list(pool) == [keep]


def test_reset_clears_pool_and_timer() -> None:
    pool = ObstaclePool(random.Random(5))
    pool.update(2.0, TUNING, 1000)
    assert len(pool) == 1
    pool.reset()
    assert len(pool) == 0
    assert pool.spawn_timer == 0
