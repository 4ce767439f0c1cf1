"""Game configuration constants for Flappy Poles."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass
from pathlib import Path

from .logger import get_logger

log = get_logger("config")

# Game configuration
WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 600
FPS = 60
MIN_VIEWPORT_WIDTH = 240
MIN_VIEWPORT_HEIGHT = 320

# Frame timing
MAX_FRAME_DT = 0.032  # s, bounds the step after a stall
TIME_SCALE = 60.0  # physics tuning is per 60 Hz reference frame

# Physics (px/frame at the reference screen)
BASE_SCREEN_HEIGHT = 600
BASE_SCREEN_WIDTH = 1200
GRAVITY = 0.25
FLAP_STRENGTH = -3.5
PIPE_SPEED = 3.0
ROTATION_DIVISOR = 18.0
ROTATION_MIN = -0.8  # radians
ROTATION_MAX = 1.2

# Layout, as fractions of the viewport
BIRD_X_FRACTION = 0.25
BIRD_SIZE_FRACTION = 0.08
BIRD_SIZE_MIN = 40
BIRD_SIZE_MAX = 120
PIPE_WIDTH_FRACTION = 0.12
GAP_MIN_FRACTION = 0.18
GAP_MAX_FRACTION = 0.39
GROUND_FRACTION = 0.09
MARGIN_TOP_FRACTION = 0.08
MARGIN_BOTTOM_FRACTION = 0.07  # above the ground line

# Obstacles
SPAWN_MARGIN = 40  # px right of the viewport
REMOVAL_MARGIN = 100  # px left of the viewport

# Difficulty
BASE_SPAWN_INTERVAL_MS = 2100
MIN_SPAWN_INTERVAL_MS = 900
SPAWN_DECAY_PER_POINT_MS = 10

# Hit-box half extents relative to the sprite size
HITBOX_HALF_WIDTH = 0.4
HITBOX_HALF_HEIGHT = 0.45

# Persistence
BEST_SCORE_KEY = "flappy_best"
BEST_SCORE_ENV = "FLAPPY_POLES_BEST_FILE"

# Assets
ASSET_FILES = {
    "bird": "bird.png",
    "pole": "pole.png",
    "pass": "pass.ogg",
    "crash": "crash.ogg",
    "music": "music.ogg",
}
MUSIC_VOLUME = 0.6
PASS_VOLUME = 0.9
CRASH_VOLUME = 0.95

# Palette (sunny afternoon)
SKY_STOPS = (
    (0.0, (139, 227, 255)),
    (0.6, (102, 217, 255)),
    (1.0, (159, 233, 255)),
)
SUN_COLOR = (255, 255, 200)
CLOUD_COLOR = (255, 255, 255, 217)
GROUND_COLOR = (123, 214, 91)
GROUND_EDGE = (95, 184, 63)
GROUND_LINE = (0, 0, 0, 15)
POLE_COLOR = (92, 190, 74)
POLE_OUTLINE = (20, 40, 20)
BIRD_BODY = (250, 214, 60)
BIRD_WING = (236, 170, 40)
BIRD_BEAK = (245, 120, 40)
EYE_COLOR = (255, 255, 255)
PUPIL_COLOR = (20, 20, 24)
TEXT_COLOR = (255, 255, 255)
TEXT_SHADOW = (30, 60, 80)
OVERLAY_COLOR = (10, 30, 50, 150)


def default_best_score_path() -> Path:
    """Best-score file: ``$FLAPPY_POLES_BEST_FILE`` or ``~/.flappy_poles/best.json``."""
    override = os.environ.get(BEST_SCORE_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".flappy_poles" / "best.json"


def sanitize_viewport(width: float, height: float) -> tuple[int, int]:
    """Clamp viewport dimensions to safe minimums.

    Non-finite dimensions cannot be clamped meaningfully and raise ValueError.
    """
    if not (math.isfinite(width) and math.isfinite(height)):
        raise ValueError(f"viewport dimensions must be finite, got {width!r}x{height!r}")
    w = max(MIN_VIEWPORT_WIDTH, int(width))
    h = max(MIN_VIEWPORT_HEIGHT, int(height))
    if (w, h) != (width, height):
        log.warning("viewport %sx%s clamped to %dx%d", width, height, w, h)
    return w, h


def bird_size(width: int, height: int, aspect: float = 1.0) -> tuple[int, int]:
    """Sprite size for the bird: height from the viewport, width from the image aspect."""
    base = max(BIRD_SIZE_MIN, min(BIRD_SIZE_MAX, round(min(width, height) * BIRD_SIZE_FRACTION)))
    if not (math.isfinite(aspect) and aspect > 0):
        aspect = 1.0
    return max(1, round(base * aspect)), base


@dataclass(frozen=True)
class Tuning:
    """Size-derived constants, rebuilt whenever the viewport changes."""

    width: int
    height: int
    gravity: float  # px/frame^2
    flap_impulse: float  # px/frame
    pipe_speed: float  # px/frame
    pipe_width: int
    gap_min: int
    gap_max: int
    ground_height: int
    margin_top: int
    margin_bottom: int
    bird_x: int
    bird_width: int
    bird_height: int
    spawn_margin: int = SPAWN_MARGIN
    removal_margin: int = REMOVAL_MARGIN

    @classmethod
    def from_viewport(cls, width: float, height: float, bird_aspect: float = 1.0) -> "Tuning":
        w, h = sanitize_viewport(width, height)
        bird_w, bird_h = bird_size(w, h, bird_aspect)
        return cls(
            width=w,
            height=h,
            gravity=GRAVITY * (h / BASE_SCREEN_HEIGHT),
            flap_impulse=FLAP_STRENGTH * (h / BASE_SCREEN_HEIGHT),
            pipe_speed=PIPE_SPEED * (w / BASE_SCREEN_WIDTH),
            pipe_width=round(w * PIPE_WIDTH_FRACTION),
            gap_min=round(h * GAP_MIN_FRACTION),
            gap_max=round(h * GAP_MAX_FRACTION),
            ground_height=round(h * GROUND_FRACTION),
            margin_top=round(h * MARGIN_TOP_FRACTION),
            margin_bottom=round(h * MARGIN_BOTTOM_FRACTION),
            bird_x=round(w * BIRD_X_FRACTION),
            bird_width=bird_w,
            bird_height=bird_h,
        )

    @property
    def ground_y(self) -> int:
        """Screen y of the ground line."""
        return self.height - self.ground_height

    @property
    def gap_floor(self) -> int:
        """Lowest y the bottom of a gap may reach."""
        return self.ground_y - self.margin_bottom
