"""Geometry and color utility functions used across the game."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Box:
    """Axis-aligned rectangle in screen coordinates (y grows downward)."""

    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def centered(cls, cx: float, cy: float, half_w: float, half_h: float) -> "Box":
        return cls(cx - half_w, cy - half_h, cx + half_w, cy + half_h)


def boxes_intersect(a: Box, b: Box) -> bool:
    """True unless one box lies entirely to one side of the other.

    Touching edges count as an intersection.
    """
    return not (a.left > b.right or a.right < b.left or a.top > b.bottom or a.bottom < b.top)


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int, h: int, stops: Sequence[tuple[float, tuple[int, int, int]]]
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending color stops from top to bottom.

    Args:
        w, h: Dimensions.
        stops: (offset in [0, 1], RGB) pairs sorted by offset.

    Returns:
        RGB array laid out for surfarray.
    """
    offsets = np.array([s[0] for s in stops], dtype=np.float32)
    colors = np.array([s[1] for s in stops], dtype=np.float32)
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)
    column = np.stack([np.interp(t, offsets, colors[:, c]) for c in range(3)], axis=-1)
    column = np.clip(np.rint(column), 0, 255).astype(np.uint8)
    return np.broadcast_to(column[np.newaxis, :, :], (w, h, 3)).copy()
