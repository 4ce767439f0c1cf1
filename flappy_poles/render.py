"""Scene rendering from session snapshots."""

from __future__ import annotations

import math

import pygame

from .config import (
    BIRD_BEAK,
    BIRD_BODY,
    BIRD_WING,
    CLOUD_COLOR,
    EYE_COLOR,
    GROUND_COLOR,
    GROUND_EDGE,
    GROUND_LINE,
    OVERLAY_COLOR,
    POLE_COLOR,
    POLE_OUTLINE,
    PUPIL_COLOR,
    SKY_STOPS,
    SUN_COLOR,
    TEXT_COLOR,
    TEXT_SHADOW,
)
from .session import BirdView, ObstacleView, SessionState, Snapshot
from .utils import scale_color, vertical_gradient


class Renderer:
    """Draws a full frame; holds no game state beyond cached surfaces."""

    def __init__(
        self,
        screen: pygame.Surface,
        bird_image: pygame.Surface | None = None,
        pole_image: pygame.Surface | None = None,
    ) -> None:
        self.screen = screen
        self.bird_image = bird_image
        self.pole_image = pole_image
        self.font_big = pygame.font.SysFont(None, 64)
        self.font_small = pygame.font.SysFont(None, 30)
        self._build_static()

    def resize(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._build_static()

    def _build_static(self) -> None:
        w, h = self.screen.get_size()
        self.sky = pygame.surfarray.make_surface(vertical_gradient(w, h, SKY_STOPS))
        self.sun = self._make_sun(min(w, h) * 0.045)

    @staticmethod
    def _make_sun(radius: float) -> pygame.Surface:
        # Radial glow: opaque white core fading to transparent yellow.
        outer = max(2, int(radius * 1.6))
        s = pygame.Surface((outer * 2, outer * 2), pygame.SRCALPHA)
        for r in range(outer, 0, -1):
            t = r / outer
            alpha = int(240 * (1.0 - t) ** 0.6) if t > 0.4 else 240
            color = SUN_COLOR if t > 0.25 else (255, 255, 255)
            pygame.draw.circle(s, (*color, alpha), (outer, outer), r)
        return s

    def draw(self, snap: Snapshot, time_s: float) -> None:
        surf = self.screen
        t = snap.tuning
        surf.blit(self.sky, (0, 0))
        surf.blit(self.sun, self.sun.get_rect(center=(int(t.width * 0.15), int(t.height * 0.12))))
        self._draw_cloud(surf, t.width * 0.55, t.height * 0.15, 120)
        self._draw_cloud(surf, t.width * 0.78, t.height * 0.22, 90)
        self._draw_ground(surf, snap, time_s)
        for obs in snap.obstacles:
            self._draw_poles(surf, obs, snap)
        self._draw_bird(surf, snap.bird)
        self._draw_hud(surf, snap)
        if snap.state is not SessionState.RUNNING:
            self._draw_overlay(surf, snap)

    @staticmethod
    def _draw_cloud(surf: pygame.Surface, cx: float, cy: float, size: float) -> None:
        w, h = int(size * 2), int(size * 1.4)
        s = pygame.Surface((w, h), pygame.SRCALPHA)
        ox, oy = w / 2, h / 2
        for dx, dy, r in ((-0.35, 0.0, 0.4), (0.0, -0.15, 0.5), (0.4, 0.0, 0.36)):
            pygame.draw.circle(s, CLOUD_COLOR, (int(ox + dx * size), int(oy + dy * size)), int(r * size))
        surf.blit(s, (int(cx - ox), int(cy - oy)))

    @staticmethod
    def _draw_ground(surf: pygame.Surface, snap: Snapshot, time_s: float) -> None:
        t = snap.tuning
        gh = t.ground_height
        top = t.ground_y
        pygame.draw.rect(surf, GROUND_COLOR, pygame.Rect(0, top, t.width, gh))
        pygame.draw.rect(surf, GROUND_EDGE, pygame.Rect(0, top, t.width, max(1, int(gh * 0.25))))
        points = [
            (x, top + math.sin(x * 0.06 + time_s / 0.6) * 2) for x in range(0, t.width + 16, 16)
        ]
        if len(points) >= 2:
            line = pygame.Surface((t.width, 8), pygame.SRCALPHA)
            pygame.draw.lines(line, GROUND_LINE, False, [(x, y - top + 4) for x, y in points], 1)
            surf.blit(line, (0, top - 4))

    def _draw_poles(self, surf: pygame.Surface, obs: ObstacleView, snap: Snapshot) -> None:
        t = snap.tuning
        x, w = int(obs.x), int(obs.width)
        top_h = int(obs.gap_top)
        bottom_y = int(obs.gap_top + obs.gap_size)
        bottom_h = t.ground_y - bottom_y + 2
        top_rect = pygame.Rect(x, 0, w, top_h)
        bottom_rect = pygame.Rect(x, bottom_y, w, max(0, bottom_h))
        if self.pole_image is not None:
            if top_h > 0:
                img = pygame.transform.smoothscale(self.pole_image, top_rect.size)
                surf.blit(pygame.transform.flip(img, False, True), top_rect)
            if bottom_h > 0:
                surf.blit(pygame.transform.smoothscale(self.pole_image, bottom_rect.size), bottom_rect)
        else:
            shade = scale_color(POLE_COLOR, 0.8)
            for rect, lip_y in ((top_rect, top_h - 18), (bottom_rect, bottom_y)):
                if rect.height <= 0:
                    continue
                pygame.draw.rect(surf, POLE_COLOR, rect)
                pygame.draw.rect(surf, shade, pygame.Rect(rect.x + w * 2 // 3, rect.y, w // 3, rect.height))
                lip = pygame.Rect(x - 4, lip_y, w + 8, 18)
                pygame.draw.rect(surf, POLE_COLOR, lip)
                pygame.draw.rect(surf, POLE_OUTLINE, lip, 2)
        pygame.draw.rect(surf, POLE_OUTLINE, bottom_rect, 3)

    def _draw_bird(self, surf: pygame.Surface, bird: BirdView) -> None:
        w, h = max(1, int(bird.width)), max(1, int(bird.height))
        if self.bird_image is not None:
            sprite = pygame.transform.smoothscale(self.bird_image, (w, h))
        else:
            sprite = pygame.Surface((w, h), pygame.SRCALPHA)
            pygame.draw.ellipse(sprite, BIRD_BODY, pygame.Rect(0, int(h * 0.1), int(w * 0.9), int(h * 0.8)))
            pygame.draw.ellipse(sprite, BIRD_WING, pygame.Rect(int(w * 0.1), int(h * 0.45), int(w * 0.45), int(h * 0.3)))
            beak = [(w * 0.78, h * 0.45), (w, h * 0.55), (w * 0.78, h * 0.65)]
            pygame.draw.polygon(sprite, BIRD_BEAK, beak)
            eye = (int(w * 0.65), int(h * 0.38))
            pygame.draw.circle(sprite, EYE_COLOR, eye, max(2, h // 8))
            pygame.draw.circle(sprite, PUPIL_COLOR, (eye[0] + 1, eye[1]), max(1, h // 16))
        # Screen y grows downward, so a positive rotation tilts the nose down.
        rotated = pygame.transform.rotate(sprite, -math.degrees(bird.rotation))
        surf.blit(rotated, rotated.get_rect(center=(int(bird.x), int(bird.y))))

    def _text(self, surf: pygame.Surface, font: pygame.font.Font, text: str, **anchor: tuple[int, int]) -> None:
        shadow = font.render(text, True, TEXT_SHADOW)
        label = font.render(text, True, TEXT_COLOR)
        rect = label.get_rect(**anchor)
        surf.blit(shadow, rect.move(2, 2))
        surf.blit(label, rect)

    def _draw_hud(self, surf: pygame.Surface, snap: Snapshot) -> None:
        w = snap.tuning.width
        self._text(surf, self.font_big, str(snap.score), midtop=(w // 2, 20))
        self._text(surf, self.font_small, f"Best: {snap.best_score}", topright=(w - 20, 24))

    def _draw_overlay(self, surf: pygame.Surface, snap: Snapshot) -> None:
        t = snap.tuning
        shade = pygame.Surface((t.width, t.height), pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        surf.blit(shade, (0, 0))
        cx, cy = t.width // 2, t.height // 2
        if snap.state is SessionState.ENDED:
            title, button = f"Game Over - Score: {snap.last_score}", "Play Again"
        else:
            title, button = "Flappy Poles - Keyboard / Click", "Start Game"
        self._text(surf, self.font_big, title, center=(cx, cy - 50))
        self._text(surf, self.font_small, f"[ {button} ]", center=(cx, cy + 10))
        self._text(surf, self.font_small, "Space / Up / Click / Tap to flap", center=(cx, cy + 48))
        self._text(surf, self.font_small, f"Best: {snap.best_score}", center=(cx, cy + 84))
