"""Game loop and pygame wiring for Flappy Poles."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

import pygame

from .audio import PygameAudio
from .clock import FrameClock
from .config import ASSET_FILES, FPS, WINDOW_HEIGHT, WINDOW_WIDTH, default_best_score_path
from .controls import Action, apply_action, map_event
from .logger import get_logger, setup_logging
from .render import Renderer
from .session import Session
from .storage import JsonScoreStore, MemoryScoreStore

log = get_logger("game")


def load_image(assets_dir: Path | None, name: str) -> pygame.Surface | None:
    """Load an optional sprite; None when absent or unreadable."""
    if assets_dir is None:
        return None
    path = assets_dir / ASSET_FILES[name]
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path)).convert_alpha()
    except pygame.error as exc:
        log.warning("could not load %s: %s", path, exc)
        return None


class Game:
    """Top-level controller: owns the window and drives the session each frame."""

    def __init__(
        self,
        width: int = WINDOW_WIDTH,
        height: int = WINDOW_HEIGHT,
        *,
        fps: int = FPS,
        seed: int | None = None,
        store: JsonScoreStore | MemoryScoreStore | None = None,
        assets_dir: Path | None = None,
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption("Flappy Poles")
        self.clock = FrameClock(fps)
        bird_image = load_image(assets_dir, "bird")
        pole_image = load_image(assets_dir, "pole")
        self.bird_aspect = bird_image.get_width() / bird_image.get_height() if bird_image else 1.0
        self.renderer = Renderer(self.screen, bird_image, pole_image)
        self.session = Session(
            *self.screen.get_size(),
            audio=PygameAudio(assets_dir),
            store=store if store is not None else JsonScoreStore(default_best_score_path()),
            rng=random.Random(seed),
            bird_aspect=self.bird_aspect,
        )

    def handle_resize(self, width: int, height: int) -> None:
        self.screen = pygame.display.get_surface()
        self.session.resize(width, height)
        self.renderer.resize(self.screen)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Process one event. Returns False when the game should quit."""
        if event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
            return True
        action = map_event(event, self.session.state)
        if action is Action.QUIT:
            return False
        if action is not None:
            apply_action(self.session, action)
        return True

    def run(self) -> None:
        while True:
            dt = self.clock.tick()
            for event in pygame.event.get():
                if not self.handle_event(event):
                    pygame.quit()
                    sys.exit(0)

            self.session.tick(dt)
            self.renderer.draw(self.session.snapshot(), pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flappy-poles", description="Flap through the poles.")
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    parser.add_argument("--fps", type=int, default=FPS, help="frame rate cap")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle generation")
    parser.add_argument("--best-file", type=Path, default=None, help="where the best score is kept")
    parser.add_argument("--no-save", action="store_true", help="keep the best score in memory only")
    parser.add_argument("--assets", type=Path, default=None, help="directory with sprites and sounds")
    parser.add_argument("--log-level", default="info", help="debug, info, warning or error")
    parser.add_argument("--log-file", default=None, help="also write NDJSON logs to this file")
    return parser.parse_args(argv)


def make_store(args: argparse.Namespace) -> JsonScoreStore | MemoryScoreStore:
    if args.no_save:
        return MemoryScoreStore()
    return JsonScoreStore(args.best_file or default_best_score_path())


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    Game(
        args.width,
        args.height,
        fps=args.fps,
        seed=args.seed,
        store=make_store(args),
        assets_dir=args.assets,
    ).run()
